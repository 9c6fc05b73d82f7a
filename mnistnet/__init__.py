"""A small two-layer neural network for classifying MNIST digits: IDX loading, training, validation and parameter files."""

__version__ = "0.1.0"