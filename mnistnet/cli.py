"""Command line entry point: train, validate and save an MNIST classifier."""

import argparse
import sys
import time
from pathlib import Path

from .mnist import IdxFormatError, load_mnist
from .network import HIDDEN_SIZE, NeuralNetwork
from .training import (
    BATCH_SIZE,
    EPOCHS,
    LEARNING_RATE,
    train_network,
    validate_network,
)

TRAIN_SIZE = 60000
TEST_SIZE = 10000


def _parser():
    parser = argparse.ArgumentParser(
        prog="mnistnet", description="Train a small neural network on MNIST."
    )
    parser.add_argument("--data-dir", default="MNIST", type=Path)
    parser.add_argument("--output", default="model_data/model_parameters.bin",
                        type=Path)
    parser.add_argument("--load", type=Path, default=None,
                        help="load saved parameters and only validate")
    parser.add_argument("--epochs", type=int, default=EPOCHS)
    parser.add_argument("--batch-size", type=int, default=BATCH_SIZE)
    parser.add_argument("--learning-rate", type=float, default=LEARNING_RATE)
    parser.add_argument("--hidden-size", type=int, default=HIDDEN_SIZE)
    parser.add_argument("--train-size", type=int, default=TRAIN_SIZE)
    parser.add_argument("--test-size", type=int, default=TEST_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv=None):
    """Run the program; return the process exit status."""
    args = _parser().parse_args(argv)
    start = time.process_time()
    data = args.data_dir
    try:
        test_data = load_mnist(data / "t10k-images-idx3-ubyte",
                               data / "t10k-labels-idx1-ubyte", args.test_size)
        network = NeuralNetwork(input_size=len(test_data[0].image),
                                hidden_size=args.hidden_size, rng=args.seed)
        if args.load is not None:
            network.load(args.load)
            validate_network(network, test_data)
        else:
            train_data = load_mnist(data / "train-images-idx3-ubyte",
                                    data / "train-labels-idx1-ubyte",
                                    args.train_size)
            train_network(network, train_data, epochs=args.epochs,
                          batch_size=args.batch_size,
                          learning_rate=args.learning_rate, rng=args.seed)
            validate_network(network, test_data)
            args.output.parent.mkdir(parents=True, exist_ok=True)
            network.save(args.output)
    except (OSError, IdxFormatError, ValueError, IndexError) as exc:
        print(f"mnistnet: {exc}", file=sys.stderr)
        return 1

    print(f"CPU time elapsed: {time.process_time() - start:f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())