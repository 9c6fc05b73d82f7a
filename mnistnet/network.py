"""A two-layer fully connected network with ReLU hidden units and softmax output."""

import math
from pathlib import Path

import numpy as np

from .activations import create_one_hot, relu, relu_derivative, softmax

__all__ = ["NeuralNetwork", "INPUT_SIZE", "HIDDEN_SIZE", "OUTPUT_SIZE"]

INPUT_SIZE = 784
HIDDEN_SIZE = 128
OUTPUT_SIZE = 10

_FILE_DTYPE = np.dtype("<f8")
_PARAMETER_NAMES = ("w1", "b1", "w2", "b2")


class NeuralNetwork:
    """Weights, the activations of the last forward pass and accumulated gradients."""

    def __init__(self, input_size=INPUT_SIZE, hidden_size=HIDDEN_SIZE,
                 output_size=OUTPUT_SIZE, rng=None):
        if min(input_size, hidden_size, output_size) <= 0:
            raise ValueError("layer sizes must be positive")
        generator = np.random.default_rng(rng)

        # He uniform initialisation: U(-sqrt(6/fan_in), sqrt(6/fan_in)).
        w1_scale = math.sqrt(6.0 / input_size)
        w2_scale = math.sqrt(6.0 / hidden_size)
        self.w1 = generator.uniform(-w1_scale, w1_scale, (input_size, hidden_size))
        self.b1 = np.zeros(hidden_size)
        self.w2 = generator.uniform(-w2_scale, w2_scale, (hidden_size, output_size))
        self.b2 = np.zeros(output_size)

        self.a0 = None
        self.z1 = None
        self.a1 = None
        self.z2 = None
        self.a2 = None

        self.zero_gradients()

    @property
    def input_size(self):
        return self.w1.shape[0]

    @property
    def hidden_size(self):
        return self.w1.shape[1]

    @property
    def output_size(self):
        return self.w2.shape[1]

    def forward(self, inputs):
        """Run the network on one input vector and return the output probabilities."""
        x = np.asarray(inputs, dtype=np.float64)
        if x.shape != (self.input_size,):
            raise ValueError(
                f"expected input of shape ({self.input_size},), got {x.shape}"
            )
        self.a0 = x.copy()
        self.z1 = self.a0 @ self.w1 + self.b1
        self.a1 = relu(self.z1)
        self.z2 = self.a1 @ self.w2 + self.b2
        self.a2 = softmax(self.z2)
        return self.a2

    def backward(self, target_label):
        """Accumulate gradients for the last forward pass against ``target_label``."""
        if self.a2 is None:
            raise RuntimeError("forward() must be called before backward()")
        target = create_one_hot(target_label, self.output_size)
        dz2 = self.a2 - target
        self.dw2 += np.outer(self.a1, dz2)
        self.db2 += dz2
        dz1 = (self.w2 @ dz2) * relu_derivative(self.z1)
        self.dw1 += np.outer(self.a0, dz1)
        self.db1 += dz1

    def zero_gradients(self):
        """Reset the gradient accumulators."""
        self.dw1 = np.zeros_like(self.w1)
        self.db1 = np.zeros_like(self.b1)
        self.dw2 = np.zeros_like(self.w2)
        self.db2 = np.zeros_like(self.b2)

    def apply_gradients(self, learning_rate):
        """Take one gradient-descent step with the accumulated gradients."""
        self.w1 -= learning_rate * self.dw1
        self.b1 -= learning_rate * self.db1
        self.w2 -= learning_rate * self.dw2
        self.b2 -= learning_rate * self.db2

    def save(self, filename):
        """Write W1, b1, W2, b2 as consecutive little-endian doubles."""
        with open(filename, "wb") as stream:
            for name in _PARAMETER_NAMES:
                stream.write(getattr(self, name).astype(_FILE_DTYPE).tobytes())

    def load(self, filename):
        """Read parameters written by :meth:`save` for a network of the same shape."""
        raw = Path(filename).read_bytes()
        shapes = [getattr(self, name).shape for name in _PARAMETER_NAMES]
        expected = sum(math.prod(shape) for shape in shapes) * _FILE_DTYPE.itemsize
        if len(raw) != expected:
            raise ValueError(
                f"{filename}: expected {expected} bytes of parameters, got {len(raw)}"
            )
        values = np.frombuffer(raw, dtype=_FILE_DTYPE).astype(np.float64)
        offset = 0
        for name, shape in zip(_PARAMETER_NAMES, shapes):
            count = math.prod(shape)
            setattr(self, name, values[offset:offset + count].reshape(shape).copy())
            offset += count