"""Element-wise activations, losses and small vector helpers."""

import numpy as np

__all__ = [
    "relu",
    "relu_derivative",
    "softmax",
    "argmax",
    "mse_loss",
    "create_one_hot",
    "normalize_input",
]

_PIXEL_MAX = 255.0


def _scalar_or_array(values):
    return float(values) if values.ndim == 0 else values


def relu(x):
    """Return ``max(x, 0)`` for a scalar or element-wise for an array."""
    arr = np.asarray(x, dtype=np.float64)
    return _scalar_or_array(np.where(arr > 0, arr, 0.0))


def relu_derivative(x):
    """Return 1 where ``x`` is positive and 0 elsewhere."""
    arr = np.asarray(x, dtype=np.float64)
    return _scalar_or_array(np.where(arr > 0, 1.0, 0.0))


def softmax(values):
    """Numerically stable softmax of a one-dimensional vector."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise ValueError("softmax of an empty vector")
    exps = np.exp(arr - arr.max())
    return exps / exps.sum()


def argmax(values):
    """Index of the largest value; the first one wins on ties."""
    arr = np.asarray(values)
    if arr.size == 0:
        raise ValueError("argmax of an empty vector")
    return int(np.argmax(arr))


def mse_loss(predicted, target):
    """Mean squared error between two vectors of equal shape."""
    p = np.asarray(predicted, dtype=np.float64)
    t = np.asarray(target, dtype=np.float64)
    if p.shape != t.shape:
        raise ValueError(f"shape mismatch: {p.shape} vs {t.shape}")
    return float(np.mean((p - t) ** 2))


def create_one_hot(label, size):
    """Vector of ``size`` zeros with a 1 at ``label`` (all zeros if out of range)."""
    one_hot = np.zeros(size, dtype=np.float64)
    if 0 <= label < size:
        one_hot[label] = 1.0
    return one_hot


def normalize_input(raw_input):
    """Scale raw 8-bit pixel values into the range [0, 1]."""
    if isinstance(raw_input, (bytes, bytearray, memoryview)):
        pixels = np.frombuffer(raw_input, dtype=np.uint8)
    else:
        pixels = np.asarray(raw_input)
    return pixels.astype(np.float64) / _PIXEL_MAX