"""Reading MNIST samples from IDX image and label files."""

import struct
from dataclasses import dataclass

__all__ = ["MNISTSample", "IdxFormatError", "reverse_int", "load_mnist"]

IMAGE_MAGIC = 2051
LABEL_MAGIC = 2049


class IdxFormatError(ValueError):
    """Raised when an IDX file is malformed or too short."""


@dataclass(frozen=True)
class MNISTSample:
    """One image (raw 8-bit pixels, row-major) with its digit label."""

    image: bytes
    label: int


def reverse_int(value):
    """Swap the byte order of a 32-bit unsigned integer."""
    if not 0 <= value < 1 << 32:
        raise ValueError(f"{value} is not a 32-bit unsigned integer")
    return int.from_bytes(value.to_bytes(4, "little"), "big")


def _read_header(stream, count, path):
    raw = stream.read(4 * count)
    if len(raw) != 4 * count:
        raise IdxFormatError(f"{path}: header is truncated")
    return struct.unpack(f">{count}I", raw)


def load_mnist(image_file, label_file, num_samples=None):
    """Load ``num_samples`` samples (all of them if None) from a pair of IDX files."""
    with open(image_file, "rb") as images, open(label_file, "rb") as labels:
        magic, num_images, rows, cols = _read_header(images, 4, image_file)
        if magic != IMAGE_MAGIC:
            raise IdxFormatError(f"{image_file}: bad image magic number {magic}")
        label_magic, num_labels = _read_header(labels, 2, label_file)
        if label_magic != LABEL_MAGIC:
            raise IdxFormatError(f"{label_file}: bad label magic number {label_magic}")

        available = min(num_images, num_labels)
        count = available if num_samples is None else num_samples
        if count < 0:
            raise ValueError("num_samples must not be negative")
        if count > available:
            raise IdxFormatError(
                f"requested {count} samples but the files hold {available}"
            )

        image_size = rows * cols
        pixels = images.read(image_size * count)
        label_bytes = labels.read(count)

    if len(pixels) < image_size * count or len(label_bytes) < count:
        raise IdxFormatError("sample data is truncated")

    return [
        MNISTSample(pixels[i * image_size:(i + 1) * image_size], label)
        for i, label in enumerate(label_bytes)
    ]