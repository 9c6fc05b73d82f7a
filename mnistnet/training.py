"""Mini-batch training and validation loops."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .activations import argmax, create_one_hot, mse_loss, normalize_input

__all__ = ["EpochResult", "shuffle_data", "train_network", "validate_network",
           "EPOCHS", "LEARNING_RATE", "BATCH_SIZE"]

EPOCHS = 25
LEARNING_RATE = 0.025
BATCH_SIZE = 20
_PROGRESS_EVERY = 1000


@dataclass(frozen=True)
class EpochResult:
    """Accuracy and mean loss over one pass through a data set."""

    correct: int
    total: int
    loss: float
    epoch: Optional[int] = None

    @property
    def accuracy(self):
        return self.correct / self.total


def shuffle_data(samples, rng=None):
    """Shuffle a mutable sequence of samples in place."""
    np.random.default_rng(rng).shuffle(samples)


def _evaluate(network, sample):
    output = network.forward(normalize_input(sample.image))
    loss = mse_loss(output, create_one_hot(sample.label, network.output_size))
    return loss, argmax(output) == sample.label


def _summary(prefix, result):
    return (f"{prefix} Accuracy: {result.accuracy * 100:.2f}% "
            f"({result.correct}/{result.total}), MSE Loss: {result.loss:.6f}")


def train_network(network, samples, epochs=EPOCHS, batch_size=BATCH_SIZE,
                  learning_rate=LEARNING_RATE, rng=None, log=print):
    """Train with mini-batch gradient descent; return one result per epoch."""
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")
    if not samples:
        raise ValueError("no training samples")
    generator = np.random.default_rng(rng)
    data = list(samples)
    total = len(data)
    num_batches = total // batch_size

    log("\nTraining...")
    log(f"Batch Size: {batch_size}")
    log(f"Learning Rate: {learning_rate:.3f}")
    log(f"Epochs: {epochs}")

    results = []
    for epoch in range(1, epochs + 1):
        log(f"Epoch {epoch}/{epochs}")
        shuffle_data(data, generator)
        epoch_loss = 0.0
        correct = 0
        starts = range(0, num_batches * batch_size, batch_size)
        for batch_number, start in enumerate(starts, 1):
            network.zero_gradients()
            for sample in data[start:start + batch_size]:
                loss, hit = _evaluate(network, sample)
                epoch_loss += loss
                correct += hit
                network.backward(sample.label)
            network.apply_gradients(learning_rate)
            if batch_number % _PROGRESS_EVERY == 0:
                log(f"  Processed {batch_number}/{num_batches} batches")
        result = EpochResult(correct, total, epoch_loss / total, epoch)
        log(_summary("Training", result))
        results.append(result)
    return results


def validate_network(network, samples, log=print):
    """Measure accuracy and mean loss on ``samples`` without training."""
    if not samples:
        raise ValueError("no validation samples")
    total_loss = 0.0
    correct = 0
    for sample in samples:
        loss, hit = _evaluate(network, sample)
        total_loss += loss
        correct += hit
    result = EpochResult(correct, len(samples), total_loss / len(samples))
    log(_summary("Validation", result))
    return result