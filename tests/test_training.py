import numpy as np
import pytest

from mnistnet.activations import argmax, normalize_input
from mnistnet.mnist import MNISTSample
from mnistnet.network import NeuralNetwork
from mnistnet.training import (
    EpochResult,
    shuffle_data,
    train_network,
    validate_network,
)


def _separable_samples(repeat=8):
    zero = MNISTSample(bytes([255, 255, 0, 0]), 0)
    one = MNISTSample(bytes([0, 0, 255, 255]), 1)
    return [zero, one] * repeat


def test_shuffle_is_a_permutation():
    items = list(range(50))
    shuffle_data(items, 0)
    assert sorted(items) == list(range(50))


def test_shuffle_is_deterministic_with_seed():
    a = list(range(30))
    b = list(range(30))
    shuffle_data(a, 7)
    shuffle_data(b, 7)
    assert a == b


def test_epoch_result_accuracy():
    assert EpochResult(3, 4, 0.1).accuracy == 0.75


def test_train_logs_and_results():
    net = NeuralNetwork(4, 8, 2, rng=0)
    messages = []
    results = train_network(net, _separable_samples(), epochs=2, batch_size=2,
                            learning_rate=0.1, rng=0, log=messages.append)
    assert [r.epoch for r in results] == [1, 2]
    assert all(r.total == 16 for r in results)
    assert "Epoch 2/2" in messages
    assert "Batch Size: 2" in messages
    assert "Learning Rate: 0.100" in messages
    assert any(m.startswith("Training Accuracy:") for m in messages)


def test_training_learns_separable_data():
    net = NeuralNetwork(4, 8, 2, rng=1)
    samples = _separable_samples()
    train_network(net, samples, epochs=40, batch_size=2, learning_rate=0.1,
                  rng=1, log=lambda _m: None)
    result = validate_network(net, samples, log=lambda _m: None)
    assert result.correct == result.total


def test_training_does_not_reorder_callers_list():
    samples = [MNISTSample(bytes([i, 0, 0, 0]), i % 2) for i in range(10)]
    original = list(samples)
    train_network(NeuralNetwork(4, 4, 2, rng=0), samples, epochs=1, batch_size=5,
                  rng=0, log=lambda _m: None)
    assert samples == original


def test_validate_counts_match_predictions():
    net = NeuralNetwork(4, 4, 2, rng=5)
    samples = _separable_samples(3)
    messages = []
    result = validate_network(net, samples, log=messages.append)
    expected = sum(argmax(net.forward(normalize_input(s.image))) == s.label
                   for s in samples)
    assert result.correct == expected
    assert result.epoch is None
    assert messages[0].startswith("Validation Accuracy:")
    assert np.isfinite(result.loss)


def test_invalid_arguments():
    net = NeuralNetwork(4, 4, 2, rng=0)
    with pytest.raises(ValueError):
        train_network(net, _separable_samples(), batch_size=0, log=lambda _m: None)
    with pytest.raises(ValueError):
        train_network(net, [], log=lambda _m: None)
    with pytest.raises(ValueError):
        validate_network(net, [], log=lambda _m: None)