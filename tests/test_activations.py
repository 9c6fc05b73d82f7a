import numpy as np
import pytest

from mnistnet.activations import (
    argmax,
    create_one_hot,
    mse_loss,
    normalize_input,
    relu,
    relu_derivative,
    softmax,
)


def test_relu_scalar():
    assert relu(2.5) == 2.5
    assert relu(-3.0) == 0.0
    assert relu(0.0) == 0.0


def test_relu_array_matches_elementwise():
    values = np.array([-1.0, 0.5, 0.0, 4.0])
    result = relu(values)
    assert list(result) == [max(v, 0.0) for v in values]


def test_relu_derivative():
    assert relu_derivative(3.0) == 1.0
    assert relu_derivative(-3.0) == 0.0
    assert relu_derivative(0.0) == 0.0
    assert list(relu_derivative(np.array([-2.0, 2.0]))) == [0.0, 1.0]


def test_softmax_is_a_distribution():
    out = softmax([1.0, 2.0, 3.0])
    assert out.sum() == pytest.approx(1.0)
    assert np.all(out > 0)
    assert list(np.argsort(out)) == [0, 1, 2]


def test_softmax_shift_invariant_and_stable():
    base = np.array([1.0, -2.0, 0.5])
    assert np.allclose(softmax(base), softmax(base + 1000.0))
    assert np.all(np.isfinite(softmax([1e6, 1e6 - 1.0])))


def test_softmax_empty_raises():
    with pytest.raises(ValueError):
        softmax([])


def test_argmax_first_wins_on_ties():
    assert argmax([1.0, 3.0, 3.0]) == 1
    assert argmax([5.0]) == 0


def test_argmax_empty_raises():
    with pytest.raises(ValueError):
        argmax([])


def test_mse_loss_properties():
    a = [0.1, 0.2, 0.7]
    b = [0.0, 0.0, 1.0]
    assert mse_loss(a, a) == 0.0
    assert mse_loss(a, b) == pytest.approx(mse_loss(b, a))
    assert mse_loss(a, b) > 0


def test_mse_loss_shape_mismatch():
    with pytest.raises(ValueError):
        mse_loss([1.0, 2.0], [1.0])


def test_create_one_hot():
    vec = create_one_hot(3, 10)
    assert len(vec) == 10
    assert vec.sum() == 1.0
    assert vec[3] == 1.0


def test_create_one_hot_out_of_range_is_all_zero():
    assert create_one_hot(10, 10).sum() == 0.0
    assert create_one_hot(-1, 10).sum() == 0.0


def test_normalize_input_bytes_and_lists():
    assert list(normalize_input(bytes([0, 255]))) == [0.0, 1.0]
    out = normalize_input([0, 51, 255])
    assert out.min() >= 0.0 and out.max() <= 1.0
    assert out[2] == 1.0