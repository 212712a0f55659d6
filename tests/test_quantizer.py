"""Tests for quantization and thresholding."""

import numpy as np
import pytest

from engines.quantizer import (
    quantize_2d,
    quantize_3d,
    hard_threshold,
    soft_threshold,
    semisoft_threshold,
    keep_largest,
    percent_under,
    discard_weakest,
    zonal_filter,
    cut_least_significant,
)
from engines.matrix import ShapeMismatchError


def test_quantize_2d_zeroes_at_or_below_threshold():
    data = np.array([[0.5, -2.0, 2.0], [3.0, -3.5, 0.0]])
    zeroed = quantize_2d(data, 2, 3, 2)
    assert np.array_equal(data, [[0.0, 0.0, 0.0], [3.0, -3.5, 0.0]])
    assert zeroed == 4


def test_quantize_2d_zero_threshold_is_identity():
    data = np.random.rand(5, 5) + 0.1
    original = data.copy()
    quantize_2d(data, 5, 5, 0)
    assert np.array_equal(data, original)


def test_negative_threshold_is_clamped():
    """Negative thresholds behave like zero instead of raising."""
    data = np.array([[-1.0, 0.0, 1.0]])
    quantize_2d(data, 1, 3, -5)
    assert np.array_equal(data, [[-1.0, 0.0, 1.0]])


def test_quantize_monotonic_in_threshold():
    """Entries zeroed at t1 stay zeroed at any t2 > t1."""
    base = np.random.randn(16, 16) * 10
    low, high = base.copy(), base.copy()
    quantize_2d(low, 16, 16, 3)
    quantize_2d(high, 16, 16, 7)
    zeroed_low = low == 0.0
    zeroed_high = high == 0.0
    assert np.all(zeroed_high[zeroed_low])
    assert zeroed_high.sum() >= zeroed_low.sum()


def test_quantize_2d_accepts_omitted_dimensions():
    data = np.array([[0.1, 5.0]])
    quantize_2d(data, None, None, 1)
    assert np.array_equal(data, [[0.0, 5.0]])


def test_quantize_2d_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        quantize_2d(np.zeros((4, 4)), 4, 5, 1)


def test_quantize_3d():
    data = np.arange(-4, 4, dtype=np.float64).reshape(2, 2, 2)
    zeroed = quantize_3d(data, 2, 2, 2, 1)
    assert zeroed == 3
    assert np.array_equal(data.ravel(), [-4, -3, -2, 0, 0, 0, 2, 3])


def test_quantize_3d_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        quantize_3d(np.zeros((2, 3, 4)), 2, 4, 3, 1)


def test_quantize_rejects_integer_arrays():
    with pytest.raises(TypeError):
        quantize_2d(np.zeros((2, 2), dtype=np.int64), 2, 2, 1)


def test_hard_threshold_returns_copy():
    x = np.array([-3.0, -1.0, 0.5, 1.0, 4.0])
    y = hard_threshold(x, 1.0)
    assert np.array_equal(y, [-3.0, 0.0, 0.0, 0.0, 4.0])
    assert x[1] == -1.0


def test_soft_threshold_shrinks():
    y = soft_threshold(np.array([-3.0, -1.0, 0.5, 2.5]), 1.0)
    assert np.allclose(y, [-2.0, 0.0, 0.0, 1.5])


def test_semisoft_threshold():
    y = semisoft_threshold(np.array([0.5, 1.5, -1.5, 3.0, -4.0]), 1.0, 2.0)
    # ramp maps [1, 2) onto [0, 2)
    assert np.allclose(y, [0.0, 1.0, -1.0, 3.0, -4.0])


def test_semisoft_requires_ordered_thresholds():
    with pytest.raises(ValueError):
        semisoft_threshold(np.ones(3), 2.0, 2.0)


def test_keep_largest_per_row():
    x = np.array([[1.0, -5.0, 3.0, 0.5], [2.0, 2.5, -0.1, -4.0]])
    y = keep_largest(x, 2)
    assert np.array_equal(y, [[0.0, -5.0, 3.0, 0.0], [0.0, 2.5, 0.0, -4.0]])
    assert np.count_nonzero(keep_largest(x, 0)) == 0


def test_percent_under():
    x = np.array([[0.0, 1.0], [2.0, 3.0]])
    assert percent_under(x, 1.0) == 50.0
    assert percent_under(x, 10.0) == 100.0


def test_discard_weakest():
    x = np.arange(1, 101, dtype=np.float64)
    y, cutoff = discard_weakest(x, 30)
    assert 30.0 <= cutoff <= 31.0
    assert np.count_nonzero(y == 0) == 30
    assert np.all(y[30:] == x[30:])


def test_discard_weakest_rejects_bad_percentage():
    with pytest.raises(ValueError):
        discard_weakest(np.ones(4), 120)


def test_zonal_filter():
    coeffs = np.ones((4, 4))
    y = zonal_filter(coeffs, 0.5)
    assert np.all(y[2:, 2:] == 0.0)
    assert np.all(y[:2, :] == 1.0)
    assert np.all(y[:, :2] == 1.0)
    assert np.all(coeffs == 1.0)


def test_cut_least_significant():
    y = cut_least_significant(np.ones((3, 3)))
    assert np.array_equal(y, [[1, 1, 0], [1, 0, 0], [0, 0, 0]])
