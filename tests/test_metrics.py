"""Tests for quality metrics and coefficient statistics."""

import numpy as np
import pytest
from utils.metrics import compute_psnr_ssim, coefficient_stats, Timer


def test_identical_arrays():
    data = np.random.rand(16, 16) * 255
    metrics = compute_psnr_ssim(data, data.copy())
    assert metrics['psnr'] == float('inf')
    assert metrics['ssim'] == pytest.approx(1.0)
    assert metrics['mse'] == 0.0
    assert metrics['max_error'] == 0.0


def test_psnr_uses_original_range():
    original = np.zeros((8, 8))
    original[0, 0] = 10.0
    noisy = original + 1.0
    metrics = compute_psnr_ssim(original, noisy)
    # data range 10, mse 1
    assert metrics['psnr'] == pytest.approx(20.0)
    assert metrics['max_error'] == pytest.approx(1.0)


def test_small_arrays_skip_ssim():
    metrics = compute_psnr_ssim(np.ones((2, 5)), np.zeros((2, 5)))
    assert np.isnan(metrics['ssim'])
    assert np.isfinite(metrics['psnr'])


def test_coefficient_stats():
    coeffs = np.zeros((10, 10))
    coeffs[0, :5] = 3.0
    stats = coefficient_stats(coeffs)
    assert stats['nonzero_count'] == 5
    assert stats['total_coeffs'] == 100
    assert stats['sparsity'] == pytest.approx(0.95)
    assert stats['compression_ratio'] == pytest.approx(20.0)


def test_coefficient_stats_all_zero():
    stats = coefficient_stats(np.zeros((4, 4)))
    assert stats['compression_ratio'] == 16.0
    assert stats['sparsity'] == 1.0


def test_timer_records_both_phases():
    timer = Timer()
    assert timer.measure_encode(sum, [1, 2, 3]) == 6
    assert timer.measure_decode(max, [1, 2, 3]) == 3
    assert timer.encode_time_ms >= 0.0
    assert timer.decode_time_ms >= 0.0
