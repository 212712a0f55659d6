"""Threshold quantization of transform coefficients."""

import numpy as np
from typing import Optional, Tuple

from engines.validation import require_float_array, resolve_shape


def _clamp(threshold: float) -> float:
    # negative thresholds mean "keep everything"
    return max(threshold, 0)


def quantize_2d(
    array: np.ndarray,
    height: Optional[int],
    width: Optional[int],
    threshold: float
) -> int:
    """Zero every entry with |v| <= threshold, in place. Returns zeroed count."""
    require_float_array(array, 2)
    resolve_shape(array, (height, width))
    mask = np.abs(array) <= _clamp(threshold)
    array[mask] = 0.0
    return int(np.count_nonzero(mask))


def quantize_3d(
    array: np.ndarray,
    length: Optional[int],
    width: Optional[int],
    height: Optional[int],
    threshold: float
) -> int:
    """quantize_2d over a (length, width, height) volume."""
    require_float_array(array, 3)
    resolve_shape(array, (length, width, height))
    mask = np.abs(array) <= _clamp(threshold)
    array[mask] = 0.0
    return int(np.count_nonzero(mask))


# === Thresholding variants (return new arrays) ===

def hard_threshold(x: np.ndarray, threshold: float) -> np.ndarray:
    """x where |x| > threshold, 0 elsewhere."""
    x = np.asarray(x, dtype=np.float64)
    return np.where(np.abs(x) > threshold, x, 0.0)


def soft_threshold(x: np.ndarray, threshold: float) -> np.ndarray:
    """Hard threshold, then shrink survivors toward zero by ``threshold``."""
    x = np.asarray(x, dtype=np.float64)
    return np.sign(x) * np.maximum(np.abs(x) - threshold, 0.0)


def semisoft_threshold(x: np.ndarray, low: float, high: float) -> np.ndarray:
    """
    Interpolates between hard and soft thresholding.

    Below ``low`` coefficients vanish; on [low, high) magnitudes are mapped
    linearly from 0 to ``high``; at or above ``high`` they pass unchanged.
    """
    if high <= low:
        raise ValueError(f"Upper threshold {high} must exceed lower threshold {low}")
    x = np.asarray(x, dtype=np.float64)
    magnitude = np.abs(x)
    y = np.where(magnitude < low, 0.0, x)
    ramp = (magnitude >= low) & (magnitude < high)
    y[ramp] = np.sign(x[ramp]) * high / (high - low) * (magnitude[ramp] - low)
    return y


def keep_largest(x: np.ndarray, count: int) -> np.ndarray:
    """Keep the ``count`` largest-magnitude entries of every row."""
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 2:
        raise ValueError(f"Expected 2D coefficients, got {x.ndim}D")
    count = int(np.clip(count, 0, x.shape[1]))
    y = np.zeros_like(x)
    if count == 0:
        return y
    order = np.argsort(-np.abs(x), axis=1, kind='stable')[:, :count]
    rows = np.arange(x.shape[0])[:, np.newaxis]
    y[rows, order] = x[rows, order]
    return y


def percent_under(x: np.ndarray, amount: float) -> float:
    """Percentage of entries whose magnitude is at most ``amount``."""
    x = np.asarray(x)
    if x.size == 0:
        return 0.0
    return 100.0 * np.count_nonzero(np.abs(x) <= amount) / x.size


def discard_weakest(x: np.ndarray, percentage: float) -> Tuple[np.ndarray, float]:
    """
    Zero the weakest ``percentage`` percent of coefficients.

    Returns the thresholded copy and the magnitude cutoff; entries strictly
    below the cutoff are zeroed.
    """
    if not 0 <= percentage <= 100:
        raise ValueError(f"Percentage must be 0-100, got {percentage}")
    x = np.asarray(x, dtype=np.float64)
    cutoff = float(np.percentile(np.abs(x), percentage)) if x.size else 0.0
    return np.where(np.abs(x) < cutoff, 0.0, x), cutoff


# === DCT coefficient masks ===

def zonal_filter(coeffs: np.ndarray, fraction: float) -> np.ndarray:
    """Zero the high-frequency corner from (n*fraction, m*fraction) onwards."""
    if not 0 <= fraction <= 1:
        raise ValueError(f"Fraction must be 0-1, got {fraction}")
    y = np.array(coeffs, dtype=np.float64, copy=True)
    n, m = y.shape
    # round half away from zero
    i = int(np.floor(n * fraction + 0.5))
    j = int(np.floor(m * fraction + 0.5))
    y[i:, j:] = 0.0
    return y


def cut_least_significant(coeffs: np.ndarray) -> np.ndarray:
    """Zero the anti-diagonal and everything below it."""
    y = np.array(coeffs, dtype=np.float64, copy=True)
    n, m = y.shape
    i, j = np.indices((n, m))
    y[j > n - i - 2] = 0.0
    return y
