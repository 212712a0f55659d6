"""Metrics: PSNR, SSIM, reconstruction error, coefficient sparsity."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def _data_range(original: np.ndarray) -> float:
    span = float(np.max(original) - np.min(original))
    return span if span > 0 else 1.0


def compute_psnr_ssim(original: np.ndarray, reconstructed: np.ndarray) -> Dict[str, float]:
    """
    PSNR and SSIM of a 2D reconstruction.

    The data range comes from the original, so spectrogram magnitudes and
    8-bit images are both handled. SSIM is NaN for arrays smaller than 3x3,
    where no valid window exists.
    """
    original = np.asarray(original, dtype=np.float64)
    reconstructed = np.asarray(reconstructed, dtype=np.float64)
    data_range = _data_range(original)

    mse = float(np.mean((original - reconstructed) ** 2))
    if mse == 0.0:
        psnr = float('inf')
    else:
        psnr = float(peak_signal_noise_ratio(original, reconstructed, data_range=data_range))

    smallest = min(original.shape)
    if smallest < 3:
        ssim = float('nan')
    else:
        # largest odd window that fits, capped at the skimage default
        win_size = min(7, smallest if smallest % 2 else smallest - 1)
        ssim = float(structural_similarity(
            original, reconstructed, data_range=data_range, win_size=win_size
        ))

    return {
        'psnr': psnr,
        'ssim': ssim,
        'mse': mse,
        'max_error': float(np.max(np.abs(original - reconstructed))),
    }


class Timer:
    """Simple timer for encode/decode runtime."""

    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0

    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result

    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms = (time.perf_counter() - start) * 1000.0
        return result


def coefficient_stats(coeffs: np.ndarray) -> Dict:
    """
    Sparsity of quantized coefficients WITHOUT entropy coding.

    The ratio is simply total / non-zero coefficients: how much smaller a
    list of surviving coefficients would be than the dense array.
    """
    total = int(coeffs.size)
    nonzero = int(np.count_nonzero(coeffs))

    return {
        'nonzero_count': nonzero,
        'total_coeffs': total,
        'sparsity': float(1.0 - nonzero / total) if total else 0.0,
        'compression_ratio': float(total / max(nonzero, 1)),
        'label': 'Coefficient count (no entropy coding)'
    }
