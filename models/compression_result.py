"""Compression result with metrics."""

from dataclasses import dataclass
import numpy as np


@dataclass
class CompressionResult:
    """Results from the compress/reconstruct pipeline."""

    original: np.ndarray
    reconstructed: np.ndarray

    # Quality metrics
    psnr: float
    ssim: float
    mse: float
    max_error: float

    # Coefficient stats
    nonzero_coeffs: int
    total_coeffs: int
    sparsity: float
    compression_ratio: float
    levels_applied: int

    # Runtime
    encode_time_ms: float
    decode_time_ms: float

    ratio_label: str = "Coefficient count (no entropy coding)"
