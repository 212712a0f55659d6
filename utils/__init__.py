"""Shared utilities."""

from .constants import DEFAULT_LEVEL, DEFAULT_THRESHOLD, DEFAULT_BLOCK_SIZE
from .metrics import compute_psnr_ssim, Timer, coefficient_stats
from .test_images import (
    generate_checkerboard,
    generate_gradient,
    generate_stripes,
    generate_spectrogram,
)
from .image_io import load_grayscale, save_grayscale

__all__ = [
    'DEFAULT_LEVEL',
    'DEFAULT_THRESHOLD',
    'DEFAULT_BLOCK_SIZE',
    'compute_psnr_ssim',
    'Timer',
    'coefficient_stats',
    'generate_checkerboard',
    'generate_gradient',
    'generate_stripes',
    'generate_spectrogram',
    'load_grayscale',
    'save_grayscale',
]
