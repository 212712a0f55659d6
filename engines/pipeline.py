"""Main compression/reconstruction pipeline."""

import logging

import numpy as np
from typing import Tuple

from models.compression_params import CompressionParams
from models.compression_result import CompressionResult
from models.intermediate_data import IntermediateData
from engines.block_processor import pad_to_multiple, split_into_blocks, merge_blocks
from engines.dct_engine import (
    build_basis,
    forward_transform,
    inverse_transform,
    forward_transform_2d,
    inverse_transform_2d,
)
from engines.quantizer import quantize_2d
from engines.wavelet_codec import compress_2d, decompress_2d
from utils.constants import HISTOGRAM_BINS
from utils.metrics import compute_psnr_ssim, Timer, coefficient_stats

logger = logging.getLogger(__name__)


def compress_reconstruct(
    data: np.ndarray,
    params: CompressionParams
) -> Tuple[CompressionResult, IntermediateData]:
    """Run the lossy round trip on a copy of ``data`` and measure it."""
    original = np.array(data, dtype=np.float64, copy=True)
    if original.ndim != 2:
        raise ValueError(f"Expected a 2D array, got {original.ndim}D")
    timer = Timer()

    # === ENCODING ===
    if params.transform == 'haar':
        quantized = original.copy()
        state = timer.measure_encode(compress_2d, quantized, params.level, params.threshold)
        levels_applied = state.applied_levels
        approx_extent = state.final_extent

        def decode():
            coeffs = quantized.copy()
            decompress_2d(coeffs, state)
            return coeffs
    else:
        quantized, decode = timer.measure_encode(
            _dct_encode, original, params.block_size, params.threshold
        )
        levels_applied = 0
        approx_extent = (0, 0)

    # === DECODING ===
    reconstructed = timer.measure_decode(decode)

    # === METRICS ===
    metrics = compute_psnr_ssim(original, reconstructed)
    stats = coefficient_stats(quantized)

    result = CompressionResult(
        original=original,
        reconstructed=reconstructed,
        psnr=metrics['psnr'],
        ssim=metrics['ssim'],
        mse=metrics['mse'],
        max_error=metrics['max_error'],
        nonzero_coeffs=stats['nonzero_count'],
        total_coeffs=stats['total_coeffs'],
        sparsity=stats['sparsity'],
        compression_ratio=stats['compression_ratio'],
        levels_applied=levels_applied,
        encode_time_ms=timer.encode_time_ms,
        decode_time_ms=timer.decode_time_ms,
        ratio_label=stats['label']
    )
    logger.info(
        "%s level=%d threshold=%s: PSNR %.2f dB, %.1f%% zero coefficients",
        params.transform, levels_applied, params.threshold,
        result.psnr, 100.0 * result.sparsity
    )

    # === INTERMEDIATE DATA ===
    nonzero = quantized[quantized != 0]
    if nonzero.size > 0:
        hist, edges = np.histogram(nonzero, bins=HISTOGRAM_BINS)
    else:
        hist, edges = np.array([]), np.array([])

    intermediate = IntermediateData(
        quantized_coefficients=quantized,
        approximation_extent=approx_extent,
        error_map=np.abs(original - reconstructed),
        coefficient_histogram=hist,
        histogram_edges=edges
    )

    return result, intermediate


def _dct_encode(original: np.ndarray, block_size, threshold: float):
    """
    DCT + quantization. Returns the quantized coefficients and a closure
    that reconstructs the signal from them.
    """
    if block_size is None:
        rows, cols = original.shape
        row_basis = build_basis(rows, rows)
        col_basis = build_basis(cols, cols)
        quantized = forward_transform(col_basis, forward_transform(row_basis, original).T).T
        quantize_2d(quantized, rows, cols, threshold)

        def decode():
            return inverse_transform(row_basis, inverse_transform(col_basis, quantized.T).T)

        return quantized, decode

    padded, orig_shape = pad_to_multiple(original, block_size)
    blocks = split_into_blocks(padded, block_size)
    basis = build_basis(block_size, block_size)

    coeff_blocks = np.empty_like(blocks)
    for i in range(blocks.shape[0]):
        for j in range(blocks.shape[1]):
            coeff_blocks[i, j] = forward_transform_2d(basis, blocks[i, j])

    quantized = merge_blocks(coeff_blocks, padded.shape)
    quantize_2d(quantized, *quantized.shape, threshold)

    def decode():
        q_blocks = split_into_blocks(quantized, block_size)
        out = np.empty_like(q_blocks)
        for i in range(q_blocks.shape[0]):
            for j in range(q_blocks.shape[1]):
                out[i, j] = inverse_transform_2d(basis, q_blocks[i, j])
        return merge_blocks(out, orig_shape)

    return quantized, decode
