"""Haar compress/decompress round trip with hard-threshold quantization."""

import logging

import numpy as np
from dataclasses import dataclass
from typing import List, Tuple

from engines.haar_engine import haar2d_step, inverse_haar2d_step
from engines.matrix import ShapeMismatchError
from engines.quantizer import quantize_2d
from engines.validation import require_float_array

logger = logging.getLogger(__name__)


@dataclass
class CompressState:
    """What compress_2d did, so decompress_2d can undo exactly that."""

    shape: Tuple[int, int]
    requested_levels: int
    extents: List[Tuple[int, int]]
    zeroed: int = 0

    @property
    def applied_levels(self) -> int:
        return len(self.extents)

    @property
    def final_extent(self) -> Tuple[int, int]:
        """Approximation block size after the last forward level."""
        if not self.extents:
            return self.shape
        h, w = self.extents[-1]
        return (h // 2, w // 2)


def compress_2d(array: np.ndarray, level: int, threshold: float) -> CompressState:
    """
    Forward Haar levels followed by quantization, in place.

    A level is applied only while both active extents exceed 1, so fewer
    than ``level`` levels run on small or odd-sized arrays. A negative
    ``level`` applies none.
    """
    require_float_array(array, 2)
    height, width = array.shape
    levels_remaining = level
    extents = []

    while levels_remaining > 0 and height > 1 and width > 1:
        haar2d_step(array, height, width)
        extents.append((height, width))
        logger.debug("Forward level %d over %dx%d", len(extents), height, width)
        width //= 2
        height //= 2
        levels_remaining -= 1

    zeroed = quantize_2d(array, *array.shape, threshold)
    if len(extents) < level:
        logger.debug("Requested %d levels, %d applied", level, len(extents))
    return CompressState(
        shape=array.shape,
        requested_levels=level,
        extents=extents,
        zeroed=zeroed
    )


def decompress_2d(array: np.ndarray, state: CompressState) -> None:
    """Inverse Haar levels mirroring ``state``, in place."""
    require_float_array(array, 2)
    if array.shape != tuple(state.shape):
        raise ShapeMismatchError(
            f"State recorded for {state.shape}, array is {array.shape}")
    for height, width in reversed(state.extents):
        inverse_haar2d_step(array, height, width)
        logger.debug("Inverse level over %dx%d", height, width)


def compress_decompress_2d(array: np.ndarray, level: int, threshold: float) -> int:
    """
    Lossy round trip in place: ``level`` forward levels, quantization, then
    the same number of inverse levels. Returns the number of levels applied.

    With threshold 0 the array comes back unchanged up to rounding.
    """
    state = compress_2d(array, level, threshold)
    decompress_2d(array, state)
    return state.applied_levels
