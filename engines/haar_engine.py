"""
Separable Haar wavelet pyramid.

All transforms mutate the caller's float array in place. After a forward
pass the approximation coefficients sit in the top-left corner and the
detail coefficients of each level fill the rest, so the array shape never
changes. Odd extents leave their trailing sample untouched, which keeps
every step exactly invertible.
"""

import logging

import numpy as np
from typing import List, Optional, Tuple

from engines.validation import require_float_array, resolve_shape, check_extents

logger = logging.getLogger(__name__)

SQRT2 = np.sqrt(2.0)


def _analysis(data: np.ndarray, size: int) -> None:
    """One butterfly level along the last axis of ``data[..., :size]``."""
    half = size // 2
    even = data[..., 0:2 * half:2]
    odd = data[..., 1:2 * half:2]
    approx = (even + odd) / SQRT2
    detail = (even - odd) / SQRT2
    data[..., :half] = approx
    data[..., half:2 * half] = detail


def _synthesis(data: np.ndarray, size: int) -> None:
    """Exact inverse of _analysis."""
    half = size // 2
    approx = data[..., :half].copy()
    detail = data[..., half:2 * half].copy()
    data[..., 0:2 * half:2] = (approx + detail) / SQRT2
    data[..., 1:2 * half:2] = (approx - detail) / SQRT2


def _next_extent(extent: int) -> int:
    return extent // 2 if extent > 1 else extent


# === 1D ===

def haar1d_step(data: np.ndarray, size: Optional[int] = None) -> None:
    """Single forward level over the first ``size`` samples."""
    require_float_array(data, 1)
    (size,) = check_extents(data, (data.shape[0] if size is None else size,))
    if size > 1:
        _analysis(data, size)


def inverse_haar1d_step(data: np.ndarray, size: Optional[int] = None) -> None:
    """Single inverse level over the first ``size`` samples."""
    require_float_array(data, 1)
    (size,) = check_extents(data, (data.shape[0] if size is None else size,))
    if size > 1:
        _synthesis(data, size)


def _lengths_1d(length: int, levels: Optional[int]) -> List[int]:
    lengths = []
    while length > 1 and (levels is None or len(lengths) < levels):
        lengths.append(length)
        length //= 2
    return lengths


def haar1d_forward(data: np.ndarray, levels: Optional[int] = None) -> int:
    """Full dyadic decomposition, or ``levels`` of it. Returns levels applied."""
    require_float_array(data, 1)
    lengths = _lengths_1d(data.shape[0], levels)
    for length in lengths:
        _analysis(data, length)
    return len(lengths)


def haar1d_inverse(data: np.ndarray, levels: Optional[int] = None) -> int:
    require_float_array(data, 1)
    lengths = _lengths_1d(data.shape[0], levels)
    for length in reversed(lengths):
        _synthesis(data, length)
    return len(lengths)


# === 2D ===

def haar2d_step(array: np.ndarray, height: int, width: int) -> None:
    """
    One forward level over the active block ``array[:height, :width]``.

    Rows are transformed before columns.
    """
    require_float_array(array, 2)
    height, width = check_extents(array, (height, width))
    block = array[:height, :width]
    if width > 1:
        _analysis(block, width)
    if height > 1:
        _analysis(block.T, height)


def inverse_haar2d_step(array: np.ndarray, height: int, width: int) -> None:
    """One inverse level; columns first, then rows."""
    require_float_array(array, 2)
    height, width = check_extents(array, (height, width))
    block = array[:height, :width]
    if height > 1:
        _synthesis(block.T, height)
    if width > 1:
        _synthesis(block, width)


def level_extents(
    height: int,
    width: int,
    levels: Optional[int] = None,
    require_both: bool = False
) -> List[Tuple[int, int]]:
    """
    Active (height, width) at each forward level.

    The sequence stops once no extent exceeds 1 (or, with ``require_both``,
    once either extent reaches 1) or after ``levels`` entries.
    """
    extents = []
    h, w = height, width
    if h < 1 or w < 1:
        return extents
    while levels is None or len(extents) < levels:
        if require_both:
            if not (h > 1 and w > 1):
                break
        elif not (h > 1 or w > 1):
            break
        extents.append((h, w))
        h, w = _next_extent(h), _next_extent(w)
    return extents


def haar2d_forward(
    array: np.ndarray,
    height: Optional[int] = None,
    width: Optional[int] = None,
    levels: Optional[int] = None
) -> int:
    """Multi-level forward transform in place. Returns levels applied."""
    require_float_array(array, 2)
    height, width = resolve_shape(array, (height, width))
    extents = level_extents(height, width, levels)
    for h, w in extents:
        haar2d_step(array, h, w)
    logger.debug("Haar 2D forward %dx%d: %d levels", height, width, len(extents))
    return len(extents)


def haar2d_inverse(
    array: np.ndarray,
    height: Optional[int] = None,
    width: Optional[int] = None,
    levels: Optional[int] = None
) -> int:
    """Replays the forward extents in reverse order."""
    require_float_array(array, 2)
    height, width = resolve_shape(array, (height, width))
    extents = level_extents(height, width, levels)
    for h, w in reversed(extents):
        inverse_haar2d_step(array, h, w)
    logger.debug("Haar 2D inverse %dx%d: %d levels", height, width, len(extents))
    return len(extents)


# === 2D standard (tensor) layout ===

def haar2d_standard_forward(
    array: np.ndarray,
    height: Optional[int] = None,
    width: Optional[int] = None
) -> None:
    """
    Standard 2D decomposition in place: a full dyadic 1D pass down every
    column, then a full pass across every row of the result.

    Unlike haar2d_forward, detail bands mix scales, so row and column
    resolutions are independent.
    """
    require_float_array(array, 2)
    height, width = resolve_shape(array, (height, width))
    for length in _lengths_1d(height, None):
        _analysis(array.T, length)
    for length in _lengths_1d(width, None):
        _analysis(array, length)


def haar2d_standard_inverse(
    array: np.ndarray,
    height: Optional[int] = None,
    width: Optional[int] = None
) -> None:
    """Undo haar2d_standard_forward: rows first, then columns."""
    require_float_array(array, 2)
    height, width = resolve_shape(array, (height, width))
    for length in reversed(_lengths_1d(width, None)):
        _synthesis(array, length)
    for length in reversed(_lengths_1d(height, None)):
        _synthesis(array.T, length)


# === 3D ===

def haar3d_step(array: np.ndarray, length: int, width: int, height: int) -> None:
    """One forward level over ``array[:length, :width, :height]``, axes 0, 1, 2."""
    require_float_array(array, 3)
    extents = check_extents(array, (length, width, height))
    block = array[:extents[0], :extents[1], :extents[2]]
    for axis, extent in enumerate(extents):
        if extent > 1:
            _analysis(np.moveaxis(block, axis, -1), extent)


def inverse_haar3d_step(array: np.ndarray, length: int, width: int, height: int) -> None:
    """One inverse level, axes 2, 1, 0."""
    require_float_array(array, 3)
    extents = check_extents(array, (length, width, height))
    block = array[:extents[0], :extents[1], :extents[2]]
    for axis in reversed(range(3)):
        if extents[axis] > 1:
            _synthesis(np.moveaxis(block, axis, -1), extents[axis])
