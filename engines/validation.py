"""Precondition checks shared by the in-place engines."""

import numpy as np
from typing import Optional, Sequence, Tuple

from engines.matrix import ShapeMismatchError


def require_float_array(array, ndim: int) -> np.ndarray:
    """Reject anything that cannot be mutated in place as float data."""
    if not isinstance(array, np.ndarray):
        raise TypeError(
            f"Expected numpy.ndarray for in-place transform, got {type(array).__name__}")
    if not np.issubdtype(array.dtype, np.floating):
        raise TypeError(f"Expected floating-point array, got dtype {array.dtype}")
    if array.ndim != ndim:
        raise ShapeMismatchError(f"Expected {ndim}D array, got {array.ndim}D")
    return array


def resolve_shape(array: np.ndarray, declared: Sequence[Optional[int]]) -> Tuple[int, ...]:
    """Fill omitted dimensions from the array and check the declared ones."""
    resolved = []
    for axis, (actual, dim) in enumerate(zip(array.shape, declared)):
        if dim is None:
            dim = actual
        elif dim != actual:
            raise ShapeMismatchError(
                f"Declared size {dim} on axis {axis} but array has {actual}")
        resolved.append(int(dim))
    return tuple(resolved)


def check_extents(array: np.ndarray, extents: Sequence[int]) -> Tuple[int, ...]:
    """Active extents must lie within [1, array.shape[axis]]."""
    for axis, (actual, extent) in enumerate(zip(array.shape, extents)):
        if not 1 <= extent <= actual:
            raise ShapeMismatchError(
                f"Active extent {extent} on axis {axis} outside 1..{actual}")
    return tuple(int(e) for e in extents)
