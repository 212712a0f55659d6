"""Dense real-valued matrix used by the orthogonal transform path."""

import numpy as np
from typing import Optional


class ShapeMismatchError(ValueError):
    """Array or matrix dimensions do not agree with what an operation needs."""


class Matrix:
    """
    Fixed-size row-major matrix of float64 values.

    Dimensions are set at construction and never change. Passing
    ``rows``/``columns`` together with ``data`` declares the expected shape;
    a mismatch raises ShapeMismatchError instead of silently reshaping.
    """

    def __init__(self, data=None, rows: Optional[int] = None,
                 columns: Optional[int] = None, readonly: bool = False):
        if data is None:
            if rows is None or columns is None:
                raise ValueError("rows and columns are required without data")
            values = np.zeros((rows, columns), dtype=np.float64)
        else:
            values = _to_2d(data)
            if rows is not None and values.shape[0] != rows:
                raise ShapeMismatchError(
                    f"Declared {rows} rows, data has {values.shape[0]}")
            if columns is not None and values.shape[1] != columns:
                raise ShapeMismatchError(
                    f"Declared {columns} columns, data has {values.shape[1]}")

        self._data = values
        if readonly:
            self._data.flags.writeable = False

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    def get(self, i: int, j: int) -> float:
        self._check_index(i, j)
        return float(self._data[i, j])

    def set(self, i: int, j: int, value: float) -> None:
        self._check_index(i, j)
        self._data[i, j] = value

    def multiply(self, other: "Matrix") -> "Matrix":
        """Matrix product; inner dimensions must agree."""
        if not isinstance(other, Matrix):
            raise TypeError(f"Expected Matrix, got {type(other).__name__}")
        if self.columns != other.rows:
            raise ShapeMismatchError(
                f"Cannot multiply {self.rows}x{self.columns} by "
                f"{other.rows}x{other.columns}")
        return Matrix(self._data @ other._data)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        return self.multiply(other)

    def transpose(self) -> "Matrix":
        return Matrix(self._data.T)

    def to_array(self) -> np.ndarray:
        """Copy of the matrix contents as a writable ndarray."""
        return np.array(self._data, dtype=np.float64, copy=True)

    def _check_index(self, i: int, j: int) -> None:
        if not (0 <= i < self.rows and 0 <= j < self.columns):
            raise IndexError(
                f"Index ({i}, {j}) outside {self.rows}x{self.columns} matrix")

    def __repr__(self):
        return f"Matrix({self.rows}x{self.columns})"


def _to_2d(data) -> np.ndarray:
    try:
        values = np.array(data, dtype=np.float64, copy=True)
    except ValueError as exc:
        # ragged nested sequences cannot form a rectangular buffer
        raise ShapeMismatchError(f"Rows have differing lengths: {exc}") from exc
    if values.ndim != 2:
        raise ShapeMismatchError(f"Expected 2D data, got {values.ndim}D")
    if values.shape[0] == 0 or values.shape[1] == 0:
        raise ShapeMismatchError("Matrix data is empty")
    return values
