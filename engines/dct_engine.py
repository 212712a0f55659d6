"""DCT-II as a matrix multiplication, plus the scipy reference transform."""

import logging

import numpy as np
from scipy.fft import dctn, idctn

from engines.matrix import Matrix, ShapeMismatchError

logger = logging.getLogger(__name__)


def build_basis(rows: int, columns: int) -> Matrix:
    """
    Orthonormal DCT-II basis.

    M[i, j] = w(i) * cos(pi / columns * i * (j + 0.5)), where w(0) is
    1/sqrt(columns) and w(i > 0) is sqrt(2/columns). Row 0 is the DC
    vector. The rows are orthonormal when rows == columns, so the
    transpose doubles as the inverse.
    """
    if rows < 1 or columns < 1:
        raise ValueError(f"Basis dimensions must be positive, got {rows}x{columns}")

    i = np.arange(rows, dtype=np.float64)[:, np.newaxis]
    j = np.arange(columns, dtype=np.float64)[np.newaxis, :]
    weights = np.full((rows, 1), np.sqrt(2.0 / columns))
    weights[0, 0] = 1.0 / np.sqrt(columns)

    basis = weights * np.cos((np.pi / columns) * i * (j + 0.5))
    logger.debug("Built %dx%d DCT-II basis", rows, columns)
    return Matrix(basis, readonly=True)


def forward_transform(basis: Matrix, data) -> np.ndarray:
    """M x data. Transforms along the first axis of ``data``."""
    return basis.multiply(_as_matrix(data, basis.columns)).to_array()


def inverse_transform(basis: Matrix, data) -> np.ndarray:
    """transpose(M) x data."""
    return basis.transpose().multiply(_as_matrix(data, basis.rows)).to_array()


def forward_transform_2d(basis: Matrix, block) -> np.ndarray:
    """Separable 2D DCT of a square block: M x B x M^T."""
    mat = _as_matrix(block, basis.columns)
    if mat.columns != basis.columns:
        raise ShapeMismatchError(
            f"Block must be {basis.columns}x{basis.columns}, got {mat.rows}x{mat.columns}")
    return (basis @ mat @ basis.transpose()).to_array()


def inverse_transform_2d(basis: Matrix, coeffs) -> np.ndarray:
    """M^T x C x M."""
    mat = _as_matrix(coeffs, basis.rows)
    if mat.columns != basis.rows:
        raise ShapeMismatchError(
            f"Coefficients must be {basis.rows}x{basis.rows}, got {mat.rows}x{mat.columns}")
    return (basis.transpose() @ mat @ basis).to_array()


def dct2(data: np.ndarray, offset: float = 0.0) -> np.ndarray:
    """2D DCT-II with orthonormal normalization, ``offset`` added first."""
    return dctn(np.asarray(data, dtype=np.float64) + offset, type=2, norm='ortho')


def idct2(coeffs: np.ndarray, offset: float = 0.0) -> np.ndarray:
    """2D inverse DCT (Type-III), ``offset`` added to the result."""
    return idctn(np.asarray(coeffs, dtype=np.float64), type=2, norm='ortho') + offset


def _as_matrix(data, rows: int) -> Matrix:
    if isinstance(data, Matrix):
        if data.rows != rows:
            raise ShapeMismatchError(f"Expected {rows} rows, got {data.rows}")
        return data
    return Matrix(data, rows=rows)
