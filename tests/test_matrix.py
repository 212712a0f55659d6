"""Tests for the dense Matrix container."""

import numpy as np
import pytest

from engines.matrix import Matrix, ShapeMismatchError


def test_multiply():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    b = Matrix([[7, 8], [9, 10], [11, 12]])
    product = a.multiply(b)
    assert (product.rows, product.columns) == (2, 2)
    assert np.allclose(product.to_array(), [[58, 64], [139, 154]])


def test_matmul_operator():
    a = Matrix(np.eye(3) * 2)
    b = Matrix(np.arange(9).reshape(3, 3))
    assert np.allclose((a @ b).to_array(), 2 * np.arange(9).reshape(3, 3))


def test_multiply_shape_mismatch():
    """Inner dimensions must agree."""
    with pytest.raises(ShapeMismatchError):
        Matrix(np.ones((2, 3))).multiply(Matrix(np.ones((2, 3))))


def test_transpose():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    t = m.transpose()
    assert t.shape == (3, 2)
    assert t.get(2, 1) == 6.0
    assert m.get(1, 2) == 6.0


def test_get_set():
    m = Matrix(rows=2, columns=3)
    assert m.get(1, 2) == 0.0
    m.set(1, 2, 4.5)
    assert m.get(1, 2) == 4.5


def test_out_of_range_index():
    m = Matrix(rows=2, columns=2)
    with pytest.raises(IndexError):
        m.get(2, 0)
    with pytest.raises(IndexError):
        m.set(0, -1, 1.0)


def test_declared_dimensions_must_match():
    with pytest.raises(ShapeMismatchError):
        Matrix(np.ones((3, 4)), rows=4, columns=3)
    with pytest.raises(ShapeMismatchError):
        Matrix(np.ones((3, 4)), columns=5)


def test_ragged_rows_rejected():
    with pytest.raises(ShapeMismatchError):
        Matrix([[1.0, 2.0], [3.0]])


def test_non_2d_rejected():
    with pytest.raises(ShapeMismatchError):
        Matrix(np.ones(4))


def test_shape_mismatch_is_value_error():
    assert issubclass(ShapeMismatchError, ValueError)


def test_to_array_is_a_copy():
    """Mutating the exported array leaves the matrix untouched."""
    m = Matrix([[1.0, 2.0]])
    exported = m.to_array()
    exported[0, 0] = 99.0
    assert m.get(0, 0) == 1.0


def test_constructor_copies_input():
    data = np.ones((2, 2))
    m = Matrix(data)
    data[0, 0] = 5.0
    assert m.get(0, 0) == 1.0


def test_multiply_requires_matrix():
    with pytest.raises(TypeError):
        Matrix(np.eye(2)).multiply(np.eye(2))
