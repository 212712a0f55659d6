"""Tests for grayscale image I/O and synthetic arrays."""

import numpy as np
import pytest
from utils.image_io import load_grayscale, save_grayscale
from utils.test_images import generate_checkerboard, generate_stripes


def test_save_load_round_trip(tmp_path):
    board = generate_checkerboard(64, square=16)
    path = str(tmp_path / "board.png")
    save_grayscale(board, path)
    loaded = load_grayscale(path)
    assert loaded.dtype == np.float64
    assert np.array_equal(loaded, board)


def test_save_clips_out_of_range(tmp_path):
    path = str(tmp_path / "clipped.png")
    save_grayscale(np.array([[-20.0, 300.0], [127.4, 127.6]]), path)
    assert np.array_equal(load_grayscale(path), [[0, 255], [127, 128]])


def test_load_missing_file(tmp_path):
    with pytest.raises(ValueError):
        load_grayscale(str(tmp_path / "missing.png"))


def test_stripes_are_constant_down_columns():
    stripes = generate_stripes(16, stripe_width=2)
    assert stripes.shape == (16, 16)
    assert np.all(stripes == stripes[0])
