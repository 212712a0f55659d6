"""Block processing: padding, tiling into square blocks, reassembly."""

import numpy as np
from typing import Tuple


def pad_to_multiple(array: np.ndarray, block_size: int) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Pad a 2D array to a multiple of block_size by mirroring its edges."""
    h, w = array.shape
    pad_h = (block_size - h % block_size) % block_size
    pad_w = (block_size - w % block_size) % block_size
    padded = np.pad(array.astype(np.float64), ((0, pad_h), (0, pad_w)), mode='symmetric')
    return padded, (h, w)


def split_into_blocks(array: np.ndarray, block_size: int) -> np.ndarray:
    """
    Tile a padded array into a (rows, cols, B, B) grid of blocks.

    The input dimensions must already be multiples of block_size.
    """
    h, w = array.shape
    if h % block_size or w % block_size:
        raise ValueError(f"{h}x{w} is not a multiple of block size {block_size}")
    grid = array.reshape(h // block_size, block_size, w // block_size, block_size)
    return grid.swapaxes(1, 2).copy()


def merge_blocks(blocks: np.ndarray, shape: Tuple[int, int]) -> np.ndarray:
    """Inverse of split_into_blocks, cropped to ``shape``."""
    rows, cols, bs, _ = blocks.shape
    merged = blocks.swapaxes(1, 2).reshape(rows * bs, cols * bs)
    h, w = shape
    return merged[:h, :w].copy()
