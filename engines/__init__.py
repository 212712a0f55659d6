"""Transform engines - pure computation, no I/O."""

from .matrix import Matrix, ShapeMismatchError
from .dct_engine import (
    build_basis,
    forward_transform,
    inverse_transform,
    forward_transform_2d,
    inverse_transform_2d,
    dct2,
    idct2,
)
from .haar_engine import (
    haar1d_step,
    inverse_haar1d_step,
    haar1d_forward,
    haar1d_inverse,
    haar2d_step,
    inverse_haar2d_step,
    haar2d_forward,
    haar2d_inverse,
    haar2d_standard_forward,
    haar2d_standard_inverse,
    haar3d_step,
    inverse_haar3d_step,
    level_extents,
)
from .quantizer import (
    quantize_2d,
    quantize_3d,
    hard_threshold,
    soft_threshold,
    semisoft_threshold,
    keep_largest,
    percent_under,
    discard_weakest,
    zonal_filter,
    cut_least_significant,
)
from .block_processor import pad_to_multiple, split_into_blocks, merge_blocks
from .wavelet_codec import CompressState, compress_2d, decompress_2d, compress_decompress_2d
from .pipeline import compress_reconstruct

__all__ = [
    'Matrix',
    'ShapeMismatchError',
    'build_basis',
    'forward_transform',
    'inverse_transform',
    'forward_transform_2d',
    'inverse_transform_2d',
    'dct2',
    'idct2',
    'haar1d_step',
    'inverse_haar1d_step',
    'haar1d_forward',
    'haar1d_inverse',
    'haar2d_step',
    'inverse_haar2d_step',
    'haar2d_forward',
    'haar2d_inverse',
    'haar2d_standard_forward',
    'haar2d_standard_inverse',
    'haar3d_step',
    'inverse_haar3d_step',
    'level_extents',
    'quantize_2d',
    'quantize_3d',
    'hard_threshold',
    'soft_threshold',
    'semisoft_threshold',
    'keep_largest',
    'percent_under',
    'discard_weakest',
    'zonal_filter',
    'cut_least_significant',
    'pad_to_multiple',
    'split_into_blocks',
    'merge_blocks',
    'CompressState',
    'compress_2d',
    'decompress_2d',
    'compress_decompress_2d',
    'compress_reconstruct',
]
