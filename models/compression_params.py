"""Compression parameters."""

from dataclasses import dataclass
from typing import Literal, Optional

from utils.constants import (
    DEFAULT_TRANSFORM,
    DEFAULT_LEVEL,
    DEFAULT_THRESHOLD,
    DEFAULT_BLOCK_SIZE,
    VALID_BLOCK_SIZES,
)


@dataclass
class CompressionParams:
    """Lossy transform compression parameters."""

    transform: Literal['haar', 'dct'] = DEFAULT_TRANSFORM
    level: int = DEFAULT_LEVEL
    threshold: float = DEFAULT_THRESHOLD
    block_size: Optional[int] = DEFAULT_BLOCK_SIZE

    def __post_init__(self):
        if self.transform not in ('haar', 'dct'):
            raise ValueError(f"Transform must be 'haar' or 'dct', got {self.transform!r}")
        if self.level < 0:
            raise ValueError(f"Level must be >= 0, got {self.level}")
        if self.block_size is not None and self.block_size not in VALID_BLOCK_SIZES:
            raise ValueError(f"Block size must be 4, 8, 16, 32 or None, got {self.block_size}")
