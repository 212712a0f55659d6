"""Default compression settings."""

DEFAULT_TRANSFORM = 'haar'
DEFAULT_LEVEL = 3
DEFAULT_THRESHOLD = 10
DEFAULT_BLOCK_SIZE = 8

VALID_BLOCK_SIZES = (4, 8, 16, 32)

HISTOGRAM_BINS = 50
