"""Data models for compression parameters and results."""

from .compression_params import CompressionParams
from .compression_result import CompressionResult
from .intermediate_data import IntermediateData

__all__ = ['CompressionParams', 'CompressionResult', 'IntermediateData']

