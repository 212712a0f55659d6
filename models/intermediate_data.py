"""Intermediate data for inspection and plotting."""

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np


@dataclass
class IntermediateData:
    """Coefficients and error maps captured along the pipeline."""

    quantized_coefficients: Optional[np.ndarray] = None
    approximation_extent: Tuple[int, int] = (0, 0)

    error_map: Optional[np.ndarray] = None
    coefficient_histogram: Optional[np.ndarray] = None
    histogram_edges: Optional[np.ndarray] = None
