"""Grayscale image I/O using OpenCV."""

import cv2
import numpy as np


def load_grayscale(path: str) -> np.ndarray:
    """Load image as a float64 grayscale array."""
    img = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return img.astype(np.float64)


def save_grayscale(array: np.ndarray, path: str) -> None:
    """Save a 2D array as an 8-bit image, clipping to [0, 255]."""
    if not cv2.imwrite(path, np.clip(np.rint(array), 0, 255).astype(np.uint8)):
        raise ValueError(f"Could not write image to {path}")
