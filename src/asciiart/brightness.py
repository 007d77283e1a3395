"""Reduce colour grids to scalar brightness.

The member names of ``Brightness`` are historical: ``LUMINOSITY`` selects the
min/max midpoint and ``MIN_MAX`` selects the weighted luminosity sum. Scripts
written against the old names depend on that pairing, so it stays.
"""

import logging
from enum import Enum

import numpy as np

logger = logging.getLogger(__name__)

# Perceptual channel weights used by Brightness.MIN_MAX
R_WEIGHT = 0.21
G_WEIGHT = 0.72
B_WEIGHT = 0.07


class Brightness(Enum):
    AVERAGE = "average"
    MIN_MAX = "min-max"
    LUMINOSITY = "luminosity"


def _average(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    return (r + g + b) // 3


def _midpoint(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    hi = np.maximum(np.maximum(r, g), b)
    lo = np.minimum(np.minimum(r, g), b)
    return (hi + lo) // 2


def _weighted(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    # Truncates toward zero, not clamped to 255
    return (R_WEIGHT * r + G_WEIGHT * g + B_WEIGHT * b).astype(np.int64)


_MAPPINGS = {
    Brightness.AVERAGE: _average,
    Brightness.LUMINOSITY: _midpoint,
    Brightness.MIN_MAX: _weighted,
}


def brightness_grid(colours: np.ndarray, mapping: Brightness = Brightness.AVERAGE) -> np.ndarray:
    """Map a (height, width, 3) colour grid to a (height, width) int64 brightness grid."""
    mapping = Brightness(mapping)
    arr = np.asarray(colours, dtype=np.int64)
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    logger.debug("Computing %s brightness over %dx%d cells", mapping.name, arr.shape[1], arr.shape[0])
    return _MAPPINGS[mapping](r, g, b)


def invert_brightness(grid: np.ndarray) -> np.ndarray:
    return 255 - np.asarray(grid, dtype=np.int64)


def brightness_of(rgb: tuple[int, int, int], mapping: Brightness = Brightness.AVERAGE) -> int:
    """Brightness of a single RGB triple."""
    return int(brightness_grid(np.asarray([[rgb]]), mapping)[0, 0])
