from collections.abc import Sequence

import numpy as np
from PIL import Image

from asciiart.errors import InvalidDimension


def colour_grid(image: Image.Image) -> np.ndarray:
    """Return the image's pixels as a (height, width, 3) uint8 array.

    Cell [y, x] holds the RGB of pixel (x, y).
    """
    if image.mode != "RGB":
        image = image.convert("RGB")
    return np.array(image, dtype=np.uint8)


def reshape_rgb(values: Sequence[tuple[int, int, int]], width: int, height: int) -> np.ndarray:
    """Reshape a flat row-major sequence of RGB triples into a colour grid."""
    arr = np.asarray(values, dtype=np.uint8)
    if arr.size != width * height * 3:
        raise InvalidDimension(f"Expected {width * height} pixels for {width}x{height}, got {arr.size // 3}")
    return arr.reshape(height, width, 3)
