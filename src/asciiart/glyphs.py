import numpy as np

from asciiart.charsets import BRIGHTNESS_SCALE
from asciiart.errors import InvalidArgument


def _check_scale(scale: str) -> None:
    if not scale:
        raise InvalidArgument("Brightness scale must contain at least one character")


def glyph_index(value: int, scale_length: int = len(BRIGHTNESS_SCALE)) -> int:
    """Position on the scale for a brightness value, clamped to the last entry."""
    return min(int(scale_length * (value / 255.0)), scale_length - 1)


def glyph_grid(brightness: np.ndarray, scale: str = BRIGHTNESS_SCALE) -> list[str]:
    """Map a (height, width) brightness grid to one string per row.

    Values above 255 land on the darkest glyph. There is no lower clamp.
    """
    _check_scale(scale)
    grid = np.asarray(brightness)
    indices = (len(scale) * (grid / 255.0)).astype(np.int64)
    np.minimum(indices, len(scale) - 1, out=indices)
    chars = np.array(list(scale))
    return ["".join(row) for row in chars[indices]]
