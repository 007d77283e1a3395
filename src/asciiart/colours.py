import numpy as np

from asciiart.cells import CellGrid, RenderCell
from asciiart.charsets import BASIC_COLOURS
from asciiart.errors import InvalidDimension

_NAMES = np.array(list(BASIC_COLOURS))
_VALUES = np.array(list(BASIC_COLOURS.values()), dtype=np.int64)  # (8, 3)


def colour_distances(colours: np.ndarray) -> np.ndarray:
    """Manhattan distance from each cell to every basic colour, shape (..., 8)."""
    arr = np.asarray(colours, dtype=np.int64)
    return np.abs(arr[..., None, :] - _VALUES).sum(axis=-1)


def basic_colour_grid(colours: np.ndarray) -> np.ndarray:
    """Name of the nearest basic colour for every cell of a colour grid."""
    # argmin returns the first minimum, so ties go to the earliest palette entry
    return _NAMES[colour_distances(colours).argmin(axis=-1)]


def nearest_basic_colour(rgb: tuple[int, int, int]) -> str:
    return str(basic_colour_grid(np.asarray(rgb)))


def annotate(glyphs: list[str], colours: np.ndarray | None) -> CellGrid:
    """Pair each glyph with its nearest basic colour, or None when colours is None."""
    if colours is None:
        return [[RenderCell(char) for char in row] for row in glyphs]
    names = basic_colour_grid(colours)
    if names.shape != (len(glyphs), len(glyphs[0]) if glyphs else 0):
        raise InvalidDimension(f"Glyph grid and colour grid differ in shape: {names.shape}")
    return [[RenderCell(char, str(name)) for char, name in zip(row, name_row)] for row, name_row in zip(glyphs, names)]
