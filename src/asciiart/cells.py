from __future__ import annotations

from typing import NamedTuple, Protocol


class RenderCell(NamedTuple):
    glyph: str
    colour: str | None = None  # basic colour name, or None for uncoloured output


CellGrid = list[list[RenderCell]]


class Renderer(Protocol):
    def write(self, rows: CellGrid) -> None:
        """Write a grid of cells to a display surface, one row per line."""
        ...
