import sys
from typing import TextIO

from asciiart.cells import CellGrid
from asciiart.config import CHAR_PADDING

ESC = "\033"
RESET = f"{ESC}[0m"

ANSI_FOREGROUND = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}


def _format_row(row, padding: int) -> str:
    """Repeat each glyph and wrap colour changes in ANSI foreground escapes."""
    parts = []
    current = None
    for cell in row:
        if cell.colour is not None and cell.colour != current:
            parts.append(f"{ESC}[{ANSI_FOREGROUND[cell.colour]}m")
            current = cell.colour
        parts.append(cell.glyph * padding)
    if current is not None:
        parts.append(RESET)
    return "".join(parts)


class TerminalRenderer:
    """Writes cell grids to a text stream using 8-colour ANSI escapes."""

    def __init__(self, stream: TextIO | None = None, padding: int = CHAR_PADDING):
        self.stream = stream if stream is not None else sys.stdout
        self.padding = padding

    def format(self, rows: CellGrid) -> str:
        return "".join(_format_row(row, self.padding) + "\n" for row in rows)

    def write(self, rows: CellGrid) -> None:
        for row in rows:
            self.stream.write(_format_row(row, self.padding) + "\n")
        self.stream.flush()
