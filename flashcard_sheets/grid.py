"""Grid composition: equal fractional tracks filled row-major with rendered cells."""
from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

from reportlab.pdfgen.canvas import Canvas

from .cards import RenderedCell
from .config import LayoutConfig, check_dimension
from .errors import GridOverflow
from .layout import track_rects


class Grid:
    """A rows x columns arrangement of cells; empty slots hold None."""

    def __init__(self, rows: int, columns: int, cells: Sequence[Optional[RenderedCell]]):
        self.rows = rows
        self.columns = columns
        self._slots = list(cells) + [None] * (rows * columns - len(cells))

    def cell_at(self, row: int, column: int) -> Optional[RenderedCell]:
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"Slot ({row}, {column}) is outside a {self.rows}x{self.columns} grid")
        return self._slots[row * self.columns + column]

    def slots(self) -> Iterator[Tuple[int, int, RenderedCell]]:
        """Yield (row, column, cell) for every occupied slot, left to right, top to bottom."""
        for index, cell in enumerate(self._slots):
            if cell is not None:
                yield index // self.columns, index % self.columns, cell

    def draw(self, c: Canvas, x: float, y: float, width: float, height: float) -> None:
        """Draw every occupied slot into its equal-sized track of the given rectangle."""
        tracks = track_rects(x, y, width, height, self.rows, self.columns)
        for row, column, cell in self.slots():
            cell.draw(c, *tracks[row][column])

    def __len__(self):
        return sum(1 for cell in self._slots if cell is not None)

    def __repr__(self):
        return f"Grid(rows={self.rows}, columns={self.columns}, filled={len(self)})"


class GridFactory:
    """Reusable constructor for grids of one fixed shape."""

    def __init__(self, rows: int, columns: int):
        self.rows = check_dimension("rows", rows)
        self.columns = check_dimension("columns", columns)

    @classmethod
    def from_config(cls, config: LayoutConfig) -> "GridFactory":
        return cls(config.rows, config.columns)

    @property
    def capacity(self) -> int:
        return self.rows * self.columns

    def __call__(self, cells: Sequence[Optional[RenderedCell]]) -> Grid:
        cells = list(cells)
        if len(cells) > self.capacity:
            raise GridOverflow(f"{len(cells)} cells do not fit a {self.rows}x{self.columns} grid")
        return Grid(self.rows, self.columns, cells)


def make_grid(rows: int, columns: int) -> GridFactory:
    """Validate the grid shape now and return a factory for that shape.

    Raises:
        InvalidDimensions: rows or columns is not a positive integer.
    """
    return GridFactory(rows, columns)
