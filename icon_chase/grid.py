"""Static grid geometry.

:class:`Grid` is the read-only level layout shared by every state of a
session: the column/row counts, the play-area rectangle the cells are spread
over, and the fixed set of blocked cells. Cell centers sit on the
intersections of an evenly spaced lattice, so the first and last columns
touch the horizontal offsets and the first and last rows touch the vertical
offsets.

All queries are total: out-of-range coordinates are simply not in bounds and
not traversable, nothing here raises.
"""

from dataclasses import dataclass
from typing import Iterator

from pyrsistent import pset
from pyrsistent.typing import PSet

from icon_chase.components import Position
from icon_chase.types import PixelCoord


@dataclass(frozen=True)
class Grid:
    """Immutable grid geometry.

    Attributes:
        columns (int): Number of cell columns.
        rows (int): Number of cell rows.
        width (float): Play-area width in pixels.
        height (float): Play-area height in pixels.
        offset_x (float): Horizontal margin before the first column.
        offset_y (float): Vertical margin before the first row.
        blocked (PSet[Position]): Cells that can never be entered.
    """

    columns: int
    rows: int
    width: float
    height: float
    offset_x: float = 0.0
    offset_y: float = 0.0
    blocked: PSet[Position] = pset()

    @property
    def cell_width(self) -> float:
        if self.columns <= 1:
            return 0.0
        return (self.width - 2 * self.offset_x) / (self.columns - 1)

    @property
    def cell_height(self) -> float:
        if self.rows <= 1:
            return 0.0
        return (self.height - 2 * self.offset_y) / (self.rows - 1)

    def to_pixel(self, col: int, row: int) -> PixelCoord:
        """Return the pixel center of ``(col, row)``."""
        return (
            self.offset_x + col * self.cell_width,
            self.offset_y + row * self.cell_height,
        )

    def is_in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.columns and 0 <= row < self.rows

    def is_blocked(self, col: int, row: int) -> bool:
        return Position(col, row) in self.blocked

    def is_traversable(self, col: int, row: int) -> bool:
        return self.is_in_bounds(col, row) and not self.is_blocked(col, row)

    def cells(self) -> Iterator[Position]:
        """Yield every cell in row-major order."""
        for row in range(self.rows):
            for col in range(self.columns):
                yield Position(col, row)

    def traversable_cells(self) -> Iterator[Position]:
        return (pos for pos in self.cells() if self.is_traversable(pos.x, pos.y))


def card_blocked_cells(columns: int, rows: int) -> PSet[Position]:
    """Default obstacle: a three-cell bar centered on the middle row.

    The bar spans ``columns // 2 - 1`` to ``columns // 2 + 1`` on row
    ``rows // 2``; cells falling outside the grid are dropped.
    """
    center_col, center_row = columns // 2, rows // 2
    return pset(
        Position(col, center_row)
        for col in range(center_col - 1, center_col + 2)
        if 0 <= col < columns
    )
