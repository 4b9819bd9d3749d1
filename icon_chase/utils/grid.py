"""Grid math helpers.

Small pure functions shared by the movement, pursuit and setup code. They wrap
:class:`icon_chase.grid.Grid` queries in ``Position`` / ``Pixel`` terms.
"""

from icon_chase.actions import DIRECTION_OFFSETS, Direction
from icon_chase.components import Pixel, Position
from icon_chase.grid import Grid


def neighbor(pos: Position, direction: Direction) -> Position:
    """Adjacent cell in ``direction`` (not bounds checked)."""
    dx, dy = DIRECTION_OFFSETS[direction]
    return Position(pos.x + dx, pos.y + dy)


def is_traversable(grid: Grid, pos: Position) -> bool:
    return grid.is_traversable(pos.x, pos.y)


def cell_center(grid: Grid, pos: Position) -> Pixel:
    """Pixel center of ``pos`` as a :class:`Pixel`."""
    return Pixel(*grid.to_pixel(pos.x, pos.y))


def manhattan(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)
