"""Movement directions.

``Direction`` is the discrete intent produced by the input mapper and consumed
by the movement system. ``MOVE_PRIORITY`` is the canonical order used when a
held key has to be turned into a new intent (up, down, left, right).
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Tuple


class Direction(StrEnum):
    """String enum of the four movement directions."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_PRIORITY = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()
