"""Position component.

Immutable integer grid coordinates of the *settled* cell an entity occupies.
While an entity is moving this stays on the cell it departed from; the motion
system rewrites it to the target cell on arrival.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
