"""Moving-body component.

``Motion`` is shared by the player and the baddies. When ``moving`` is False
the entity is settled: ``target`` equals its :class:`Position` and its
:class:`Pixel` sits exactly on that cell's center. When ``moving`` is True the
pixel lies on the straight segment between the two cell centers and advances
``speed`` units per tick until it reaches ``target``.
"""

from dataclasses import dataclass

from icon_chase.components.position import Position


@dataclass(frozen=True)
class Motion:
    """Per-entity movement state.

    Attributes:
        target: Destination cell (equal to the current cell when idle).
        speed: Distance travelled per tick, in play-area units.
        moving: True while travelling toward ``target``.
    """

    target: Position
    speed: float
    moving: bool = False
