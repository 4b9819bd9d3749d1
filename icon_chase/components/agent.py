"""Agent component.

Presence of :class:`Agent` designates the player-controlled entity. Only one
agent is expected; the reducer picks the first if several exist. ``facing``
is kept even when a move is rejected so the renderer can turn the token
immediately.
"""

from dataclasses import dataclass

from icon_chase.actions import Direction


@dataclass(frozen=True)
class Agent:
    """Player marker with facing direction."""

    facing: Direction = Direction.RIGHT
