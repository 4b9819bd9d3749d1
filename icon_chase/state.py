"""Core immutable `State` dataclass.

This module defines the frozen :class:`State` object that represents the whole
game session at a single tick. Systems are pure functions that take a previous
``State`` (plus inputs such as a movement ``Direction`` or a random source) and
return a *new* ``State``; nothing is mutated in place. The owning
:class:`icon_chase.session.Session` simply swaps its reference after each call.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not have that
    component.
* The player is the entity in ``agent``; baddies are the entities in
    ``pursuit``; icons are the entities in ``collectible``. Player and baddies
    share the moving-body trio ``position`` / ``pixel`` / ``motion``.
* ``phase`` is the session state machine. ``WON`` and ``LOST`` are terminal
    and the reducer short-circuits on them.
* ``icon_total`` counts icons created at setup; removal of collected icons
    after their linger period never changes it, so the win check stays valid.

See :mod:`icon_chase.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, pmap

from icon_chase.components import (
    Agent,
    Collectible,
    Icon,
    Motion,
    Pixel,
    Position,
    Pursuit,
    Rewardable,
)
from icon_chase.grid import Grid
from icon_chase.types import EntityID, Phase


@dataclass(frozen=True)
class State:
    """Immutable session state.

    Attributes:
        grid (Grid): Static level geometry.
        collision_distance (float): Pixel distance below which a baddie catches the player.
        icon_linger (int): Ticks a collected icon stays before removal.
        agent (PMap[EntityID, Agent]): Player marker with facing direction.
        pursuit (PMap[EntityID, Pursuit]): Baddie chase directives.
        position (PMap[EntityID, Position]): Settled grid cell of every entity.
        pixel (PMap[EntityID, Pixel]): Continuous position of moving bodies.
        motion (PMap[EntityID, Motion]): Movement state of moving bodies.
        icon (PMap[EntityID, Icon]): Glyph tags of icons.
        collectible (PMap[EntityID, Collectible]): Collection records of icons.
        rewardable (PMap[EntityID, Rewardable]): Score granted per collected entity.
        icon_total (int): Number of icons placed at setup.
        tick (int): Tick counter (0-based).
        score (int): Accumulated score.
        phase (Phase): Session phase.
        message (str | None): Optional informational / terminal message.
        seed (int | None): Seed used for setup and derived per-tick randomness.
    """

    # Level
    grid: Grid
    collision_distance: float = 25.0
    icon_linger: int = 24

    # Components
    agent: PMap[EntityID, Agent] = pmap()
    pursuit: PMap[EntityID, Pursuit] = pmap()
    position: PMap[EntityID, Position] = pmap()
    pixel: PMap[EntityID, Pixel] = pmap()
    motion: PMap[EntityID, Motion] = pmap()
    icon: PMap[EntityID, Icon] = pmap()
    collectible: PMap[EntityID, Collectible] = pmap()
    rewardable: PMap[EntityID, Rewardable] = pmap()

    # Status
    icon_total: int = 0
    tick: int = 0
    score: int = 0
    phase: Phase = Phase.NOT_STARTED
    message: Optional[str] = None

    # RNG
    seed: Optional[int] = None

    @property
    def agent_id(self) -> Optional[EntityID]:
        """First agent entity id, or ``None`` when there is no player."""
        return next(iter(self.agent.keys()), None)

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns:
            PMap[str, Any]: Field name to value for populated component maps
            and truthy scalars.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            # Empty component maps, zero counters and unset messages add nothing
            if not value:
                continue
            description = description.set(field, value)
        return description
