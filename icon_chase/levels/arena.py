"""Arena setup.

:func:`generate` builds the initial :class:`icon_chase.state.State` of a
session from a :class:`icon_chase.config.GameConfig`:

1. The grid with its obstacle cells.
2. The player on ``config.start``, facing right, idle.
3. One icon on every traversable cell except the start. Glyph kinds are drawn
   from a shuffled copy of ``config.icon_kinds``, cycling when there are more
   cells than kinds.
4. ``config.num_baddies`` baddies on distinct traversable cells at least
   ``config.min_spawn_distance`` (Manhattan) away from the start, picked by
   shuffling the eligible cells. Fewer baddies are placed if fewer cells
   qualify.

All randomness comes from ``random.Random(seed)``, so equal seeds give equal
arenas.
"""

import logging
import random
from typing import Any, Dict, List, Optional

from pyrsistent import pmap

from icon_chase.components import (
    Agent,
    Collectible,
    Icon,
    Motion,
    Position,
    Pursuit,
    Rewardable,
)
from icon_chase.config import DEFAULT_CONFIG, GameConfig
from icon_chase.grid import Grid
from icon_chase.state import State
from icon_chase.types import EntityID
from icon_chase.utils.grid import cell_center, manhattan

logger = logging.getLogger(__name__)

STORE_NAMES = (
    "agent",
    "pursuit",
    "position",
    "pixel",
    "motion",
    "icon",
    "collectible",
    "rewardable",
)


def _init_store_maps() -> Dict[str, Dict[EntityID, Any]]:
    """Mutable component stores mirroring ``State``; converted to pmaps later."""
    return {name: {} for name in STORE_NAMES}


def _place_body(
    stores: Dict[str, Dict[EntityID, Any]],
    grid: Grid,
    eid: EntityID,
    pos: Position,
    speed: float,
) -> None:
    """Give ``eid`` a settled moving body on ``pos``."""
    stores["position"][eid] = pos
    stores["pixel"][eid] = cell_center(grid, pos)
    stores["motion"][eid] = Motion(target=pos, speed=speed)


def spawn_cells(grid: Grid, start: Position, min_distance: int) -> List[Position]:
    """Traversable cells eligible for baddie spawns, in row-major order."""
    return [
        pos
        for pos in grid.traversable_cells()
        if pos != start and manhattan(pos, start) >= min_distance
    ]


def generate(config: GameConfig = DEFAULT_CONFIG, seed: Optional[int] = None) -> State:
    """Build a fresh, not-yet-started session state.

    Args:
        config (GameConfig): Layout and tuning.
        seed (int | None): Seed for icon kinds and baddie spawns.

    Returns:
        State: Initial state in phase ``NOT_STARTED``.

    Raises:
        ValueError: If ``config.start`` is not a traversable cell.
    """
    rng = random.Random(seed)
    grid = config.make_grid()
    start = config.start
    if not grid.is_traversable(start.x, start.y):
        raise ValueError(f"Start cell {start} is outside the grid or blocked")

    stores = _init_store_maps()
    next_eid = 0

    # Player
    player_id = next_eid
    next_eid += 1
    stores["agent"][player_id] = Agent()
    _place_body(stores, grid, player_id, start, config.player_speed)

    # Icons
    kinds = list(config.icon_kinds)
    rng.shuffle(kinds)
    icon_cells = [pos for pos in grid.traversable_cells() if pos != start]
    for index, pos in enumerate(icon_cells):
        eid = next_eid
        next_eid += 1
        stores["position"][eid] = pos
        stores["icon"][eid] = Icon(kind=kinds[index % len(kinds)])
        stores["collectible"][eid] = Collectible()
        stores["rewardable"][eid] = Rewardable(amount=config.score_increment)

    # Baddies
    candidates = spawn_cells(grid, start, config.min_spawn_distance)
    rng.shuffle(candidates)
    for pos in candidates[: config.num_baddies]:
        eid = next_eid
        next_eid += 1
        stores["pursuit"][eid] = Pursuit(
            target=player_id, greedy_chance=config.greedy_chance
        )
        _place_body(stores, grid, eid, pos, config.baddie_speed)

    logger.debug(
        "Generated arena %dx%d: %d icons, baddies at %s (seed=%s)",
        grid.columns,
        grid.rows,
        len(icon_cells),
        [(p.x, p.y) for p in candidates[: config.num_baddies]],
        seed,
    )

    return State(
        grid=grid,
        collision_distance=config.collision_distance,
        icon_linger=config.icon_linger,
        icon_total=len(icon_cells),
        seed=seed,
        **{name: pmap(store) for name, store in stores.items()},
    )
