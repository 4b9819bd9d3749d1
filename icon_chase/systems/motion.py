"""Smooth cell-to-cell motion.

Moving bodies (the player and every baddie) travel from the pixel center of
their settled cell toward the pixel center of ``Motion.target`` at a constant
``Motion.speed`` per tick. The final step snaps exactly onto the target, so a
trip of length ``D`` takes ``ceil(D / speed)`` ticks and never overshoots.
"""

from dataclasses import replace
import math
from typing import Iterable, Tuple

from icon_chase.components import Pixel, Position
from icon_chase.state import State
from icon_chase.types import EntityID
from icon_chase.utils.grid import cell_center

# Remaining distances within this tolerance of ``speed`` count as arrival so
# accumulated float error cannot add an extra tick.
ARRIVAL_EPSILON = 1e-9


def advance(pixel: Pixel, goal: Pixel, speed: float) -> Tuple[Pixel, bool]:
    """Move ``pixel`` toward ``goal`` by ``speed`` units.

    Returns:
        Tuple[Pixel, bool]: New pixel and whether ``goal`` was reached. On
        arrival the returned pixel is exactly ``goal``.
    """
    dx = goal.x - pixel.x
    dy = goal.y - pixel.y
    distance = math.hypot(dx, dy)
    if distance <= speed + ARRIVAL_EPSILON:
        return goal, True
    step_x = dx / distance * speed
    step_y = dy / distance * speed
    return Pixel(pixel.x + step_x, pixel.y + step_y), False


def start_motion(state: State, entity_id: EntityID, target: Position) -> State:
    """Set ``target`` as the destination of an idle body and mark it moving."""
    motion = state.motion[entity_id]
    return replace(
        state,
        motion=state.motion.set(entity_id, replace(motion, target=target, moving=True)),
    )


def motion_step(state: State, entity_id: EntityID) -> Tuple[State, bool]:
    """Advance a single body by one tick.

    Idle bodies are left untouched. On arrival the settled ``position`` becomes
    the target cell and ``moving`` is cleared.

    Returns:
        Tuple[State, bool]: Updated state and whether the body arrived this tick.
    """
    motion = state.motion.get(entity_id)
    if motion is None or not motion.moving:
        return state, False

    goal = cell_center(state.grid, motion.target)
    pixel, arrived = advance(state.pixel[entity_id], goal, motion.speed)

    state_pixel = state.pixel.set(entity_id, pixel)
    if not arrived:
        return replace(state, pixel=state_pixel), False

    return (
        replace(
            state,
            pixel=state_pixel,
            position=state.position.set(entity_id, motion.target),
            motion=state.motion.set(entity_id, replace(motion, moving=False)),
        ),
        True,
    )


def motion_system(state: State, entity_ids: Iterable[EntityID]) -> State:
    """Advance every listed body by one tick."""
    for entity_id in entity_ids:
        state, _ = motion_step(state, entity_id)
    return state
