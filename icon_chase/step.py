"""State reducer and tick orchestration.

This module wires the systems together. :func:`step` advances the simulation
by one tick and :func:`apply_intent` applies one movement intent; both are
pure and return a *new* :class:`icon_chase.state.State`.

Tick ordering:

1. Advance the player's motion. If the player arrives and a direction is
   still held, immediately apply the first held direction in priority order
   (up, down, left, right) so holding a key steps continuously with never
   more than one move queued.
2. ``pursuit_system`` picks targets for idle baddies and advances all of them.
3. ``caught_system``: a baddie within the collision distance loses the game
   and short-circuits the rest of the tick, so a catch beats a simultaneous
   final pickup.
4. ``collectible_system`` flags icons on the player's settled cell and scores.
5. ``win_system`` wins once every icon is collected.
6. ``cleanup_system`` removes icons whose linger period expired, then the
   tick counter is bumped.

Ticks before the first accepted intent and after a win or loss leave the
state unchanged.
"""

from dataclasses import replace
import random
from typing import Iterable, Optional

from icon_chase.actions import MOVE_PRIORITY, Direction
from icon_chase.state import State
from icon_chase.systems.collectible import cleanup_system, collectible_system
from icon_chase.systems.motion import motion_step
from icon_chase.systems.movement import movement_system
from icon_chase.systems.pursuit import pursuit_system
from icon_chase.systems.terminal import caught_system, win_system
from icon_chase.types import EntityID, Phase, RandomSource
from icon_chase.utils.terminal import is_terminal_state, is_valid_state


def _resolve_agent(state: State, agent_id: Optional[EntityID]) -> EntityID:
    if agent_id is None and (agent_id := state.agent_id) is None:
        raise ValueError("State contains no agent")
    return agent_id


def tick_rng(state: State) -> random.Random:
    """Deterministic per-tick generator derived from ``state.seed`` and ``state.tick``."""
    base_seed = hash((state.seed if state.seed is not None else 0, state.tick))
    return random.Random(base_seed)


def first_held(held: Iterable[Direction]) -> Optional[Direction]:
    """Highest priority direction among ``held``."""
    held_set = set(held)
    return next((d for d in MOVE_PRIORITY if d in held_set), None)


def apply_intent(
    state: State, direction: Direction, agent_id: Optional[EntityID] = None
) -> State:
    """Apply a single movement intent.

    Args:
        state (State): Current state.
        direction (Direction): Requested direction.
        agent_id (EntityID | None): Explicit agent id; defaults to the first agent.

    Returns:
        State: Updated state. Terminal or invalid states are returned unchanged.

    Raises:
        ValueError: If the state has no agent.
    """
    agent_id = _resolve_agent(state, agent_id)
    if not is_valid_state(state, agent_id) or is_terminal_state(state):
        return state
    return movement_system(state, agent_id, direction)


def step(
    state: State,
    held: Iterable[Direction] = (),
    rng: Optional[RandomSource] = None,
    agent_id: Optional[EntityID] = None,
) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable state.
        held (Iterable[Direction]): Directions whose keys are currently held.
        rng (RandomSource | None): Random source for pursuit decisions. If
            ``None`` a generator seeded from ``(state.seed, state.tick)`` is used.
        agent_id (EntityID | None): Explicit agent id; defaults to the first agent.

    Returns:
        State: Next state. Not-started, terminal or invalid states are
        returned unchanged.

    Raises:
        ValueError: If the state has no agent.
    """
    agent_id = _resolve_agent(state, agent_id)
    if not is_valid_state(state, agent_id) or state.phase != Phase.RUNNING:
        return state

    if rng is None:
        rng = tick_rng(state)

    state, arrived = motion_step(state, agent_id)
    if arrived and (direction := first_held(held)) is not None:
        state = movement_system(state, agent_id, direction)

    state = pursuit_system(state, rng)

    state = caught_system(state, agent_id)
    if state.phase == Phase.LOST:
        return replace(state, tick=state.tick + 1)

    state = collectible_system(state, agent_id)
    state = win_system(state)
    state = cleanup_system(state)
    return replace(state, tick=state.tick + 1)
