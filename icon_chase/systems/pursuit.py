"""Baddie pursuit system.

Each tick every idle baddie (``Motion.moving`` is False) picks its next cell
with a stochastic greedy hill-climb on Manhattan distance toward the settled
cell of its pursuit target:

1. Candidates are the (at most two) single axis-aligned steps that shrink the
   column or row gap.
2. Candidates that leave the grid, enter a blocked cell, or land on a cell
   another baddie occupies or is travelling to are dropped.
3. Survivors are ranked by the gap on their axis, largest first.
4. With probability ``Pursuit.greedy_chance`` the top candidate is taken,
   otherwise one candidate is picked uniformly at random.

A baddie with no surviving candidate stays put and tries again next tick.
This is not shortest-path search; baddies can be led around obstacles.
"""

from typing import List, Optional, Tuple

from icon_chase.components import Position
from icon_chase.state import State
from icon_chase.systems.motion import motion_step, start_motion
from icon_chase.types import EntityID, RandomSource
from icon_chase.utils.grid import is_traversable

# (cell, gap closed on that axis)
Candidate = Tuple[Position, int]


def is_claimed(state: State, pos: Position, exclude: EntityID) -> bool:
    """True if a baddie other than ``exclude`` sits on or is heading to ``pos``."""
    for baddie_id in state.pursuit:
        if baddie_id == exclude:
            continue
        if state.position.get(baddie_id) == pos:
            return True
        motion = state.motion.get(baddie_id)
        if motion is not None and motion.target == pos:
            return True
    return False


def candidate_moves(state: State, baddie_id: EntityID) -> List[Candidate]:
    """Ranked candidate steps toward the pursuit target.

    Returns:
        List[Candidate]: ``(cell, priority)`` pairs sorted by priority,
        highest first. Horizontal steps precede vertical ones on ties.
    """
    pursuit = state.pursuit[baddie_id]
    if pursuit.target is None:
        return []
    goal = state.position.get(pursuit.target)
    pos = state.position.get(baddie_id)
    if goal is None or pos is None:
        return []

    dx = goal.x - pos.x
    dy = goal.y - pos.y
    steps: List[Candidate] = []
    if dx > 0:
        steps.append((Position(pos.x + 1, pos.y), abs(dx)))
    if dx < 0:
        steps.append((Position(pos.x - 1, pos.y), abs(dx)))
    if dy > 0:
        steps.append((Position(pos.x, pos.y + 1), abs(dy)))
    if dy < 0:
        steps.append((Position(pos.x, pos.y - 1), abs(dy)))

    candidates = [
        (cell, priority)
        for cell, priority in steps
        if is_traversable(state.grid, cell) and not is_claimed(state, cell, baddie_id)
    ]
    return sorted(candidates, key=lambda c: c[1], reverse=True)


def choose_target(
    state: State, baddie_id: EntityID, rng: RandomSource
) -> Optional[Position]:
    """Pick the next cell for an idle baddie, or ``None`` to wait."""
    candidates = candidate_moves(state, baddie_id)
    if not candidates:
        return None
    if rng.random() < state.pursuit[baddie_id].greedy_chance:
        return candidates[0][0]
    return rng.choice(candidates)[0]


def pursuit_system(state: State, rng: RandomSource) -> State:
    """Decide and advance every baddie for one tick.

    Baddies are processed in id order. A baddie that picks a new target starts
    moving on the same tick, and later baddies see earlier ones' fresh claims.
    """
    for baddie_id in sorted(state.pursuit.keys()):
        motion = state.motion.get(baddie_id)
        if motion is None:
            continue
        if not motion.moving:
            target = choose_target(state, baddie_id, rng)
            if target is None:
                continue
            state = start_motion(state, baddie_id, target)
        state, _ = motion_step(state, baddie_id)
    return state
