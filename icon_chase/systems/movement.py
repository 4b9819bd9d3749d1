"""Player movement intent system.

Turns a discrete :class:`icon_chase.actions.Direction` into a one-cell move of
the agent. The agent always turns to face the requested direction, even when
the move itself is refused, so renderers can give immediate feedback. The move
is accepted only when:

* the agent is idle (not mid-transit), and
* the adjacent cell is inside the grid and not blocked.

An accepted move starts the agent's motion toward the neighbour cell and, on
the first accepted move of a session, switches the phase from ``NOT_STARTED``
to ``RUNNING``.
"""

from dataclasses import replace

from icon_chase.actions import Direction
from icon_chase.state import State
from icon_chase.systems.motion import start_motion
from icon_chase.types import EntityID, Phase
from icon_chase.utils.grid import is_traversable, neighbor


def facing_system(state: State, agent_id: EntityID, direction: Direction) -> State:
    """Turn the agent toward ``direction`` (idempotent)."""
    agent = state.agent[agent_id]
    if agent.facing == direction:
        return state
    return replace(state, agent=state.agent.set(agent_id, replace(agent, facing=direction)))


def movement_system(state: State, agent_id: EntityID, direction: Direction) -> State:
    """Apply a movement intent for the agent.

    Returns:
        State: Unchanged apart from facing if the move is refused; otherwise
        the agent is moving toward the neighbour cell.
    """
    state = facing_system(state, agent_id, direction)

    if state.motion[agent_id].moving:
        return state

    next_pos = neighbor(state.position[agent_id], direction)
    if not is_traversable(state.grid, next_pos):
        return state

    state = start_motion(state, agent_id, next_pos)
    if state.phase == Phase.NOT_STARTED:
        state = replace(state, phase=Phase.RUNNING)
    return state
