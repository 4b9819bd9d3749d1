"""Terminal condition helper predicates."""

from icon_chase.state import State
from icon_chase.types import TERMINAL_PHASES, EntityID


def is_valid_state(state: State, agent_id: EntityID) -> bool:
    """Return True if the agent exists with a position and a body."""
    return (
        agent_id in state.agent
        and agent_id in state.position
        and agent_id in state.pixel
        and agent_id in state.motion
    )


def is_terminal_state(state: State) -> bool:
    """Return True if the session is won or lost."""
    return state.phase in TERMINAL_PHASES


def all_icons_collected(state: State) -> bool:
    """True iff at least one icon was placed and none is left uncollected."""
    if state.icon_total == 0:
        return False
    return all(c.collected for c in state.collectible.values())
