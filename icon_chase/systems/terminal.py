"""Terminal condition systems.

``caught_system`` and ``win_system`` move a running session into ``LOST`` or
``WON`` exactly once. Both skip evaluation unless the phase is ``RUNNING``, so
the first transition sticks until the session is reset.
"""

from dataclasses import replace

from icon_chase.state import State
from icon_chase.types import EntityID, Phase
from icon_chase.utils.terminal import all_icons_collected

WIN_MESSAGE = "You Win!"
LOSE_MESSAGE = "Game Over! The bear got you!"


def is_caught(state: State, agent_id: EntityID) -> bool:
    """True if any baddie is closer than ``collision_distance`` to the agent."""
    agent_pixel = state.pixel[agent_id]
    for baddie_id in state.pursuit:
        baddie_pixel = state.pixel.get(baddie_id)
        if baddie_pixel is None:
            continue
        if agent_pixel.distance_to(baddie_pixel) < state.collision_distance:
            return True
    return False


def caught_system(state: State, agent_id: EntityID) -> State:
    """Set ``LOST`` if a baddie reached the agent."""
    if state.phase != Phase.RUNNING:
        return state
    if is_caught(state, agent_id):
        return replace(state, phase=Phase.LOST, message=LOSE_MESSAGE)
    return state


def win_system(state: State) -> State:
    """Set ``WON`` once every icon is collected."""
    if state.phase != Phase.RUNNING:
        return state
    if all_icons_collected(state):
        return replace(state, phase=Phase.WON, message=WIN_MESSAGE)
    return state
