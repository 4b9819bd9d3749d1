"""Icon collection systems.

``collectible_system`` marks every uncollected icon on the agent's *settled*
cell as collected and awards its :class:`Rewardable` amount. Because the
``collected`` flag never reverts, standing on an icon for many ticks scores it
once.

``cleanup_system`` removes collected icons once their linger period has
elapsed. Removal is cosmetic: scoring and the win check already happened at
collection time, and ``State.icon_total`` keeps the original count.
"""

from dataclasses import replace
from typing import Any, Dict, Sequence

from icon_chase.components import Collectible
from icon_chase.state import State
from icon_chase.types import EntityID


def collectible_system(state: State, agent_id: EntityID) -> State:
    """Collect icons under the agent.

    Arguments:
        state:
            Current immutable state.
        agent_id:
            Entity performing the collection.

    Returns:
        State
            State with newly collected icons flagged and the score increased.
    """
    agent_pos = state.position.get(agent_id)
    if agent_pos is None:
        return state

    state_collectible = state.collectible
    state_score = state.score
    for icon_id, collectible in state.collectible.items():
        if collectible.collected or state.position.get(icon_id) != agent_pos:
            continue
        state_collectible = state_collectible.set(
            icon_id, Collectible(collected_at=state.tick)
        )
        reward = state.rewardable.get(icon_id)
        if reward is not None:
            state_score += reward.amount

    if state_collectible is state.collectible:
        return state
    return replace(state, collectible=state_collectible, score=state_score)


def cleanup_system(state: State) -> State:
    """Drop icons collected at least ``icon_linger`` ticks ago."""
    expired = [
        icon_id
        for icon_id, collectible in state.collectible.items()
        if collectible.collected_at is not None
        and state.tick - collectible.collected_at >= state.icon_linger
    ]
    if not expired:
        return state
    return remove_entities(state, expired)


def remove_entities(state: State, entity_ids: Sequence[EntityID]) -> State:
    """Remove ``entity_ids`` from the icon component maps."""
    fields: Dict[str, Any] = {}
    for field in ("position", "icon", "collectible", "rewardable"):
        store = getattr(state, field)
        for entity_id in entity_ids:
            store = store.discard(entity_id)
        fields[field] = store
    return replace(state, **fields)
