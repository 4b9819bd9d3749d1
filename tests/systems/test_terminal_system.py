from dataclasses import replace

from icon_chase.components import Collectible, Pixel
from icon_chase.systems.collectible import remove_entities
from icon_chase.systems.terminal import (
    LOSE_MESSAGE,
    WIN_MESSAGE,
    caught_system,
    is_caught,
    win_system,
)
from icon_chase.types import Phase
from tests.test_utils import make_state


def test_caught_below_threshold() -> None:
    state, agent_id, (baddie_id,), _ = make_state(
        agent_pos=(0, 0), baddie_positions=[(1, 0)], collision_distance=5.0
    )
    assert not is_caught(state, agent_id)
    state = replace(state, pixel=state.pixel.set(baddie_id, Pixel(4.9, 0.0)))
    assert is_caught(state, agent_id)
    state = caught_system(state, agent_id)
    assert state.phase == Phase.LOST
    assert state.message == LOSE_MESSAGE


def test_exact_threshold_is_not_a_catch() -> None:
    state, agent_id, (baddie_id,), _ = make_state(
        agent_pos=(0, 0), baddie_positions=[(1, 0)], collision_distance=5.0
    )
    state = replace(state, pixel=state.pixel.set(baddie_id, Pixel(3.0, 4.0)))
    assert not is_caught(state, agent_id)


def test_caught_only_while_running() -> None:
    state, agent_id, _, _ = make_state(
        agent_pos=(0, 0), baddie_positions=[(0, 0)], phase=Phase.WON
    )
    assert caught_system(state, agent_id) is state


def test_win_when_all_icons_collected() -> None:
    state, _, _, icon_ids = make_state(icon_positions=[(1, 1), (2, 2)])
    assert win_system(state) is state

    collected = state.collectible.set(icon_ids[0], Collectible(collected_at=0))
    assert win_system(replace(state, collectible=collected)).phase == Phase.RUNNING

    collected = collected.set(icon_ids[1], Collectible(collected_at=1))
    won = win_system(replace(state, collectible=collected))
    assert won.phase == Phase.WON
    assert won.message == WIN_MESSAGE


def test_no_win_without_icons() -> None:
    state, _, _, _ = make_state(icon_positions=[])
    assert state.icon_total == 0
    assert win_system(state).phase == Phase.RUNNING


def test_win_survives_cleaned_up_icons() -> None:
    state, _, _, (icon_id,) = make_state(icon_positions=[(1, 1)])
    state = remove_entities(state, [icon_id])
    assert not state.collectible
    assert win_system(state).phase == Phase.WON
