from icon_chase.actions import Direction
from icon_chase.components import Position
from icon_chase.step import apply_intent
from icon_chase.systems.movement import facing_system, movement_system
from icon_chase.types import Phase
from tests.test_utils import make_grid, make_state


def test_accepted_move_starts_motion() -> None:
    state, agent_id, _, _ = make_state(agent_pos=(1, 1))
    state = movement_system(state, agent_id, Direction.DOWN)
    motion = state.motion[agent_id]
    assert motion.moving
    assert motion.target == Position(1, 2)
    assert state.position[agent_id] == Position(1, 1)
    assert state.agent[agent_id].facing == Direction.DOWN


def test_move_into_wall_only_turns() -> None:
    grid = make_grid(blocked=[(2, 1)])
    state, agent_id, _, _ = make_state(agent_pos=(1, 1), grid=grid)
    new_state = movement_system(state, agent_id, Direction.RIGHT)
    assert not new_state.motion[agent_id].moving
    assert new_state.agent[agent_id].facing == Direction.RIGHT
    assert new_state.position[agent_id] == Position(1, 1)


def test_move_out_of_bounds_only_turns() -> None:
    state, agent_id, _, _ = make_state(agent_pos=(0, 0))
    state = movement_system(state, agent_id, Direction.UP)
    assert not state.motion[agent_id].moving
    assert state.agent[agent_id].facing == Direction.UP
    state = movement_system(state, agent_id, Direction.LEFT)
    assert not state.motion[agent_id].moving
    assert state.agent[agent_id].facing == Direction.LEFT


def test_intent_while_moving_is_rejected_but_turns() -> None:
    state, agent_id, _, _ = make_state(agent_pos=(1, 1))
    state = movement_system(state, agent_id, Direction.RIGHT)
    state = movement_system(state, agent_id, Direction.DOWN)
    assert state.motion[agent_id].target == Position(2, 1)
    assert state.agent[agent_id].facing == Direction.DOWN


def test_facing_system_is_idempotent() -> None:
    state, agent_id, _, _ = make_state(facing=Direction.LEFT)
    assert facing_system(state, agent_id, Direction.LEFT) is state


def test_first_accepted_move_starts_the_game() -> None:
    state, _, _, _ = make_state(agent_pos=(0, 0), phase=Phase.NOT_STARTED)
    rejected = apply_intent(state, Direction.UP)
    assert rejected.phase == Phase.NOT_STARTED
    assert rejected.agent[1].facing == Direction.UP
    accepted = apply_intent(rejected, Direction.RIGHT)
    assert accepted.phase == Phase.RUNNING


def test_intents_ignored_after_game_over() -> None:
    for phase in (Phase.WON, Phase.LOST):
        state, _, _, _ = make_state(agent_pos=(1, 1), phase=phase)
        assert apply_intent(state, Direction.DOWN) is state
