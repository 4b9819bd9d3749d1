import math

import pytest

from icon_chase.components import Motion, Pixel, Position
from icon_chase.systems.motion import advance, motion_step, motion_system, start_motion
from tests.test_utils import make_grid, make_state


@pytest.mark.parametrize(
    "distance, speed",
    [(10.0, 1.0), (10.0, 3.0), (100.0, 2.0), (97.14285714285714, 3.0), (5.0, 7.0)],
)
def test_arrival_takes_ceil_distance_over_speed_ticks(
    distance: float, speed: float
) -> None:
    pixel = Pixel(0.0, 0.0)
    goal = Pixel(distance, 0.0)
    ticks = 0
    arrived = False
    while not arrived:
        prev_remaining = pixel.distance_to(goal)
        pixel, arrived = advance(pixel, goal, speed)
        ticks += 1
        # Never overshoot, always get closer
        assert pixel.x <= goal.x
        assert pixel.distance_to(goal) < prev_remaining
    assert ticks == math.ceil(distance / speed)
    assert pixel == goal


def test_advance_moves_exactly_speed_along_diagonal() -> None:
    pixel, arrived = advance(Pixel(0.0, 0.0), Pixel(30.0, 40.0), 5.0)
    assert not arrived
    assert pixel.x == pytest.approx(3.0)
    assert pixel.y == pytest.approx(4.0)


def test_advance_zero_distance_arrives_immediately() -> None:
    goal = Pixel(4.0, 4.0)
    pixel, arrived = advance(goal, goal, 2.0)
    assert arrived
    assert pixel == goal


def test_motion_step_settles_on_target() -> None:
    state, agent_id, _, _ = make_state(agent_pos=(0, 0), player_speed=4.0)
    state = start_motion(state, agent_id, Position(1, 0))

    state, arrived = motion_step(state, agent_id)
    assert not arrived
    assert state.pixel[agent_id] == Pixel(4.0, 0.0)
    assert state.position[agent_id] == Position(0, 0)
    assert state.motion[agent_id].moving

    state, arrived = motion_step(state, agent_id)
    assert not arrived
    assert state.pixel[agent_id] == Pixel(8.0, 0.0)

    state, arrived = motion_step(state, agent_id)
    assert arrived
    assert state.pixel[agent_id] == Pixel(10.0, 0.0)
    assert state.position[agent_id] == Position(1, 0)
    assert state.motion[agent_id] == Motion(target=Position(1, 0), speed=4.0)


def test_motion_step_ignores_idle_body() -> None:
    state, agent_id, _, _ = make_state(agent_pos=(2, 2))
    new_state, arrived = motion_step(state, agent_id)
    assert not arrived
    assert new_state is state


def test_moving_to_current_cell_clears_flag_without_moving() -> None:
    state, agent_id, _, _ = make_state(agent_pos=(2, 2))
    state = start_motion(state, agent_id, Position(2, 2))
    state, arrived = motion_step(state, agent_id)
    assert arrived
    assert not state.motion[agent_id].moving
    assert state.pixel[agent_id] == Pixel(20.0, 20.0)


def test_pixel_stays_on_segment_while_moving() -> None:
    grid = make_grid(cell=7.0)
    state, agent_id, _, _ = make_state(agent_pos=(1, 1), grid=grid, player_speed=0.9)
    state = start_motion(state, agent_id, Position(1, 2))
    start, end = grid.to_pixel(1, 1), grid.to_pixel(1, 2)
    while state.motion[agent_id].moving:
        state = motion_system(state, [agent_id])
        pixel = state.pixel[agent_id]
        assert pixel.x == pytest.approx(start[0])
        assert start[1] <= pixel.y <= end[1]
    assert state.pixel[agent_id] == Pixel(*end)


def test_motion_system_advances_every_listed_body() -> None:
    state, agent_id, baddie_ids, _ = make_state(
        agent_pos=(0, 0), baddie_positions=[(4, 4)], baddie_speed=2.0
    )
    baddie_id = baddie_ids[0]
    state = start_motion(state, agent_id, Position(0, 1))
    state = start_motion(state, baddie_id, Position(3, 4))
    state = motion_system(state, [agent_id, baddie_id])
    assert state.pixel[agent_id] == Pixel(0.0, 1.0)
    assert state.pixel[baddie_id] == Pixel(38.0, 40.0)


def test_motion_system_skips_unknown_entities() -> None:
    state, _, _, _ = make_state()
    assert motion_system(state, [999]) is state


def test_speed_larger_than_cell_snaps_in_one_tick() -> None:
    state, agent_id, _, _ = make_state(agent_pos=(0, 0), player_speed=50.0)
    state = start_motion(state, agent_id, Position(0, 1))
    state, arrived = motion_step(state, agent_id)
    assert arrived
    assert state.position[agent_id] == Position(0, 1)
