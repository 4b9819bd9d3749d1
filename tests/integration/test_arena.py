from dataclasses import replace

import pytest
from pyrsistent import pset

from icon_chase.components import Position
from icon_chase.config import DEFAULT_CONFIG, ICON_KINDS
from icon_chase.levels.arena import generate, spawn_cells
from icon_chase.types import Phase
from icon_chase.utils.grid import manhattan


def test_default_arena_layout() -> None:
    state = generate(seed=5)
    agent_id = state.agent_id
    assert agent_id is not None
    assert state.phase == Phase.NOT_STARTED
    assert state.position[agent_id] == DEFAULT_CONFIG.start
    assert not state.motion[agent_id].moving

    # 8x5 lattice minus the three card cells and the start cell
    assert len(state.collectible) == 36
    assert state.icon_total == 36
    icon_cells = {state.position[eid] for eid in state.collectible}
    assert len(icon_cells) == 36
    assert DEFAULT_CONFIG.start not in icon_cells
    assert not icon_cells & set(state.grid.blocked)
    assert {state.icon[eid].kind for eid in state.icon} == set(ICON_KINDS)
    assert all(
        state.rewardable[eid].amount == DEFAULT_CONFIG.score_increment
        for eid in state.collectible
    )


def test_baddies_spawn_far_from_player() -> None:
    for seed in range(20):
        state = generate(seed=seed)
        cells = [state.position[eid] for eid in state.pursuit]
        assert len(cells) == DEFAULT_CONFIG.num_baddies
        assert len(set(cells)) == len(cells)
        for pos in cells:
            assert manhattan(pos, DEFAULT_CONFIG.start) >= DEFAULT_CONFIG.min_spawn_distance
            assert state.grid.is_traversable(pos.x, pos.y)
        assert all(p.target == state.agent_id for p in state.pursuit.values())


def test_same_seed_same_arena() -> None:
    assert generate(seed=9) == generate(seed=9)


def test_baddie_count_capped_by_eligible_cells() -> None:
    config = replace(DEFAULT_CONFIG, num_baddies=100)
    state = generate(config, seed=1)
    grid = config.make_grid()
    assert len(state.pursuit) == len(spawn_cells(grid, config.start, config.min_spawn_distance))


def test_custom_obstacles() -> None:
    config = replace(DEFAULT_CONFIG, blocked=pset([Position(1, 0)]), num_baddies=0)
    state = generate(config, seed=1)
    assert state.grid.blocked == pset([Position(1, 0)])
    assert state.icon_total == 8 * 5 - 2


def test_blocked_start_raises() -> None:
    with pytest.raises(ValueError):
        generate(replace(DEFAULT_CONFIG, start=Position(4, 2)))
    with pytest.raises(ValueError):
        generate(replace(DEFAULT_CONFIG, start=Position(8, 0)))
