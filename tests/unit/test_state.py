from icon_chase.levels.arena import generate
from icon_chase.state import State
from icon_chase.types import Phase
from tests.test_utils import make_grid


def test_description_skips_empty_fields() -> None:
    description = generate(seed=1).description
    for key in ("message", "score", "tick"):
        assert key not in description
    for key in ("agent", "pixel", "collectible", "icon_total"):
        assert key in description
    assert description["phase"] == Phase.NOT_STARTED
    assert description["seed"] == 1


def test_description_of_bare_state() -> None:
    description = State(grid=make_grid()).description
    assert set(description.keys()) == {
        "grid",
        "collision_distance",
        "icon_linger",
        "phase",
    }
