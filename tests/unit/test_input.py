import pytest

from icon_chase.actions import Direction
from icon_chase.input import InputMapper, key_to_direction


@pytest.mark.parametrize(
    "key, expected",
    [
        ("ArrowUp", Direction.UP),
        ("w", Direction.UP),
        ("W", Direction.UP),
        ("ArrowDown", Direction.DOWN),
        ("s", Direction.DOWN),
        ("ArrowLeft", Direction.LEFT),
        ("A", Direction.LEFT),
        ("ArrowRight", Direction.RIGHT),
        ("d", Direction.RIGHT),
        ("ARROWRIGHT", Direction.RIGHT),
        ("x", None),
        ("Enter", None),
        (" ", None),
    ],
)
def test_key_to_direction(key: str, expected: Direction | None) -> None:
    assert key_to_direction(key) == expected


def test_press_tracks_held_keys() -> None:
    mapper = InputMapper()
    assert mapper.press("ArrowRight") == Direction.RIGHT
    assert mapper.is_active(Direction.RIGHT)
    assert mapper.held_directions() == [Direction.RIGHT]
    assert mapper.release("ArrowRight") == Direction.RIGHT
    assert not mapper.is_active(Direction.RIGHT)
    assert mapper.held_directions() == []


def test_unbound_keys_are_not_held() -> None:
    mapper = InputMapper()
    assert mapper.press("q") is None
    assert mapper.held_directions() == []


def test_held_directions_in_priority_order() -> None:
    mapper = InputMapper()
    mapper.press("d")
    mapper.press("ArrowLeft")
    mapper.press("s")
    mapper.press("ArrowUp")
    assert mapper.held_directions() == [
        Direction.UP,
        Direction.DOWN,
        Direction.LEFT,
        Direction.RIGHT,
    ]


def test_alternate_keys_share_direction() -> None:
    mapper = InputMapper()
    mapper.press("w")
    mapper.press("ArrowUp")
    mapper.release("W")
    # ArrowUp is still down
    assert mapper.is_active(Direction.UP)
    assert mapper.held_directions() == [Direction.UP]
    mapper.release("arrowup")
    assert not mapper.is_active(Direction.UP)


def test_clear_releases_everything() -> None:
    mapper = InputMapper()
    mapper.press("a")
    mapper.press("s")
    mapper.clear()
    assert mapper.held_directions() == []
