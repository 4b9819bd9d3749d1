from dataclasses import replace

from icon_chase.levels.arena import generate
from icon_chase.renderer import DEFAULT_PALETTE, kind_to_color, render
from icon_chase.types import Phase


def test_render_size_follows_scale() -> None:
    state = generate(seed=0)
    assert render(state).size == (800, 500)
    assert render(state, scale=0.5).size == (400, 250)


def test_terminal_banner() -> None:
    state = generate(seed=0)
    probe = (5, 250)
    assert render(state).getpixel(probe) == DEFAULT_PALETTE.background
    lost = replace(state, phase=Phase.LOST, message="Game Over!")
    assert render(lost).getpixel(probe) != DEFAULT_PALETTE.background


def test_collected_icons_are_not_drawn() -> None:
    state = generate(seed=0)
    occupied = {state.position[eid] for eid in state.motion}
    icon_id = next(
        eid for eid in sorted(state.collectible) if state.position[eid] not in occupied
    )
    pos = state.position[icon_id]
    probe = tuple(int(v) for v in state.grid.to_pixel(pos.x, pos.y))
    assert render(state).getpixel(probe) != DEFAULT_PALETTE.path
    collected = replace(
        state,
        collectible=state.collectible.set(
            icon_id, replace(state.collectible[icon_id], collected_at=0)
        ),
    )
    assert render(collected).getpixel(probe) == DEFAULT_PALETTE.path


def test_kind_colors_are_stable() -> None:
    assert kind_to_color("star") == kind_to_color("star")
    assert kind_to_color("star")[3] == 255
