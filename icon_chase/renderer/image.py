"""Pillow renderer.

Draws one frame from a :class:`icon_chase.snapshot.Snapshot`:

* the lattice of paths joining cell centers,
* the obstacle cells as a filled card,
* uncollected icons as colored discs labelled with their glyph initial,
* baddies as dark discs,
* the player as a triangle pointing in its facing direction,
* a banner with the terminal message once the session is won or lost.

Icon colors are derived deterministically from the glyph name so a given kind
always looks the same across frames and sessions.
"""

import colorsys
from dataclasses import dataclass
from functools import lru_cache
import random
from typing import Tuple

from PIL import Image, ImageDraw

from icon_chase.actions import DIRECTION_OFFSETS
from icon_chase.snapshot import snapshot
from icon_chase.state import State
from icon_chase.types import TERMINAL_PHASES

Color = Tuple[int, int, int, int]

PLAYER_SIZE = 48
ICON_SIZE = 32
BADDIE_SIZE = 40


@dataclass(frozen=True)
class Palette:
    background: Color = (250, 248, 240, 255)
    path: Color = (210, 205, 190, 255)
    card: Color = (60, 60, 80, 255)
    player: Color = (40, 120, 220, 255)
    player_moving: Color = (70, 150, 240, 255)
    baddie: Color = (110, 70, 40, 255)
    banner: Color = (0, 0, 0, 180)
    text: Color = (255, 255, 255, 255)


DEFAULT_PALETTE = Palette()


@lru_cache(maxsize=256)
def kind_to_color(kind: str) -> Color:
    """Deterministically map an icon kind to an RGBA color."""
    rng = random.Random(kind)
    h = rng.random()
    s = 0.5 + 0.3 * rng.random()
    v = 0.75 + 0.2 * rng.random()
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return int(r * 255), int(g * 255), int(b * 255), 255


def _box(cx: float, cy: float, size: float) -> Tuple[float, float, float, float]:
    half = size / 2
    return (cx - half, cy - half, cx + half, cy + half)


def _facing_triangle(
    cx: float, cy: float, size: float, dx: int, dy: int
) -> Tuple[Tuple[float, float], ...]:
    """Isosceles triangle centered on (cx, cy) with its tip toward (dx, dy)."""
    tip = size * 0.5
    base = size * 0.35
    px, py = -dy, dx
    return (
        (cx + dx * tip, cy + dy * tip),
        (cx - dx * base + px * base, cy - dy * base + py * base),
        (cx - dx * base - px * base, cy - dy * base - py * base),
    )


def render(
    state: State, scale: float = 1.0, palette: Palette = DEFAULT_PALETTE
) -> Image.Image:
    """Render ``state`` to an RGBA image of the play area times ``scale``."""
    grid = state.grid
    snap = snapshot(state)
    width = max(1, int(round(grid.width * scale)))
    height = max(1, int(round(grid.height * scale)))
    img = Image.new("RGBA", (width, height), palette.background)
    draw = ImageDraw.Draw(img, "RGBA")

    def at(x: float, y: float) -> Tuple[float, float]:
        return x * scale, y * scale

    # Paths
    line_width = max(1, int(3 * scale))
    for row in range(grid.rows):
        start, end = grid.to_pixel(0, row), grid.to_pixel(grid.columns - 1, row)
        draw.line([at(*start), at(*end)], fill=palette.path, width=line_width)
    for col in range(grid.columns):
        start, end = grid.to_pixel(col, 0), grid.to_pixel(col, grid.rows - 1)
        draw.line([at(*start), at(*end)], fill=palette.path, width=line_width)

    # Obstacle card
    for pos in grid.blocked:
        cx, cy = at(*grid.to_pixel(pos.x, pos.y))
        draw.rectangle(
            _box(cx, cy, max(grid.cell_width, grid.cell_height, 1) * scale * 0.9),
            fill=palette.card,
        )

    # Icons
    for icon in snap.icons:
        if icon.collected:
            continue
        cx, cy = at(*icon.pixel)
        draw.ellipse(_box(cx, cy, ICON_SIZE * scale), fill=kind_to_color(icon.kind))
        if icon.kind:
            draw.text((cx, cy), icon.kind[0].upper(), fill=palette.text, anchor="mm")

    # Baddies
    for baddie in snap.baddies:
        cx, cy = at(*baddie.pixel)
        draw.ellipse(_box(cx, cy, BADDIE_SIZE * scale), fill=palette.baddie)

    # Player
    if snap.player is not None:
        cx, cy = at(*snap.player.pixel)
        dx, dy = DIRECTION_OFFSETS[snap.player.facing]
        color = palette.player_moving if snap.player.moving else palette.player
        draw.polygon(_facing_triangle(cx, cy, PLAYER_SIZE * scale, dx, dy), fill=color)

    # Terminal banner
    if snap.phase in TERMINAL_PHASES:
        draw.rectangle((0, height * 0.4, width, height * 0.6), fill=palette.banner)
        text = f"{snap.message or snap.phase}  Score: {snap.score}"
        draw.text((width / 2, height / 2), text, fill=palette.text, anchor="mm")

    return img
