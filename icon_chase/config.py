"""Game configuration.

:class:`GameConfig` collects every tunable constant of the game in one frozen
dataclass. Defaults reproduce the classic layout: an 800x500 play area with an
8x5 lattice, a three-cell obstacle bar in the middle and two baddies. Derive
variants with ``dataclasses.replace``::

    config = replace(DEFAULT_CONFIG, num_baddies=3, baddie_speed=2.5)
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pyrsistent import pset
from pyrsistent.typing import PSet

from icon_chase.components import Position
from icon_chase.grid import Grid, card_blocked_cells


ICON_KINDS: Tuple[str, ...] = (
    "lock",
    "diamond",
    "coffee",
    "gift",
    "shopping-cart",
    "plane",
    "utensils",
    "music",
    "heart",
    "star",
    "key",
    "home",
    "car",
    "ticket",
    "gamepad-2",
    "shopping-bag",
    "credit-card",
    "smartphone",
    "headphones",
    "pizza",
    "book-open",
    "camera",
    "palette",
    "dumbbell",
)


@dataclass(frozen=True)
class GameConfig:
    """Session tuning knobs.

    Attributes:
        width: Play-area width in pixels.
        height: Play-area height in pixels.
        columns: Grid columns.
        rows: Grid rows.
        offset_x: Horizontal margin to the first/last column.
        offset_y: Vertical margin to the first/last row.
        blocked: Obstacle cells; ``None`` selects the centered bar.
        start: Player spawn cell.
        player_speed: Player travel per tick.
        baddie_speed: Baddie travel per tick.
        num_baddies: Number of baddies to spawn.
        min_spawn_distance: Minimum Manhattan distance of baddie spawns from ``start``.
        collision_distance: Pixel distance below which a baddie catches the player.
        score_increment: Score awarded per icon.
        icon_linger: Ticks a collected icon remains before removal.
        greedy_chance: Probability a baddie takes its top-ranked step.
        tick_rate: Nominal ticks per second of the external driver.
        icon_kinds: Glyph names assigned to icons.
    """

    width: float = 800
    height: float = 500
    columns: int = 8
    rows: int = 5
    offset_x: float = 60
    offset_y: float = 50
    blocked: Optional[PSet[Position]] = None
    start: Position = Position(0, 0)
    player_speed: float = 3
    baddie_speed: float = 2
    num_baddies: int = 2
    min_spawn_distance: int = 4
    collision_distance: float = 25
    score_increment: int = 10
    icon_linger: int = 24
    greedy_chance: float = 0.7
    tick_rate: int = 60
    icon_kinds: Tuple[str, ...] = field(default=ICON_KINDS)

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError(
                f"Grid must have at least one cell, got {self.columns}x{self.rows}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Play area must have positive width and height")
        if self.player_speed <= 0 or self.baddie_speed <= 0:
            raise ValueError("Speeds must be positive")
        if self.num_baddies < 0:
            raise ValueError(f"Invalid baddie count: {self.num_baddies}")
        if not 0.0 <= self.greedy_chance <= 1.0:
            raise ValueError(f"greedy_chance must be in [0, 1]: {self.greedy_chance}")
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive: {self.tick_rate}")
        if self.icon_linger < 0:
            raise ValueError(f"icon_linger must be non-negative: {self.icon_linger}")
        if not self.icon_kinds:
            raise ValueError("At least one icon kind is required")

    def make_grid(self) -> Grid:
        """Build the :class:`Grid` described by this configuration."""
        blocked = (
            card_blocked_cells(self.columns, self.rows)
            if self.blocked is None
            else pset(self.blocked)
        )
        return Grid(
            columns=self.columns,
            rows=self.rows,
            width=self.width,
            height=self.height,
            offset_x=self.offset_x,
            offset_y=self.offset_y,
            blocked=blocked,
        )


DEFAULT_CONFIG = GameConfig()
