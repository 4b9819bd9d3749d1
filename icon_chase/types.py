"""Common type aliases and enumerations.

``Phase`` is the coarse session state stored on :class:`icon_chase.state.State`;
``RandomSource`` is the minimal interface the pursuit controller needs from
an injected random number generator (``random.Random`` satisfies it).
"""

from enum import StrEnum, auto
from typing import Protocol, Sequence, Tuple, TypeVar


EntityID = int

PixelCoord = Tuple[float, float]

T = TypeVar("T")


class Phase(StrEnum):
    """Session phase. ``WON`` and ``LOST`` are terminal until reset."""

    NOT_STARTED = auto()
    RUNNING = auto()
    WON = auto()
    LOST = auto()


TERMINAL_PHASES = (Phase.WON, Phase.LOST)


class RandomSource(Protocol):
    """Subset of ``random.Random`` used by the simulation."""

    def random(self) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...
