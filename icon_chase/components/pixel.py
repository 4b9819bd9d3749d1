"""Continuous (rendered) position component."""

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Pixel:
    """Continuous coordinate in play-area units.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate.
    """

    x: float
    y: float

    def distance_to(self, other: "Pixel") -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(other.x - self.x, other.y - self.y)
