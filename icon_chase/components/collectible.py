"""Collectible component.

Marks an icon that the player picks up by settling on its cell. Collection is
monotonic: once ``collected_at`` is set it is never cleared. The entity stays
in the state for a short linger period (for fade-out rendering) and is then
removed by :func:`icon_chase.systems.collectible.cleanup_system`.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Collectible:
    """Collection record.

    Attributes:
        collected_at: Tick at which the icon was collected, ``None`` if not yet.
    """

    collected_at: Optional[int] = None

    @property
    def collected(self) -> bool:
        return self.collected_at is not None
