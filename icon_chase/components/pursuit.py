"""Pursuit component.

Marks a baddie and names the entity it chases. The pursuit system reads it
each tick the baddie is idle.
"""

from dataclasses import dataclass
from typing import Optional

from icon_chase.types import EntityID


@dataclass(frozen=True)
class Pursuit:
    """Chase directive for a baddie.

    Each tick an idle pursuer greedily steps toward the settled cell of
    ``target``. Candidate steps are ranked by the gap they close; the top one
    is taken with probability ``greedy_chance`` and a uniformly random
    candidate otherwise.

    Attributes:
        target:
            Entity ID to chase. If ``None`` the pursuer stays where it is.
        greedy_chance:
            Probability of taking the top-ranked candidate step.
    """

    target: Optional[EntityID] = None
    greedy_chance: float = 0.7
