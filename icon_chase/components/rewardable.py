"""Reward component.

Score granted by an icon when the player collects it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rewardable:
    """Specifies the score granted when the entity is collected.

    Attributes:
        amount:
            Score increment added exactly once, at the moment of collection.
    """

    amount: int
