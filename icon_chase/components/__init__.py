"""icon_chase.components
=======================

Aggregate import surface for the component dataclasses stored on
:class:`icon_chase.state.State`.

Every component is a frozen ``@dataclass`` value object keyed by entity id in
a persistent map; systems replace them instead of mutating. Import from this
package directly, e.g.::

    from icon_chase.components import Position, Motion, Agent

"""

from .agent import Agent
from .collectible import Collectible
from .icon import Icon
from .motion import Motion
from .pixel import Pixel
from .position import Position
from .pursuit import Pursuit
from .rewardable import Rewardable

__all__ = [
    "Agent",
    "Collectible",
    "Icon",
    "Motion",
    "Pixel",
    "Position",
    "Pursuit",
    "Rewardable",
]
