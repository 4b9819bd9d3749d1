"""Icon appearance component.

``kind`` is a glyph name (e.g. ``"coffee"``, ``"star"``). It is purely
cosmetic and only consulted by renderers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Icon:
    """Glyph tag.

    Attributes:
        kind: Icon glyph name.
    """

    kind: str
