"""Keyboard to movement-intent mapping.

Raw key identifiers (as reported by a browser or UI toolkit, e.g.
``"ArrowUp"`` or ``"w"``) are folded to lower case and looked up in
:data:`KEY_BINDINGS`. Arrow keys and WASD both map onto the four
:class:`icon_chase.actions.Direction` values; any other key is ignored.

:class:`InputMapper` also remembers which bound keys are held down. The
reducer uses that to keep stepping while a key is held, and front ends use
:meth:`InputMapper.is_active` to highlight on-screen key hints. The mapper
never touches game state itself.
"""

from typing import Dict, List, Optional, Set

from icon_chase.actions import MOVE_PRIORITY, Direction


KEY_BINDINGS: Dict[str, Direction] = {
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
}


def key_to_direction(key: str) -> Optional[Direction]:
    """Direction bound to ``key`` (case-insensitive), or ``None``."""
    return KEY_BINDINGS.get(key.lower())


class InputMapper:
    """Tracks held movement keys and turns key presses into intents."""

    def __init__(self) -> None:
        self._held: Set[str] = set()

    def press(self, key: str) -> Optional[Direction]:
        """Record a key-down event.

        Returns:
            The direction to apply immediately, or ``None`` for unbound keys.
        """
        direction = key_to_direction(key)
        if direction is not None:
            self._held.add(key.lower())
        return direction

    def release(self, key: str) -> Optional[Direction]:
        """Record a key-up event and return the released direction, if bound."""
        direction = key_to_direction(key)
        self._held.discard(key.lower())
        return direction

    def held_directions(self) -> List[Direction]:
        """Held directions in priority order (up, down, left, right)."""
        held = {KEY_BINDINGS[key] for key in self._held}
        return [d for d in MOVE_PRIORITY if d in held]

    def is_active(self, direction: Direction) -> bool:
        return any(KEY_BINDINGS[key] == direction for key in self._held)

    def clear(self) -> None:
        self._held.clear()
