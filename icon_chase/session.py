"""Game session aggregate.

:class:`Session` owns everything that lives for one play-through: the current
immutable :class:`icon_chase.state.State`, the :class:`InputMapper` tracking
held keys, and the random source driving the baddies. It exposes the small
imperative surface front ends need:

* ``tick()``: called by an external driver at ``config.tick_rate`` Hz. The
  session owns no timer; ticks must not overlap.
* ``key_down(key)`` / ``key_up(key)``: raw keyboard events. A key-down applies
  one movement intent immediately, independent of the tick rate.
* ``reset()``: rebuilds the arena from the configured seed (the "play again"
  action).
* ``subscribe(listener)``: listeners receive a :class:`Snapshot` after every
  tick, intent and reset.

Usage::

    session = Session(seed=7)
    session.key_down("ArrowRight")
    for _ in range(60):
        session.tick()
    print(session.snapshot().score)
"""

import logging
import random
import time
from typing import Callable, List, Optional

from icon_chase.actions import Direction
from icon_chase.config import DEFAULT_CONFIG, GameConfig
from icon_chase.input import InputMapper
from icon_chase.levels.arena import generate
from icon_chase.snapshot import Snapshot, snapshot
from icon_chase.state import State
from icon_chase.step import apply_intent, step
from icon_chase.types import TERMINAL_PHASES, Phase, RandomSource

logger = logging.getLogger(__name__)

Listener = Callable[[Snapshot], None]


class Session:
    """Single-writer owner of a game's state."""

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        initial_state_fn: Callable[[GameConfig, Optional[int]], State] = generate,
    ):
        """Create a session and build its first arena.

        Arguments:
            config: Layout and tuning.
            seed: Seed for arena generation; also seeds the default random source.
            rng: Random source for baddie decisions. Defaults to ``random.Random(seed)``.
            initial_state_fn: Callable ``(config, seed) -> State`` used on init and reset.
        """
        self.config = config
        self.seed = seed
        self.input = InputMapper()
        self._rng_override = rng
        self._initial_state_fn = initial_state_fn
        self._listeners: List[Listener] = []
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.state: State = initial_state_fn(config, seed)

    # -------- Listeners --------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # -------- Commands --------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def snapshot(self) -> Snapshot:
        return snapshot(self.state)

    def tick(self) -> State:
        """Advance one tick using the currently held keys."""
        previous = self.state.phase
        self.state = step(self.state, self.input.held_directions(), self.rng)
        self._log_transition(previous)
        self._notify()
        return self.state

    def move(self, direction: Direction) -> State:
        """Apply one movement intent."""
        previous = self.state.phase
        self.state = apply_intent(self.state, direction)
        self._log_transition(previous)
        self._notify()
        return self.state

    def key_down(self, key: str) -> State:
        """Handle a raw key-down event; unbound keys are ignored."""
        direction = self.input.press(key)
        if direction is None:
            return self.state
        return self.move(direction)

    def key_up(self, key: str) -> None:
        self.input.release(key)

    def reset(self) -> State:
        """Rebuild the arena and return to ``NOT_STARTED``."""
        self.input.clear()
        if self._rng_override is None:
            self.rng = random.Random(self.seed)
        self.state = self._initial_state_fn(self.config, self.seed)
        logger.info("Session reset (seed=%s)", self.seed)
        self._notify()
        return self.state

    def _log_transition(self, previous: Phase) -> None:
        if self.state.phase == previous:
            return
        logger.info(
            "Phase %s -> %s at tick %d (score=%d)",
            previous,
            self.state.phase,
            self.state.tick,
            self.state.score,
        )


def run(session: Session, ticks: int, realtime: bool = False) -> State:
    """Drive ``session`` for up to ``ticks`` ticks, stopping early on a terminal phase.

    With ``realtime`` the loop is paced at ``config.tick_rate`` ticks per
    second; otherwise it runs as fast as possible (tests, training).
    """
    interval = 1.0 / session.config.tick_rate
    deadline = time.monotonic()
    for _ in range(ticks):
        if session.phase in TERMINAL_PHASES:
            break
        session.tick()
        if realtime:
            deadline += interval
            delay = deadline - time.monotonic()
            if delay > 0:
                time.sleep(delay)
    return session.state
