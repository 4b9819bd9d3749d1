"""Gymnasium environment wrapper for icon_chase.

Wraps a :class:`icon_chase.session.Session` so agents can play the arcade game
one *move* at a time instead of one tick at a time. Each environment step:

1. applies the action as a movement intent and ticks the session until the
   player settles on a cell again, or
2. for ``WAIT``, ticks as long as a baddie needs to cross one cell.

Both are bounded by ``max_ticks_per_step`` and stop when the session ends.

Reward is the delta of ``state.score``. ``terminated`` is ``True`` on a win and
``truncated`` on a loss (mirrors many Gym environments that differentiate
*natural* vs *forced* episode ends).

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"player": {...}, "baddies": [...], "icons": [...], "score": int, "phase": str, "tick": int}}``

Usage:

``env = IconChaseEnv(seed=3)``
"""

import math

import gymnasium as gym
import numpy as np
from typing import Any, Dict, Optional, Tuple

from PIL.Image import Image as PILImage

from icon_chase.actions import Direction, GymAction
from icon_chase.config import DEFAULT_CONFIG, GameConfig
from icon_chase.renderer import render
from icon_chase.session import Session
from icon_chase.snapshot import snapshot_dict
from icon_chase.types import TERMINAL_PHASES, Phase

ObsType = Dict[str, Any]

GYM_TO_DIRECTION: Dict[GymAction, Direction] = {
    GymAction.UP: Direction.UP,
    GymAction.DOWN: Direction.DOWN,
    GymAction.LEFT: Direction.LEFT,
    GymAction.RIGHT: Direction.RIGHT,
}


class IconChaseEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for the icon chase game.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`icon_chase.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_scale: float = 0.5,
        config: GameConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
        max_ticks_per_step: int = 120,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open a window.
            render_scale: Image size relative to the play area.
            config: Game layout and tuning.
            seed: Arena / random seed; reused on every reset unless overridden.
            max_ticks_per_step: Upper bound on ticks simulated per action.
        """
        from gymnasium import spaces

        self._render_mode = render_mode
        self._render_scale = render_scale
        self._max_ticks_per_step = max_ticks_per_step
        self.config = config
        self.session = Session(config=config, seed=seed)

        render_width = max(1, int(round(config.width * render_scale)))
        render_height = max(1, int(round(config.height * render_scale)))

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_height, render_width, 4),
                    dtype=np.uint8,
                ),
                # Structured state is exposed as a plain dict (see snapshot_dict)
                "info": spaces.Dict({}),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: If given, replaces the session seed before rebuilding the arena.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.session = Session(config=self.config, seed=seed)
        else:
            self.session.reset()
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one move.

        Arguments:
            action: Integer index into ``GymAction``.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        gym_action = GymAction(int(action))

        prev_score = self.session.state.score
        direction = GYM_TO_DIRECTION.get(gym_action)
        if direction is not None:
            self.session.move(direction)
            self._advance()
        else:
            self._wait()

        state = self.session.state
        reward = float(state.score - prev_score)
        terminated = state.phase == Phase.WON
        truncated = state.phase == Phase.LOST
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _advance(self) -> None:
        """Tick until the player is idle again, or the session ends."""
        session = self.session
        if session.phase != Phase.RUNNING:
            return
        agent_id = session.state.agent_id
        ticks = 0
        while ticks < self._max_ticks_per_step:
            session.tick()
            ticks += 1
            if session.phase in TERMINAL_PHASES:
                return
            if agent_id is None or not session.state.motion[agent_id].moving:
                return

    @property
    def wait_ticks(self) -> int:
        """Ticks a baddie needs to cross one cell; the length of a ``WAIT``."""
        cell = self.session.state.grid.cell_width
        return max(1, math.ceil(cell / self.config.baddie_speed))

    def _wait(self) -> None:
        """Tick for one baddie cell, or until the session ends."""
        session = self.session
        if session.phase != Phase.RUNNING:
            return
        for _ in range(min(self.wait_ticks, self._max_ticks_per_step)):
            session.tick()
            if session.phase in TERMINAL_PHASES:
                return

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        img = render(self.session.state, scale=self._render_scale)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def _get_obs(self) -> ObsType:
        img = render(self.session.state, scale=self._render_scale)
        return {"image": np.array(img), "info": snapshot_dict(self.session.state)}

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}

    def close(self) -> None:
        """Release any renderer resources (no-op placeholder)."""
        pass
