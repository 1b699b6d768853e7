from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, GameConfig, GameSession, TetrominoType


NUM_KINDS = len(TetrominoType)

# RGB per identity token, index 0 is the empty cell
PALETTE = np.array(
    [
        (30, 30, 36),
        (0, 240, 240),   # I
        (240, 240, 0),   # O
        (160, 0, 240),   # T
        (0, 240, 0),     # S
        (240, 0, 0),     # Z
        (240, 160, 0),   # L
        (0, 0, 240),     # J
    ],
    dtype=np.uint8,
)


class FallingBlocksEnv(gym.Env):
    """
    Falling-block environment with one discrete command per step.

    Actions follow `Action`: left, right, rotate, soft drop, none.
    Gravity pulls the piece down once every `gravity_every` steps, so an
    agent gets a few commands per row as a human would between timer ticks.
    Reward is the score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        gravity_every: int = 4,
        max_episode_steps: int = 10000,
        terminal_penalty: float = 0.0,
    ) -> None:
        super().__init__()
        self.session = GameSession(config)
        self.render_mode = render_mode
        self.gravity_every = max(1, int(gravity_every))
        self.max_episode_steps = int(max_episode_steps)
        self.terminal_penalty = float(terminal_penalty)

        rows = self.session.config.rows
        cols = self.session.config.cols

        # Settled blocks are positive tokens, the falling piece is negative
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=-NUM_KINDS, high=NUM_KINDS, shape=(rows, cols), dtype=np.int8),
                # 0 when there is no next piece
                "next": spaces.Discrete(NUM_KINDS + 1),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        nxt = self.session.get_next_piece()
        return {
            "grid": self.session.get_state().astype(np.int8),
            "next": 0 if nxt is None else int(nxt.kind),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.session.get_score(),
            "lines_cleared_total": self.session.lines_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.session.start(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        score_before = self.session.get_score()
        self.session.step(Action(int(action)))
        self._steps += 1
        if self._steps % self.gravity_every == 0:
            self.session.tick()

        terminated = self.session.is_over()
        truncated = self._steps >= self.max_episode_steps
        reward = float(self.session.get_score() - score_before)
        if terminated:
            reward += self.terminal_penalty
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            cell = 12
            tokens = np.abs(self.session.get_state())
            img = PALETTE[tokens]
            return np.repeat(np.repeat(img, cell, axis=0), cell, axis=1)
        return None

    def close(self) -> None:
        pass
