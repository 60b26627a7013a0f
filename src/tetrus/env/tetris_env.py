from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetrus.game import SHAPE_COLORS, GameConfig, Move, TetrisGame
from tetrus.game.grid import EMPTY_CELL


NOOP = len(Move)


class TetrisEnv(gym.Env):
    """One step is one player move (or no-op) followed by one gravity tick.

    Actions 0-4 are the ``Move`` values, action 5 does nothing. The reward is
    the number of points scored during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None, bot=None) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.game = TetrisGame(self.config, bot=bot)

        h, w = self.config.height, self.config.width
        self.observation_space = spaces.Box(
            low=EMPTY_CELL, high=len(SHAPE_COLORS) - 1, shape=(h, w), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Move) + 1)

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score.points,
            "level": self.game.score.level,
            "lines_cleared_total": self.game.score.total_lines_cleared,
            "pieces_placed": self.game.pieces_placed,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.reset()
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = int(action)
        if not 0 <= action <= NOOP:
            raise ValueError(f"Invalid action {action}")

        points_before = self.game.score.points
        settled = False
        if action != NOOP:
            settled = self.game.apply_move(Move(action))
        if not settled:
            self.game.drop_one()

        reward = float(self.game.score.points - points_before)
        terminated = bool(self.game.game_over)
        truncated = False
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self.game.get_state()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                v = int(grid[y, x])
                color = (30, 30, 36) if v == EMPTY_CELL else SHAPE_COLORS[v]
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
