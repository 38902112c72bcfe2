from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from blockfall.game import BlockfallGame, Color, Control, GameConfig
from blockfall.game.rng import LCG_MODULUS
from blockfall.visualization.palette import color_for_value


class BlockfallEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: int = 10000,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        self.game = BlockfallGame(config, seed=0)
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)
        self.terminal_penalty = float(terminal_penalty)

        height = self.game.config.height
        width = self.game.config.width
        num_colors = len(Color)

        # Observation space: grid with the falling piece overlaid as negative colors
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=-num_colors, high=num_colors, shape=(height, width), dtype=np.int8),
                "next_piece": spaces.Discrete(num_colors),
                "level": spaces.Box(low=1, high=np.iinfo(np.int32).max, shape=(1,), dtype=np.int32),
            }
        )
        self.action_space = spaces.Discrete(len(Control))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "grid": self.game.get_state().astype(np.int8),
            "next_piece": int(state.next_piece.kind),
            "level": np.array([state.level], dtype=np.int32),
        }

    def _get_info(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "score": state.score,
            "high_score": state.high_score,
            "piece_x": state.piece_x,
            "piece_y": state.piece_y,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(int(self.np_random.integers(0, LCG_MODULUS)))
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        control = Control(int(action))
        if control == Control.RESTART:
            # reset() owns restarts; an episode never spans two games
            control = Control.NONE
        _, gained, terminated, _ = self.game.step(control)
        self._steps += 1
        truncated = self._steps >= self.max_episode_steps and not terminated

        reward = float(gained)
        if terminated:
            reward += self.terminal_penalty
        return self._get_obs(), reward, bool(terminated), bool(truncated), self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = color_for_value(grid[y, x])
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
