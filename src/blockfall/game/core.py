from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Tuple

import numpy as np

from .actions import Action, Direction, Drop, Move, Restart, Rotate, apply
from .state import GameConfig, GameState, SeedSource, new_game


class Control(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    RESTART = 5
    NONE = 6


CONTROL_ACTIONS: Dict[Control, Optional[Action]] = {
    Control.LEFT: Move(Direction.X, -1),
    Control.RIGHT: Move(Direction.X, 1),
    Control.ROTATE: Rotate(),
    Control.SOFT_DROP: Move(Direction.Y, 1),
    Control.HARD_DROP: Drop(),
    Control.RESTART: Restart(),
    Control.NONE: None,
}


@dataclass(frozen=True)
class TickSchedule:
    """Gravity interval by level, owned by whatever drives the game."""

    base_ms: int = 500
    min_ms: int = 100
    decrement_ms: int = 100

    def __post_init__(self) -> None:
        if self.base_ms <= 0 or self.min_ms <= 0 or self.decrement_ms <= 0:
            raise ValueError("tick values must be positive")

    def interval_ms(self, level: int) -> int:
        if level * self.decrement_ms >= self.base_ms:
            return self.min_ms
        return self.base_ms - level * self.decrement_ms


class BlockfallGame:
    """Mutable session around the immutable state: applies actions in order."""

    def __init__(self, config: Optional[GameConfig] = None, seed: SeedSource = None) -> None:
        self.config = config or GameConfig()
        self.state: GameState = new_game(seed, self.config)

    @property
    def game_over(self) -> bool:
        return self.state.game_ended

    def reset(self, seed: SeedSource = None) -> None:
        self.state = new_game(seed, self.config, high_score=self.state.high_score)

    def apply(self, action: Action) -> GameState:
        self.state = apply(action, self.state)
        return self.state

    def step(self, control: Control) -> Tuple[np.ndarray, int, bool, dict]:
        control = Control(control)
        before = self.state.score
        action = CONTROL_ACTIONS[control]
        if action is not None:
            self.apply(action)
        reward = self.state.score - before
        info = {
            "score": self.state.score,
            "level": self.state.level,
            "high_score": self.state.high_score,
        }
        return self.get_state(), reward, self.state.game_ended, info

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.state.grid.copy()
        if not self.state.game_ended:
            piece = self.state.active_piece
            height, width = state.shape
            for x, y in piece.cells_at(self.state.piece_x, self.state.piece_y):
                if 0 <= y < height and 0 <= x < width:
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(piece.color)
        return state
