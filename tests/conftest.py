from __future__ import annotations

from dataclasses import replace

import pytest

from blockfall.game import GameState, TetrominoType, new_game
from helpers import piece


@pytest.fixture
def base_state() -> GameState:
    return new_game(12345)


@pytest.fixture
def place():
    """Build a state with a chosen piece, position and grid on top of a seeded game."""

    def _place(kind: TetrominoType, x: int, y: int, grid=None, seed: int = 12345, **fields) -> GameState:
        state = new_game(seed)
        return replace(
            state,
            active_piece=piece(kind),
            piece_x=x,
            piece_y=y,
            grid=state.grid if grid is None else grid,
            **fields,
        )

    return _place
