"""Actions: the only way a game state changes.

Each action is a small frozen value. ``apply`` maps (action, state) to the
next state and never mutates its input; ``run`` folds a sequence of actions
over a starting state in order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Tuple, Union

from .grid import burn, clear_rows, collides, full_rows, top_row_occupied
from .pieces import draw_piece
from .state import GameState, new_game


class Direction(str, Enum):
    X = "x"
    Y = "y"


# Tried in order after a rotation; the same list for every piece.
ROTATION_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 0), (1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True)
class Move:
    direction: Direction
    magnitude: int

    def apply(self, state: GameState) -> GameState:
        return _apply_move(self, state)


@dataclass(frozen=True)
class Rotate:
    def apply(self, state: GameState) -> GameState:
        return _apply_rotate(state)


@dataclass(frozen=True)
class Restart:
    def apply(self, state: GameState) -> GameState:
        return _apply_restart(state)


@dataclass(frozen=True)
class Drop:
    def apply(self, state: GameState) -> GameState:
        return _apply_drop(state)


Action = Union[Move, Rotate, Restart, Drop]


def _land(state: GameState) -> GameState:
    # Commit at the last valid position, not at the colliding candidate.
    burned = burn(state.grid, state.active_piece, state.piece_x, state.piece_y)
    if top_row_occupied(burned):
        return replace(state, grid=burned, game_ended=True)

    rows = full_rows(burned)
    score, level, high_score = state.config.rules.update(state.score, state.high_score, len(rows))
    drawn, rng = draw_piece(state.rng)
    return replace(
        state,
        active_piece=state.next_piece,
        next_piece=drawn,
        piece_x=state.config.spawn_x,
        piece_y=0,
        grid=clear_rows(burned, rows),
        rng=rng,
        score=score,
        level=level,
        high_score=high_score,
    )


def _apply_move(move: Move, state: GameState) -> GameState:
    if state.game_ended:
        return state
    new_x = state.piece_x + (move.magnitude if move.direction == Direction.X else 0)
    new_y = state.piece_y + (move.magnitude if move.direction == Direction.Y else 0)

    if not collides(state.grid, state.active_piece, new_x, new_y):
        return replace(state, piece_x=new_x, piece_y=new_y)
    if move.direction == Direction.Y and move.magnitude > 0:
        return _land(state)
    return state


def _apply_rotate(state: GameState) -> GameState:
    if state.game_ended:
        return state
    rotated = state.active_piece.rotated()
    for dx, dy in ROTATION_OFFSETS:
        x = state.piece_x + dx
        y = state.piece_y + dy
        if not collides(state.grid, rotated, x, y):
            return replace(state, active_piece=rotated, piece_x=x, piece_y=y)
    return state


def _apply_restart(state: GameState) -> GameState:
    rng = state.rng.advance()
    high_score = max(state.high_score, state.score)
    # Opening pieces come from a side stream so the kept stream does not replay them.
    fresh = new_game(rng.fork(), config=state.config, high_score=high_score)
    return replace(fresh, rng=rng)


def landing_y(state: GameState) -> int:
    """Lowest row the active piece can reach by falling straight down."""
    y = state.piece_y
    while not collides(state.grid, state.active_piece, state.piece_x, y + 1):
        y += 1
    return y


def _apply_drop(state: GameState) -> GameState:
    if state.game_ended:
        return state
    return _apply_move(Move(Direction.Y, landing_y(state) - state.piece_y), state)


def apply(action: Action, state: GameState) -> GameState:
    if isinstance(action, Move):
        return _apply_move(action, state)
    if isinstance(action, Rotate):
        return _apply_rotate(state)
    if isinstance(action, Restart):
        return _apply_restart(state)
    if isinstance(action, Drop):
        return _apply_drop(state)
    raise TypeError(f"not an action: {action!r}")


def run(state: GameState, actions: Iterable[Action]) -> GameState:
    for action in actions:
        state = apply(action, state)
    return state
