"""Game module for Blockfall.

Exports the rule engine and the session wrapper around it:
- PseudoRandomStream: Reproducible piece selector stream
- Piece, TetrominoType, Color, CATALOG: The seven pieces and their colors
- Grid operations: collision, burn, line detection and clearance
- ScoringRules: Score, level and high score updates
- GameState, GameConfig, new_game: Immutable state and its factory
- Move, Rotate, Restart, Drop, apply, run: State transitions
- BlockfallGame, Control, TickSchedule: Driver-facing session
"""

from .rng import PseudoRandomStream
from .pieces import CATALOG, Color, Piece, TetrominoType, draw_piece, rotate90
from .grid import EMPTY, burn, clear_rows, collides, empty_grid, full_rows, top_row_occupied
from .rules import ScoringRules
from .state import GameConfig, GameState, new_game
from .actions import Action, Direction, Drop, Move, Restart, Rotate, apply, landing_y, run
from .core import BlockfallGame, Control, CONTROL_ACTIONS, TickSchedule

__all__ = [
    "PseudoRandomStream",
    "CATALOG",
    "Color",
    "Piece",
    "TetrominoType",
    "draw_piece",
    "rotate90",
    "EMPTY",
    "burn",
    "clear_rows",
    "collides",
    "empty_grid",
    "full_rows",
    "top_row_occupied",
    "ScoringRules",
    "GameConfig",
    "GameState",
    "new_game",
    "Action",
    "Direction",
    "Drop",
    "Move",
    "Restart",
    "Rotate",
    "apply",
    "landing_y",
    "run",
    "BlockfallGame",
    "Control",
    "CONTROL_ACTIONS",
    "TickSchedule",
]
