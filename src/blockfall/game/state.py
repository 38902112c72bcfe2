from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .grid import Grid, empty_grid
from .pieces import Piece, draw_piece
from .rng import PseudoRandomStream
from .rules import ScoringRules


@dataclass(frozen=True)
class GameConfig:
    width: int = 10
    height: int = 20
    starting_level: int = 1

    def __post_init__(self) -> None:
        # The widest piece is 4 cells; spawning needs at least one row below the top.
        if self.width < 4:
            raise ValueError(f"width must be >= 4, got {self.width}")
        if self.height < 2:
            raise ValueError(f"height must be >= 2, got {self.height}")

    @property
    def spawn_x(self) -> int:
        return self.width // 2 - 2

    @property
    def rules(self) -> ScoringRules:
        return ScoringRules(starting_level=self.starting_level)


@dataclass(frozen=True, eq=False)
class GameState:
    """Immutable snapshot of a game; every action returns a new one."""

    active_piece: Piece
    next_piece: Piece
    piece_x: int
    piece_y: int
    grid: Grid
    rng: PseudoRandomStream
    score: int = 0
    level: int = 1
    high_score: int = 0
    game_ended: bool = False
    config: GameConfig = field(default_factory=GameConfig)


SeedSource = Union[PseudoRandomStream, int, None]


def _stream_from(seed_source: SeedSource) -> PseudoRandomStream:
    if isinstance(seed_source, PseudoRandomStream):
        return seed_source
    if seed_source is None:
        return PseudoRandomStream.from_clock()
    return PseudoRandomStream(seed_source)


def new_game(
    seed_source: SeedSource = None,
    config: Optional[GameConfig] = None,
    high_score: int = 0,
) -> GameState:
    """Fresh state: two pieces drawn in sequence, empty grid, zero score.

    ``seed_source`` may be a stream, an explicit integer seed, or ``None`` to
    seed from the wall clock.
    """
    config = config or GameConfig()
    stream = _stream_from(seed_source)
    active, stream = draw_piece(stream)
    upcoming, stream = draw_piece(stream)
    return GameState(
        active_piece=active,
        next_piece=upcoming,
        piece_x=config.spawn_x,
        piece_y=0,
        grid=empty_grid(config.width, config.height),
        rng=stream,
        score=0,
        level=config.starting_level,
        high_score=high_score,
        game_ended=False,
        config=config,
    )
