from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Tuple

import numpy as np

from .rng import PseudoRandomStream


class TetrominoType(IntEnum):
    I = 0
    O = 1
    T = 2
    J = 3
    L = 4
    S = 5
    Z = 6


class Color(IntEnum):
    CYAN = 1
    YELLOW = 2
    PURPLE = 3
    ORANGE = 4
    BLUE = 5
    RED = 6
    GREEN = 7


Shape = np.ndarray


def _frozen(values) -> Shape:
    shape = np.array(values, dtype=np.int8)
    shape.setflags(write=False)
    return shape


def rotate90(shape: Shape) -> Shape:
    """Rotate clockwise: ``new[i][j] = old[N-1-j][i]``."""
    return _frozen(np.rot90(shape, 1, axes=(1, 0)))


BASE_SHAPES = {
    TetrominoType.I: _frozen([[1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1], [0, 0, 0]]),
    TetrominoType.J: _frozen([[1, 0, 0], [1, 1, 1], [0, 0, 0]]),
    TetrominoType.L: _frozen([[0, 0, 1], [1, 1, 1], [0, 0, 0]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0], [0, 0, 0]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1], [0, 0, 0]]),
}

BASE_COLORS = {
    TetrominoType.I: Color.CYAN,
    TetrominoType.O: Color.YELLOW,
    TetrominoType.T: Color.PURPLE,
    TetrominoType.J: Color.ORANGE,
    TetrominoType.L: Color.BLUE,
    TetrominoType.S: Color.RED,
    TetrominoType.Z: Color.GREEN,
}


@dataclass(frozen=True, eq=False)
class Piece:
    kind: TetrominoType
    shape: Shape
    color: Color

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.color == other.color
            and np.array_equal(self.shape, other.shape)
        )

    def rotated(self) -> "Piece":
        return replace(self, shape=rotate90(self.shape))

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        h, w = self.shape.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells


# Indexed by stream selector
CATALOG: Tuple[Piece, ...] = tuple(
    Piece(kind=kind, shape=BASE_SHAPES[kind], color=BASE_COLORS[kind]) for kind in TetrominoType
)


def draw_piece(stream: PseudoRandomStream) -> Tuple[Piece, PseudoRandomStream]:
    return CATALOG[stream.value()], stream.advance()
