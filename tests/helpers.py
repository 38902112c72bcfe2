from __future__ import annotations

import numpy as np

from blockfall.game import CATALOG, Color, TetrominoType


def make_grid(filled=(), width: int = 10, height: int = 20, color: Color = Color.RED) -> np.ndarray:
    """Read-only grid with ``color`` at each (x, y) in ``filled``."""
    grid = np.zeros((height, width), dtype=np.int8)
    for x, y in filled:
        grid[y, x] = int(color)
    grid.setflags(write=False)
    return grid


def row_cells(y: int, xs) -> list:
    return [(x, y) for x in xs]


def piece(kind: TetrominoType):
    return CATALOG[int(kind)]
