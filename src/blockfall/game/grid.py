from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from .pieces import Piece


EMPTY = 0

Grid = np.ndarray


def _freeze(grid: Grid) -> Grid:
    grid.setflags(write=False)
    return grid


def empty_grid(width: int, height: int) -> Grid:
    """Read-only (height, width) grid of EMPTY cells."""
    return _freeze(np.zeros((int(height), int(width)), dtype=np.int8))


def is_inside(grid: Grid, x: int, y: int) -> bool:
    height, width = grid.shape
    return 0 <= x < width and 0 <= y < height


def collides(grid: Grid, piece: Piece, x: int, y: int) -> bool:
    """True if a filled cell of ``piece`` at (x, y) is off-grid or overlaps a block."""
    for cx, cy in piece.cells_at(x, y):
        if not is_inside(grid, cx, cy):
            return True
        if grid[cy, cx] != EMPTY:
            return True
    return False


def burn(grid: Grid, piece: Piece, x: int, y: int) -> Grid:
    """Return a copy of ``grid`` with ``piece`` committed at (x, y)."""
    burned = grid.copy()
    for cx, cy in piece.cells_at(x, y):
        if is_inside(grid, cx, cy):
            burned[cy, cx] = int(piece.color)
    return _freeze(burned)


def top_row_occupied(grid: Grid) -> bool:
    return bool(np.any(grid[0] != EMPTY))


def full_rows(grid: Grid) -> Tuple[int, ...]:
    return tuple(int(row) for row in np.where(np.all(grid != EMPTY, axis=1))[0])


def clear_rows(grid: Grid, rows: Sequence[int]) -> Grid:
    """Remove ``rows`` and add as many empty rows at the top."""
    if len(rows) == 0:
        return grid
    kept = np.delete(grid, list(rows), axis=0)
    num = grid.shape[0] - kept.shape[0]
    new_rows = np.zeros((num, grid.shape[1]), dtype=grid.dtype)
    return _freeze(np.vstack((new_rows, kept)))
