from __future__ import annotations

import numpy as np
import pygame

from blockfall.game import GameState, Piece
from .palette import BACKGROUND, color_for_value


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font = None

    def window_size(self, state: GameState) -> tuple[int, int]:
        h, w = state.grid.shape
        side_panel = 6 * self.cell_size
        return w * self.cell_size + side_panel + self.margin * 3, h * self.cell_size + self.margin * 2

    def _grid_surface(self, cells: np.ndarray) -> pygame.Surface:
        h, w = cells.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill(BACKGROUND)
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(int(cells[y, x])), rect)
        return surf

    def _preview_surface(self, piece: Piece) -> pygame.Surface:
        # Next piece at half scale
        size = self.cell_size // 2
        h, w = piece.shape.shape
        surf = pygame.Surface((4 * size, 4 * size))
        surf.fill((10, 10, 14))
        off_x = (4 - w) * size // 2
        off_y = (4 - h) * size // 2
        for x, y in piece.cells_at(0, 0):
            rect = pygame.Rect(off_x + x * size, off_y + y * size, size - 1, size - 1)
            pygame.draw.rect(surf, color_for_value(int(piece.color)), rect)
        return surf

    def draw(self, screen: pygame.Surface, state: GameState, cells: np.ndarray) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        screen.fill((10, 10, 14))
        grid_surf = self._grid_surface(cells)
        screen.blit(grid_surf, (self.margin, self.margin))

        panel_x = self.margin * 2 + grid_surf.get_width()
        screen.blit(self._preview_surface(state.next_piece), (panel_x, self.margin))
        y = self.margin + 3 * self.cell_size
        for label, value in (("Level", state.level), ("Score", state.score), ("High", state.high_score)):
            text = self._font.render(f"{label}: {value}", True, (230, 230, 230))
            screen.blit(text, (panel_x, y))
            y += self._font.get_linesize()

        if state.game_ended:
            text = self._font.render("Press 'R' to restart", True, (255, 255, 255))
            rect = text.get_rect(center=(self.margin + grid_surf.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)
        pygame.display.flip()
