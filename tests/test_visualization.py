import pygame
import pytest

from blockfall.game import BlockfallGame, Control
from blockfall.visualization.human_play import KEY_TO_CONTROL, build_parser
from blockfall.visualization.palette import BACKGROUND, color_for_value
from blockfall.visualization.renderer import Renderer


@pytest.fixture
def screen_for(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.init()

    def _screen(size):
        return pygame.display.set_mode(size)

    yield _screen
    pygame.quit()


def test_key_map_matches_controls():
    assert KEY_TO_CONTROL[pygame.K_a] == Control.LEFT
    assert KEY_TO_CONTROL[pygame.K_d] == Control.RIGHT
    assert KEY_TO_CONTROL[pygame.K_s] == Control.SOFT_DROP
    assert KEY_TO_CONTROL[pygame.K_w] == Control.ROTATE
    assert KEY_TO_CONTROL[pygame.K_SPACE] == Control.HARD_DROP
    assert KEY_TO_CONTROL[pygame.K_r] == Control.RESTART
    assert pygame.K_ESCAPE not in KEY_TO_CONTROL


def test_parser_options():
    args = build_parser().parse_args(["--seed", "9", "--cell-size", "20"])
    assert args.seed == 9
    assert args.cell_size == 20


def test_renderer_draws_grid_cells(screen_for):
    game = BlockfallGame(seed=21)
    renderer = Renderer(cell_size=20, margin=10)
    screen = screen_for(renderer.window_size(game.state))

    cells = game.get_state()
    renderer.draw(screen, game.state, cells)

    x, y = game.state.active_piece.cells_at(game.state.piece_x, game.state.piece_y)[0]
    pixel = screen.get_at((10 + x * 20 + 1, 10 + y * 20 + 1))
    assert tuple(pixel)[:3] == color_for_value(cells[y, x])
    corner = screen.get_at((10 + 1, 10 + 19 * 20 + 1))
    assert tuple(corner)[:3] == BACKGROUND


def test_renderer_handles_ended_game(screen_for):
    game = BlockfallGame(seed=8)
    while not game.game_over:
        game.step(Control.HARD_DROP)
        game.step(Control.SOFT_DROP)
    renderer = Renderer(cell_size=16)
    screen = screen_for(renderer.window_size(game.state))
    renderer.draw(screen, game.state, game.get_state())
    assert screen.get_width() == renderer.window_size(game.state)[0]
