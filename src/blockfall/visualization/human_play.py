from __future__ import annotations

import argparse
from typing import Dict, Optional

import pygame

from blockfall.game import BlockfallGame, Control, TickSchedule
from .renderer import Renderer


KEY_TO_CONTROL: Dict[int, Control] = {
    pygame.K_a: Control.LEFT,
    pygame.K_LEFT: Control.LEFT,
    pygame.K_d: Control.RIGHT,
    pygame.K_RIGHT: Control.RIGHT,
    pygame.K_s: Control.SOFT_DROP,
    pygame.K_DOWN: Control.SOFT_DROP,
    pygame.K_w: Control.ROTATE,
    pygame.K_UP: Control.ROTATE,
    pygame.K_SPACE: Control.HARD_DROP,
    pygame.K_r: Control.RESTART,
}

ROTATE_DEBOUNCE_MS = 50


def run(seed: Optional[int] = None, cell_size: int = 28) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = BlockfallGame(seed=seed)
        schedule = TickSchedule()
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.state))
        pygame.display.set_caption("Blockfall")

        last_fall = pygame.time.get_ticks()
        last_rotate = -ROTATE_DEBOUNCE_MS

        running = True
        while running:
            # Input handling
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    control = KEY_TO_CONTROL.get(event.key)
                    if control is None:
                        continue
                    if control == Control.ROTATE:
                        now = pygame.time.get_ticks()
                        if now - last_rotate < ROTATE_DEBOUNCE_MS:
                            continue
                        last_rotate = now
                    game.step(control)

            # Gravity; interval follows the current level
            now = pygame.time.get_ticks()
            if now - last_fall >= schedule.interval_ms(game.state.level):
                game.step(Control.SOFT_DROP)
                last_fall = now

            renderer.draw(screen, game.state, game.get_state())
            clock.tick(60)
    finally:
        pygame.quit()
    print(f"Final score: {game.state.score}  high score: {game.state.high_score}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=28)
    return p


def main() -> None:
    args = build_parser().parse_args()
    run(seed=args.seed, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
