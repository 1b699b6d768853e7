from __future__ import annotations

import argparse
from typing import Callable, Dict

import pygame
from loguru import logger

from falling_blocks.game import GameConfig, GameController, GameSession
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Callable[[GameSession], bool]] = {
    pygame.K_LEFT: GameSession.move_left,
    pygame.K_RIGHT: GameSession.move_right,
    pygame.K_UP: GameSession.rotate,
    pygame.K_DOWN: GameSession.soft_drop,
}


def run(config: GameConfig) -> None:
    controller = GameController(config=config)
    session = controller.session
    pygame.init()
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=28)

        screen = pygame.display.set_mode(renderer.window_size(config.rows, config.cols))
        pygame.display.set_caption("Falling Blocks")

        controller.start_session(pygame.time.get_ticks(), config.random_seed)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        controller.start_session(pygame.time.get_ticks())
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            command(session)

            controller.update(pygame.time.get_ticks())
            renderer.draw(screen, session)
            clock.tick(60)
    finally:
        controller.stop()
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard")
    p.add_argument("--rows", type=int, default=20)
    p.add_argument("--cols", type=int, default=10)
    p.add_argument("--interval", type=int, default=1000, help="Gravity interval in milliseconds")
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    logger.enable("falling_blocks")
    config = GameConfig(
        rows=args.rows,
        cols=args.cols,
        gravity_interval_ms=args.interval,
        random_seed=args.seed,
    )
    run(config)


if __name__ == "__main__":  # pragma: no cover
    main()
