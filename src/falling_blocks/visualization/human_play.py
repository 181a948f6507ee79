from __future__ import annotations

import argparse
from typing import Callable, Dict

import pygame

from falling_blocks.game import FallingBlocksGame, GameConfig
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Callable[[FallingBlocksGame], bool]] = {
    pygame.K_LEFT: FallingBlocksGame.move_left,
    pygame.K_RIGHT: FallingBlocksGame.move_right,
    pygame.K_DOWN: FallingBlocksGame.soft_drop_step,
    pygame.K_UP: FallingBlocksGame.rotate_current,
    pygame.K_SPACE: FallingBlocksGame.hard_drop,
}

START_KEYS = (pygame.K_RETURN, pygame.K_n)


def handle_key(game: FallingBlocksGame, key: int) -> bool:
    """Apply a key press to the game; returns True if the game changed."""
    if key in START_KEYS:
        game.start()
        return True
    if key == pygame.K_p:
        return game.toggle_pause()
    # Gameplay keys only count while a game is running
    if not game.running:
        return False
    action = KEY_TO_ACTION.get(key)
    if action is None:
        return False
    return action(game)


def report_game_over(score: int) -> None:
    print(f"Game over! Score: {score}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--fps", type=int, default=60)
    return p


def run(seed: int | None = None, cell_size: int = 30, fps: int = 60) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlocksGame(GameConfig(random_seed=seed), on_game_over=report_game_over)
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size((game.grid.height, game.grid.width)))
        pygame.display.set_caption("Falling Blocks")
        font = pygame.font.SysFont(None, 32)

        game.start()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        handle_key(game, event.key)

            game.tick(pygame.time.get_ticks())
            renderer.draw(screen, game.board(), game.get_state())

            if game.game_over:
                text = font.render(f"Game Over ({game.score}) - Enter to restart", True, (255, 255, 255))
                rect = text.get_rect(center=(screen.get_width() // 2, 12))
                screen.blit(text, rect)
                pygame.display.flip()

            clock.tick(fps)
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    run(seed=args.seed, cell_size=args.cell_size, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
