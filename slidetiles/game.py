"""The game window: input handling and the main loop."""

from __future__ import annotations

import argparse
import logging

import pygame

from .constants import RAYWHITE, SCREEN_HEIGHT, SCREEN_WIDTH
from .puzzle import Puzzle
from .video import PuzzleVideo

TARGET_FPS = 60
TITLE = "game"


class Game:
    """Owns the puzzle and drives it from window input."""

    def __init__(self, puzzle: Puzzle | None = None) -> None:
        self.puzzle = puzzle if puzzle is not None else Puzzle(video=PuzzleVideo())

    def handle_input(
        self,
        mouse_down: bool,
        mouse_pos: tuple[float, float],
        hint_held: bool = False,
        toggle_color_pressed: bool = False,
    ) -> None:
        """Apply one frame of input to the puzzle."""
        if mouse_down:
            x, y = mouse_pos
            self.puzzle.move_tile(x, y)
        self.puzzle.update(hint_held, toggle_color_pressed)

    def run(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                toggle_pressed = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        elif event.key == pygame.K_h:
                            toggle_pressed = True
                if not running:
                    break

                keys = pygame.key.get_pressed()
                self.handle_input(
                    pygame.mouse.get_pressed()[0],
                    pygame.mouse.get_pos(),
                    keys[pygame.K_TAB],
                    toggle_pressed,
                )

                screen.fill(RAYWHITE)
                self.puzzle.draw(screen)
                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            video = self.puzzle.video
            if isinstance(video, PuzzleVideo):
                video.close()
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the sliding puzzle."""
    parser = argparse.ArgumentParser(
        prog="slidetiles",
        description="Slide the tiles back into order; hold Tab for hints, press H to toggle hint colours.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    Game().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())