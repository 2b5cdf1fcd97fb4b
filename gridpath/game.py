"""The window and the fixed-step main loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from .cell import SCREEN_HEIGHT, SCREEN_WIDTH
from .scene import BFSScene, SceneManager

TIME_PER_FRAME = 1.0 / 60.0
WINDOW_TITLE = "Pathfinding"


class Game:
    """Owns the window and drives the current scene."""

    def __init__(self) -> None:
        pygame.init()
        self.window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.scenes = SceneManager()
        self.running = True

    def run(self) -> None:
        """Show the board and loop until the window is closed."""
        self.scenes.move_scene(BFSScene())
        clock = pygame.time.Clock()
        clock.tick()
        since_last_update = 0.0

        try:
            while self.running:
                since_last_update += clock.tick() / 1000.0
                self.process_events()

                while since_last_update > TIME_PER_FRAME:
                    since_last_update -= TIME_PER_FRAME
                    self.update(TIME_PER_FRAME)

                if self.running:
                    self.render()
        finally:
            pygame.quit()

    def process_events(self) -> None:
        """Handle every pending window event."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            self.scenes.process_event(event)

    def update(self, delta: float) -> None:
        self.scenes.update(delta)

    def render(self) -> None:
        self.window.fill((0, 0, 0))
        self.scenes.render(self.window)
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the pathfinding window."""
    parser = argparse.ArgumentParser(
        prog="gridpath",
        description=(
            "Draw walls (W), place start and end cells (B) with the mouse "
            "and press G to run a breadth-first search."
        ),
    )
    parser.parse_args(argv)
    Game().run()
    return 0