"""Scenes, the scene manager and the input rules of the pathfinding board."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

from .cell import KeyboardPressMode, MouseClickMode
from .grid import Grid

_MOUSE_MODES = {
    1: MouseClickMode.LEFT,
    3: MouseClickMode.RIGHT,
}

_KEY_MODES = {
    pygame.K_b: KeyboardPressMode.START_STOP,
    pygame.K_w: KeyboardPressMode.WALL,
}


def handle_event(grid: Grid, event: pygame.event.Event) -> None:
    """Apply one input event to ``grid``.

    The left and right mouse buttons edit the cell under the pointer, B switches
    to placing the start and end cells, W to drawing walls and G runs the search.
    Other events are ignored.
    """
    if event.type == pygame.MOUSEBUTTONDOWN:
        mode = _MOUSE_MODES.get(event.button)
        if mode is not None and grid.is_mouse_on_grid(event.pos):
            grid.mouse_mode = mode
            grid.update_cell(event.pos)
    elif event.type == pygame.KEYDOWN:
        if event.key in _KEY_MODES:
            grid.keyboard_mode = _KEY_MODES[event.key]
        elif event.key == pygame.K_g:
            grid.run_bfs()


class Scene(ABC):
    """Something that can be updated, drawn and fed input events."""

    @abstractmethod
    def update(self, delta: float) -> None:
        """Advance the scene by ``delta`` seconds."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the scene on ``surface``."""

    @abstractmethod
    def process_event(self, event: pygame.event.Event | None) -> None:
        """React to an input event; ``None`` means there is none."""


class BFSScene(Scene):
    """The editable board on which breadth-first search is run."""

    def __init__(self) -> None:
        self.grid = Grid()

    def update(self, delta: float) -> None:
        """Nothing changes over time in this scene."""

    def render(self, surface: pygame.Surface) -> None:
        self.grid.render(surface)

    def process_event(self, event: pygame.event.Event | None) -> None:
        if event is None:
            return
        handle_event(self.grid, event)


class SceneManager:
    """Holds the current scene and forwards work to it."""

    def __init__(self) -> None:
        self.current: Scene | None = None

    def move_scene(self, scene: Scene) -> None:
        """Replace the current scene with ``scene``."""
        self.current = scene

    def _scene(self) -> Scene:
        if self.current is None:
            raise RuntimeError("no scene has been set")
        return self.current

    def update(self, delta: float) -> None:
        self._scene().update(delta)

    def render(self, surface: pygame.Surface) -> None:
        self._scene().render(surface)

    def process_event(self, event: pygame.event.Event | None) -> None:
        self._scene().process_event(event)