"""The editable board of cells and its mouse-driven editing rules."""

from __future__ import annotations

import pygame

from .bfs import find_path, flat_index, index_is_valid
from .cell import (
    CELL_AMOUNT,
    CELL_SIZE,
    GREEN,
    MAGENTA,
    RED,
    WHITE,
    GridCell,
    KeyboardPressMode,
    MouseClickMode,
    Vector,
    point_in_rect,
)


class Grid:
    """A row-major board of cells with a start and an end cell."""

    def __init__(self) -> None:
        self.columns, self.rows = CELL_AMOUNT
        self.cells: list[GridCell] = [
            GridCell(WHITE, True, (x * CELL_SIZE[0], y * CELL_SIZE[1]), (x, y))
            for y in range(self.rows)
            for x in range(self.columns)
        ]
        self.start_cell: GridCell | None = None
        self.end_cell: GridCell | None = None
        self.mouse_mode = MouseClickMode.NONE
        self.keyboard_mode = KeyboardPressMode.WALL

    def render(self, surface: pygame.Surface) -> None:
        """Draw every cell on ``surface``."""
        for cell in self.cells:
            cell.render(surface)

    def is_mouse_on_grid(self, position: Vector) -> bool:
        """Return whether a pixel position lies over the board."""
        width = int(self.columns * CELL_SIZE[0])
        height = int(self.rows * CELL_SIZE[1])
        return point_in_rect(position, (0, 0, width, height))

    def cell_at(self, position: Vector) -> GridCell:
        """Return the cell under a pixel position."""
        index = (int(position[0] / CELL_SIZE[0]), int(position[1] / CELL_SIZE[1]))
        if not index_is_valid(index, self.columns, self.rows):
            raise IndexError(f"position {position} is not over the grid")
        return self.cells[flat_index(index, self.columns)]

    def update_cell(self, position: Vector) -> None:
        """Edit the cell under ``position`` according to the current modes."""
        if self.mouse_mode is MouseClickMode.NONE:
            return
        left = self.mouse_mode is MouseClickMode.LEFT

        if self.keyboard_mode is KeyboardPressMode.START_STOP:
            cell = self.cell_at(position)
            cell.set_walkable(True)
            if left:
                cell.set_color(RED)
                self.start_cell = cell
            else:
                cell.set_color(MAGENTA)
                self.end_cell = cell
        elif self.keyboard_mode is KeyboardPressMode.WALL:
            self.cell_at(position).set_walkable(not left)

    def run_bfs(self) -> list[GridCell]:
        """Search from the start to the end cell, paint the path green and return it."""
        if self.start_cell is None or self.end_cell is None:
            raise ValueError("start and end cells must both be set before searching")
        path = find_path(self.start_cell, self.end_cell, self.cells, self.columns, self.rows)
        for cell in path:
            cell.set_color(GREEN)
        return path