"""Grid cells, board constants, input modes and a point-in-rectangle test."""

from __future__ import annotations

from enum import Enum, auto

import pygame

Color = tuple[int, int, int]
Vector = tuple[int, int]

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 800

CELL_SIZE: tuple[float, float] = (20.0, 20.0)
CELL_AMOUNT: Vector = (50, 40)

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
YELLOW: Color = (255, 255, 0)
MAGENTA: Color = (255, 0, 255)


class MouseClickMode(Enum):
    """Which mouse button was last pressed on the grid."""

    NONE = auto()
    LEFT = auto()
    RIGHT = auto()


class KeyboardPressMode(Enum):
    """What a mouse click on the grid edits."""

    NONE = auto()
    WALL = auto()
    START_STOP = auto()


def point_in_rect(point: Vector, rect: tuple[int, int, int, int]) -> bool:
    """Return whether ``point`` lies in ``rect`` given as (left, top, width, height).

    The left and top edges are inside, the right and bottom edges are not.
    Negative sizes are accepted and describe the rectangle from the other corner.
    """
    left, top, width, height = rect
    min_x, max_x = sorted((left, left + width))
    min_y, max_y = sorted((top, top + height))
    x, y = point
    return min_x <= x < max_x and min_y <= y < max_y


class GridCell:
    """One square of the board: its grid index, colour and walkability."""

    __slots__ = ("index", "position", "color", "walkable")

    def __init__(self, color: Color, walkable: bool, position: tuple[float, float], index: Vector) -> None:
        self.index: Vector = tuple(index)
        self.position: tuple[float, float] = (float(position[0]), float(position[1]))
        self.color: Color = tuple(color)
        self.walkable: bool = walkable

    def __repr__(self) -> str:
        return f"GridCell(index={self.index}, walkable={self.walkable}, color={self.color})"

    def center(self) -> tuple[float, float]:
        """Pixel position of the middle of the cell."""
        return (
            self.position[0] + CELL_SIZE[0] / 2,
            self.position[1] + CELL_SIZE[1] / 2,
        )

    def set_walkable(self, walkable: bool) -> None:
        """Make the cell open (white) or a wall (black)."""
        self.walkable = walkable
        self.color = WHITE if walkable else BLACK

    def set_color(self, color: Color) -> None:
        """Change the fill colour without touching walkability."""
        self.color = tuple(color)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the cell as a filled square on ``surface``."""
        rect = pygame.Rect(
            round(self.position[0]),
            round(self.position[1]),
            round(CELL_SIZE[0]),
            round(CELL_SIZE[1]),
        )
        pygame.draw.rect(surface, self.color, rect)