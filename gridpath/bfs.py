"""Breadth-first search over a row-major grid of cells."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from .cell import CELL_AMOUNT, YELLOW, GridCell, Vector

# Right, down, left, up: the order neighbours are explored in.
DIRECTIONS: tuple[Vector, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


def index_is_valid(index: Vector, columns: int = CELL_AMOUNT[0], rows: int = CELL_AMOUNT[1]) -> bool:
    """Return whether a 2D index lies on a grid of the given size."""
    x, y = index
    return 0 <= x < columns and 0 <= y < rows


def flat_index(index: Vector, columns: int = CELL_AMOUNT[0]) -> int:
    """Convert a (column, row) index into a row-major list position."""
    x, y = index
    return y * columns + x


def find_path(
    start: GridCell,
    end: GridCell,
    cells: Sequence[GridCell],
    columns: int = CELL_AMOUNT[0],
    rows: int = CELL_AMOUNT[1],
) -> list[GridCell]:
    """Return the shortest path of cells from ``start`` to ``end``, both included.

    Walls are avoided; the start cell itself is not checked for walkability.
    Every cell discovered during the search is coloured yellow. An empty list
    means the end cannot be reached.
    """
    for cell in (start, end):
        if not index_is_valid(cell.index, columns, rows):
            raise IndexError(f"cell index {cell.index} is outside the grid")

    start_pos = flat_index(start.index, columns)
    end_pos = flat_index(end.index, columns)
    previous: dict[int, int | None] = {start_pos: None}
    queue = deque([start_pos])

    while queue:
        current = queue.popleft()
        if current == end_pos:
            path = []
            step: int | None = current
            while step is not None:
                path.append(cells[step])
                step = previous[step]
            path.reverse()
            return path

        cx, cy = cells[current].index
        for dx, dy in DIRECTIONS:
            neighbour_index = (cx + dx, cy + dy)
            if not index_is_valid(neighbour_index, columns, rows):
                continue
            neighbour = flat_index(neighbour_index, columns)
            if neighbour in previous or not cells[neighbour].walkable:
                continue
            cells[neighbour].set_color(YELLOW)
            previous[neighbour] = current
            queue.append(neighbour)

    return []