import pygame
import pytest

from gridpath.bfs import flat_index
from gridpath.cell import (
    BLACK,
    CELL_AMOUNT,
    CELL_SIZE,
    GREEN,
    MAGENTA,
    RED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WHITE,
    KeyboardPressMode,
    MouseClickMode,
)
from gridpath.grid import Grid


def px(index):
    """Pixel position inside the cell with the given grid index."""
    return (int(index[0] * CELL_SIZE[0]) + 1, int(index[1] * CELL_SIZE[1]) + 1)


def click(grid, keyboard, mouse, index):
    grid.keyboard_mode = keyboard
    grid.mouse_mode = mouse
    grid.update_cell(px(index))


def test_grid_is_row_major_and_all_open():
    grid = Grid()
    assert len(grid.cells) == CELL_AMOUNT[0] * CELL_AMOUNT[1]
    for position, cell in enumerate(grid.cells):
        assert flat_index(cell.index, grid.columns) == position
        assert cell.walkable
        assert cell.color == WHITE


def test_default_modes():
    grid = Grid()
    assert grid.keyboard_mode is KeyboardPressMode.WALL
    assert grid.mouse_mode is MouseClickMode.NONE
    assert grid.start_cell is None and grid.end_cell is None


@pytest.mark.parametrize(
    "position, expected",
    [
        ((0, 0), True),
        ((SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1), True),
        ((SCREEN_WIDTH, 0), False),
        ((0, SCREEN_HEIGHT), False),
        ((-1, 5), False),
    ],
)
def test_is_mouse_on_grid(position, expected):
    assert Grid().is_mouse_on_grid(position) is expected


def test_cell_at_maps_pixels_to_cell():
    grid = Grid()
    assert grid.cell_at(px((1, 2))).index == (1, 2)
    assert grid.cell_at((0, 0)).index == (0, 0)


def test_cell_at_off_grid_raises():
    with pytest.raises(IndexError):
        Grid().cell_at((SCREEN_WIDTH, 0))


def test_wall_mode_left_makes_wall_right_clears():
    grid = Grid()
    click(grid, KeyboardPressMode.WALL, MouseClickMode.LEFT, (3, 3))
    cell = grid.cell_at(px((3, 3)))
    assert cell.walkable is False and cell.color == BLACK
    click(grid, KeyboardPressMode.WALL, MouseClickMode.RIGHT, (3, 3))
    assert cell.walkable is True and cell.color == WHITE


def test_start_stop_mode_sets_start_and_end():
    grid = Grid()
    click(grid, KeyboardPressMode.WALL, MouseClickMode.LEFT, (2, 2))
    click(grid, KeyboardPressMode.START_STOP, MouseClickMode.LEFT, (2, 2))
    start = grid.cell_at(px((2, 2)))
    assert grid.start_cell is start
    assert start.walkable is True and start.color == RED
    click(grid, KeyboardPressMode.START_STOP, MouseClickMode.RIGHT, (5, 1))
    assert grid.end_cell is grid.cell_at(px((5, 1)))
    assert grid.end_cell.color == MAGENTA


def test_none_modes_change_nothing():
    grid = Grid()
    click(grid, KeyboardPressMode.NONE, MouseClickMode.LEFT, (1, 1))
    click(grid, KeyboardPressMode.WALL, MouseClickMode.NONE, (1, 1))
    cell = grid.cell_at(px((1, 1)))
    assert cell.walkable is True and cell.color == WHITE
    assert grid.start_cell is None


def test_run_bfs_without_endpoints_raises():
    with pytest.raises(ValueError):
        Grid().run_bfs()


def test_run_bfs_paints_path_green():
    grid = Grid()
    click(grid, KeyboardPressMode.START_STOP, MouseClickMode.LEFT, (0, 0))
    click(grid, KeyboardPressMode.START_STOP, MouseClickMode.RIGHT, (4, 0))
    for y in range(3):
        click(grid, KeyboardPressMode.WALL, MouseClickMode.LEFT, (2, y))
    path = grid.run_bfs()
    assert path[0] is grid.start_cell
    assert path[-1] is grid.end_cell
    assert all(c.color == GREEN for c in path)
    assert all(c.walkable for c in path)
    assert (2, 3) in [c.index for c in path]


def test_render_draws_cell_colours():
    grid = Grid()
    click(grid, KeyboardPressMode.WALL, MouseClickMode.LEFT, (1, 0))
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    grid.render(surface)
    assert tuple(surface.get_at(px((1, 0))))[:3] == BLACK
    assert tuple(surface.get_at(px((0, 0))))[:3] == WHITE