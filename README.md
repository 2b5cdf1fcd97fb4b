# gridpath

An interactive grid on which you place a start cell, an end cell and walls,
then watch a breadth-first search find the shortest path between them.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
gridpath
```

This opens a 1000 × 800 window titled "Pathfinding" showing a grid of
50 × 40 white cells, each 20 × 20 pixels. The command takes no options
besides `--help`.

## Controls

| Input       | Effect                                                                      |
|-------------|-----------------------------------------------------------------------------|
| `W`         | Wall mode (the default)                                                     |
| `B`         | Start/stop mode                                                             |
| Left click  | Wall mode: make the cell a wall (black). Start/stop mode: set the start cell (red) |
| Right click | Wall mode: clear the cell (white). Start/stop mode: set the end cell (magenta)     |
| `G`         | Run the search                                                              |

Each click edits one cell; holding a button and dragging does not. Placing
the start or end cell also clears any wall there. Placing a new start or end
cell does not repaint the one it replaces.

When the search runs, every cell it reaches is painted yellow and the
shortest path from start to end, both included, is painted green. The search
moves in four directions only (right, down, left, up) and never passes
through walls. If no path exists, only the explored cells are coloured.
Colours are not cleared between searches.

Pressing `G` before both a start and an end cell have been placed raises a
`ValueError`, which ends the program.

## Using the library

The board and the search work without a window:

```python
from gridpath.cell import KeyboardPressMode, MouseClickMode
from gridpath.grid import Grid

grid = Grid()
grid.keyboard_mode = KeyboardPressMode.START_STOP

grid.mouse_mode = MouseClickMode.LEFT
grid.update_cell((10, 10))      # start cell: column 0, row 0

grid.mouse_mode = MouseClickMode.RIGHT
grid.update_cell((990, 790))    # end cell: column 49, row 39

path = grid.run_bfs()           # list of GridCell, start first
print(len(path))                # 89 on an empty board
```

- `Grid.cell_at(position)` returns the cell under a pixel position and raises
  `IndexError` for a position off the board; `Grid.is_mouse_on_grid(position)`
  tells whether a position is on it.
- `Grid.run_bfs()` raises `ValueError` if the start or end cell is unset.
- `gridpath.bfs.find_path(start, end, cells, columns, rows)` works on any
  list of `GridCell` laid out in row-major order and returns the cells on the
  path, start first, or an empty list when the end cannot be reached. It
  raises `IndexError` if the start or end index lies outside the grid.
- `gridpath.bfs.index_is_valid` and `gridpath.bfs.flat_index` check and
  convert `(column, row)` indices.
- `gridpath.cell.point_in_rect(point, rect)` tests a point against a
  `(left, top, width, height)` rectangle, left and top edges included.

`gridpath.scene` holds `handle_event`, which applies one pygame event to a
`Grid` using the controls above, the `Scene` base class, `BFSScene` and
`SceneManager`. `gridpath.game.Game` owns the window and runs a fixed-step
loop at 60 updates per second.

## What it does not do

There is only the one search: no diagonal moves, no weighted cells and no
other algorithms. There is no key to clear or reset the board, and boards
cannot be saved or loaded. The grid size is fixed at 50 × 40 cells.