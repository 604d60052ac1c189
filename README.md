# gridastar

gridastar finds shortest paths on a rectangular grid with the A* algorithm.
Moves go in four directions (up, down, right, left), and each step costs 1.
The heuristic is the Manhattan distance. Cells can be marked as obstacles,
and the grid and path can be drawn to an image file with matplotlib.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Library use

```python
from gridastar.grid import Grid
from gridastar.nodes import Point
from gridastar.search import astar, NoPathError, InvalidPointError
from gridastar.plotting import plot_grid, plot_grid_detailed

grid = Grid(10, 10)
for x, y in [(2, 2), (2, 3), (2, 4), (2, 5), (3, 5), (4, 5), (5, 5)]:
    grid.add_obstacle(Point(x, y))

try:
    path = astar(grid, Point(0, 0), Point(9, 9))
except InvalidPointError as exc:
    print(f"bad endpoint: {exc}")
except NoPathError as exc:
    print(f"unreachable: {exc}")
else:
    print(f"{len(path) - 1} steps:", " -> ".join(str(node) for node in path))
    plot_grid(grid, path, "astar_colored.png")
    plot_grid_detailed(grid, path, "astar_detailed.png")
```

`astar(grid, start, goal)` returns the list of `Node` objects from start to
goal, both included. It raises `InvalidPointError` (a `ValueError`) if the
start or goal lies outside the grid or on an obstacle, and `NoPathError`
(a `LookupError`) if the goal cannot be reached.

### Modules

- `gridastar.nodes`
  - `Point(x, y)` is a frozen grid coordinate.
  - `Node` holds a `position`, `g_cost`, `h_cost`, `f_cost` and a `parent` link. `str(node)` gives `"(x, y)"`.
  - `OpenList` is a binary min-heap ordered by `f_cost`, with `push`, `pop`, `fix` (reorder after a node's cost changed), `update(node, g, h)` and `find(point)`. `pop` on an empty list raises `IndexError`. `fix` raises `ValueError` for a node that is not in the list.
  - `ClosedList` records expanded nodes with `add(node)`, and `point in closed` tells whether a position has been expanded.
- `gridastar.grid`
  - `Grid(width, height)` has `add_obstacle`, `is_obstacle`, `is_valid` (on the grid and not blocked) and `neighbors(node)`. `neighbors` returns fresh nodes for the enterable cells up, down, right and left, in that order.
- `gridastar.search`
  - `heuristic(p1, p2)` is the Manhattan distance as a float.
  - `reconstruct_path(node)` follows parent links back and returns the path from the root.
  - `astar`, `InvalidPointError` and `NoPathError` as above.
- `gridastar.plotting`
  - `plot_grid(grid, path, filename)` draws the cells as a heat map: white for free cells, grey for the path, black for obstacles. It draws the path as a blue line with a start and a goal marker, saves the image to `filename` and returns the matplotlib `Figure`.
  - `plot_grid_detailed(grid, path, filename)` draws every cell as a marker, with the path, start and goal over them. It saves the image and returns the `Figure`.
  - `GridData(grid, path)` gives the heat-map values. `dims()` returns `(width, height)`, and `z(c, r)` returns the value of a cell. Row 0 is the grid's last line.

In both plots the y axis is flipped, so grid row 0 appears at the top.

## Command line

```
gridastar [--seed SEED] [--output FILE]
```

The command builds a 55×55 demo grid with `build_demo_grid` from
`gridastar.cli`. The grid has random obstacles (20% density), two diagonal
walls, vertical walls at x = 25 and 50, and horizontal barriers at y = 30 with
a gap wherever x is a multiple of 15. The command searches from (0,0) to
(45,30), prints the route, and saves a heat-map picture with `plot_grid`.

- `--seed` seeds the random obstacles, so a run can be repeated.
- `--output` names the image file. The default is `astar_colored.png`.

The exit status is 0 on success. It is 1 if no path is found or the image
cannot be written.

## What it does not do

The command always uses the built-in demo grid and the fixed start and goal.
It cannot read grids, start or goal points from a file or from its arguments.
The plots are written only to image files and are not shown in a window.
Movement is limited to four directions with unit step cost. There are no
diagonal moves and no weighted cells.

## Tests

```
pytest
```