"""Render a grid and a found path as an image."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure

from .grid import Grid
from .nodes import Node, Point

_FREE_VALUE = 0.0
_PATH_VALUE = 0.5
_OBSTACLE_VALUE = 1.0

# White for free cells, grey for the path, black for obstacles.
_CELL_COLORS = ListedColormap(["#ffffff", "#808080", "#000000"])

# Glyph shapes: (marker, hollow).
_RING = ("o", True)
_SQUARE = ("s", False)
_TRIANGLE = ("^", False)
_PLUS = ("+", False)
_CIRCLE = ("o", False)


def _rgba(r: int, g: int, b: int, a: int = 255) -> tuple[float, float, float, float]:
    return (r / 255, g / 255, b / 255, a / 255)


@dataclass
class GridData:
    """Cell values of a grid for a heat map; rows run bottom to top."""

    grid: Grid
    path: Sequence[Node] = ()
    _on_path: frozenset[Point] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._on_path = frozenset(node.position for node in self.path)

    def dims(self) -> tuple[int, int]:
        """Return (columns, rows) of the heat map."""
        return self.grid.width, self.grid.height

    def z(self, c: int, r: int) -> float:
        """Return the value of column ``c``, row ``r`` (row 0 is the grid's last line)."""
        point = Point(c, self.grid.height - 1 - r)
        if point in self._on_path:
            return _PATH_VALUE
        if self.grid.is_obstacle(point):
            return _OBSTACLE_VALUE
        return _FREE_VALUE


def _plot_xy(grid: Grid, point: Point) -> tuple[float, float]:
    return float(point.x), float(grid.height - 1 - point.y)


def _new_axes(grid: Grid, title: str, size: float):
    fig = Figure(figsize=(size, size))
    ax = fig.add_subplot()
    ax.set_title(title)
    ax.set_xlabel("X Coordinate")
    ax.set_ylabel("Y Coordinate")
    return fig, ax


def _set_limits(ax, grid: Grid) -> None:
    ax.set_xlim(-0.5, grid.width - 0.5)
    ax.set_ylim(-0.5, grid.height - 0.5)


def _scatter(ax, points, color, radius: float, shape, label: str | None = None):
    marker, hollow = shape
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    size = (2 * radius) ** 2
    if hollow:
        return ax.scatter(
            xs, ys, s=size, marker=marker, facecolors="none", edgecolors=[color], label=label
        )
    return ax.scatter(xs, ys, s=size, marker=marker, c=[color], label=label)


def _path_line(ax, grid: Grid, path: Sequence[Node], color, width: float, label=None):
    coords = [_plot_xy(grid, node.position) for node in path]
    (line,) = ax.plot(
        [x for x, _ in coords],
        [y for _, y in coords],
        color=color,
        linewidth=width,
        label=label,
    )
    return line


def plot_grid(grid: Grid, path: Sequence[Node], filename) -> Figure:
    """Draw the grid as a heat map with the path over it and save it to ``filename``."""
    fig, ax = _new_axes(grid, "A* Pathfinding Visualization", 8)

    data = GridData(grid, path)
    width, height = data.dims()
    values = [[data.z(c, r) for c in range(width)] for r in range(height)]
    ax.imshow(
        values,
        cmap=_CELL_COLORS,
        vmin=0.0,
        vmax=1.0,
        origin="lower",
        extent=(-0.5, width - 0.5, -0.5, height - 0.5),
        interpolation="nearest",
        aspect="auto",
    )

    if path:
        line = _path_line(ax, grid, path, _rgba(0, 0, 255), 3, label="Path")
        start = _scatter(
            ax, [_plot_xy(grid, path[0].position)], _rgba(0, 255, 0), 8, _SQUARE, "Start"
        )
        goal = _scatter(
            ax, [_plot_xy(grid, path[-1].position)], _rgba(255, 0, 0), 8, _TRIANGLE, "Goal"
        )
        ax.legend(handles=[line, start, goal], loc="upper right")

    ax.grid(True)
    _set_limits(ax, grid)
    fig.savefig(filename)
    return fig


def plot_grid_detailed(grid: Grid, path: Sequence[Node], filename) -> Figure:
    """Draw every cell as a marker, with the path over it, and save it to ``filename``."""
    fig, ax = _new_axes(grid, "A* Pathfinding - Detailed View", 10)

    on_path = {node.position for node in path}
    obstacles: list[tuple[float, float]] = []
    free_cells: list[tuple[float, float]] = []
    path_cells: list[tuple[float, float]] = []
    for x in range(grid.width):
        for y in range(grid.height):
            point = Point(x, y)
            xy = _plot_xy(grid, point)
            if point in on_path:
                path_cells.append(xy)
            elif grid.is_obstacle(point):
                obstacles.append(xy)
            else:
                free_cells.append(xy)

    handles = []
    if free_cells:
        _scatter(ax, free_cells, _rgba(240, 240, 240), 15, _CIRCLE)
    if obstacles:
        handles.append(_scatter(ax, obstacles, _rgba(0, 0, 0), 20, _PLUS, "Obstacles"))
    if path_cells:
        handles.append(_scatter(ax, path_cells, _rgba(0, 0, 255, 200), 12, _RING, "Path"))

    if path:
        _path_line(ax, grid, path, _rgba(0, 0, 255, 150), 2)
        handles.append(
            _scatter(
                ax, [_plot_xy(grid, path[0].position)], _rgba(0, 255, 0), 15, _SQUARE, "Start"
            )
        )
        handles.append(
            _scatter(
                ax, [_plot_xy(grid, path[-1].position)], _rgba(255, 0, 0), 15, _TRIANGLE, "Goal"
            )
        )

    ax.grid(True)
    if handles:
        ax.legend(handles=handles, loc="upper right")
    _set_limits(ax, grid)
    fig.savefig(filename)
    return fig