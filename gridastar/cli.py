"""Command that runs A* on a demo grid and plots the result."""

from __future__ import annotations

import argparse
import itertools
import random

from .grid import Grid
from .nodes import Point
from .plotting import plot_grid
from .search import InvalidPointError, NoPathError, astar

DEMO_START = Point(0, 0)
DEMO_GOAL = Point(45, 30)

_GRID_SIZE = 55
_FIELD_SIZE = 100
_OBSTACLE_DENSITY = 0.2
_FIELD_START = Point(0, 0)
_FIELD_GOAL = Point(99, 99)


def build_demo_grid(rng: random.Random) -> Grid:
    """Build the demo grid: random obstacles, diagonal walls, corridors and barriers."""
    grid = Grid(_GRID_SIZE, _GRID_SIZE)

    for x, y in itertools.product(range(_FIELD_SIZE), repeat=2):
        point = Point(x, y)
        if point not in (_FIELD_START, _FIELD_GOAL) and rng.random() < _OBSTACLE_DENSITY:
            grid.add_obstacle(point)

    for i in range(10, 30):
        grid.add_obstacle(Point(i, i))
        grid.add_obstacle(Point(i, 90 - i))

    for y in range(20, 80):
        for x in (25, 50, 75):
            grid.add_obstacle(Point(x, y))

    for x in range(10, 90):
        if x % 15 != 0:  # leave a gap every 15 cells
            grid.add_obstacle(Point(x, 30))
            grid.add_obstacle(Point(x, 60))

    return grid


def main(argv=None) -> int:
    """Search the demo grid, print the route and save a plot of it."""
    parser = argparse.ArgumentParser(
        prog="gridastar", description="Find a path on a demo grid with A* and plot it."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for random obstacles")
    parser.add_argument(
        "--output", default="astar_colored.png", help="image file to write"
    )
    args = parser.parse_args(argv)

    grid = build_demo_grid(random.Random(args.seed))

    print("A* path search")
    print("=" * 34)

    try:
        path = astar(grid, DEMO_START, DEMO_GOAL)
    except (InvalidPointError, NoPathError) as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Path found! Length: {len(path) - 1} steps")
    route = " -> ".join(f"({node.position.x},{node.position.y})" for node in path)
    print(f"Route: {route}")

    print("\nCreating plot...")
    try:
        plot_grid(grid, path, args.output)
    except (OSError, ValueError) as exc:
        print(f"Error creating plot: {exc}")
        return 1
    print(f"Plot saved as: {args.output}")
    return 0