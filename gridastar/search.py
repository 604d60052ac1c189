"""A* search over a four-connected grid."""

from __future__ import annotations

from .grid import Grid
from .nodes import ClosedList, Node, OpenList, Point

_STEP_COST = 1.0


class InvalidPointError(ValueError):
    """The start or goal lies off the grid or on an obstacle."""


class NoPathError(LookupError):
    """No route joins the start and the goal."""


def heuristic(point1: Point, point2: Point) -> float:
    """Manhattan distance between two points."""
    return float(abs(point1.x - point2.x) + abs(point1.y - point2.y))


def reconstruct_path(node: Node | None) -> list[Node]:
    """Follow parent links back from ``node`` and return the path from the root."""
    path: list[Node] = []
    current = node
    while current is not None:
        path.append(current)
        current = current.parent
    path.reverse()
    return path


def astar(grid: Grid, start: Point, goal: Point) -> list[Node]:
    """Find a shortest path from ``start`` to ``goal``; return its nodes in order."""
    if not grid.is_valid(start):
        raise InvalidPointError(f"start point ({start.x},{start.y}) isn't available")
    if not grid.is_valid(goal):
        raise InvalidPointError(f"goal point ({goal.x},{goal.y}) isn't available")

    open_list = OpenList()
    closed = ClosedList()

    start_node = Node(start, g_cost=0.0, h_cost=heuristic(start, goal))
    start_node.f_cost = start_node.g_cost + start_node.h_cost
    open_list.push(start_node)

    while len(open_list):
        current = open_list.pop()
        if current.position == goal:
            return reconstruct_path(current)

        closed.add(current)

        for neighbor in grid.neighbors(current):
            if neighbor.position in closed:
                continue

            tentative_g = current.g_cost + _STEP_COST
            existing = open_list.find(neighbor.position)

            if existing is None:
                neighbor.g_cost = tentative_g
                neighbor.h_cost = heuristic(neighbor.position, goal)
                neighbor.f_cost = neighbor.g_cost + neighbor.h_cost
                neighbor.parent = current
                open_list.push(neighbor)
            elif tentative_g < existing.g_cost:
                existing.g_cost = tentative_g
                existing.f_cost = existing.g_cost + existing.h_cost
                existing.parent = current
                open_list.fix(existing)

    raise NoPathError(
        f"no path from ({start.x},{start.y}) to ({goal.x},{goal.y})"
    )