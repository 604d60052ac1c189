"""A rectangular grid with blocked cells."""

from __future__ import annotations

from dataclasses import dataclass, field

from .nodes import Node, Point

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass
class Grid:
    """A width by height grid; cells in ``obstacles`` cannot be entered."""

    width: int
    height: int
    obstacles: set[Point] = field(default_factory=set)

    def add_obstacle(self, point: Point) -> None:
        """Block the cell at ``point``."""
        self.obstacles.add(point)

    def is_obstacle(self, point: Point) -> bool:
        """Return True if ``point`` is blocked."""
        return point in self.obstacles

    def is_valid(self, point: Point) -> bool:
        """Return True if ``point`` lies on the grid and is not blocked."""
        return (
            0 <= point.x < self.width
            and 0 <= point.y < self.height
            and not self.is_obstacle(point)
        )

    def neighbors(self, node: Node) -> list[Node]:
        """Return fresh nodes for the enterable cells next to ``node``.

        Cells are checked up, down, right, then left.
        """
        position = node.position
        candidates = (Point(position.x + dx, position.y + dy) for dx, dy in _DIRECTIONS)
        return [Node(point) for point in candidates if self.is_valid(point)]