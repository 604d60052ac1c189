"""Search nodes and the open and closed lists used by A*."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Point:
    """A cell position on the grid."""

    x: int
    y: int


@dataclass(eq=False)
class Node:
    """A search node: a position with its path costs and parent link."""

    position: Point
    g_cost: float = 0.0
    h_cost: float = 0.0
    f_cost: float = 0.0
    parent: Node | None = None
    index: int = field(default=-1, repr=False)

    def __str__(self) -> str:
        return f"({self.position.x}, {self.position.y})"


class OpenList:
    """A binary min-heap of nodes ordered by f cost.

    Each node's ``index`` always holds its slot in the heap, so a node whose
    cost has changed can be moved to its new place with :meth:`fix`.
    """

    def __init__(self) -> None:
        self._heap: list[Node] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._heap)

    def _less(self, i: int, j: int) -> bool:
        return self._heap[i].f_cost < self._heap[j].f_cost

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j

    def _up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _down(self, start: int, size: int) -> bool:
        i = start
        while True:
            left = 2 * i + 1
            if left >= size:
                break
            child = left
            right = left + 1
            if right < size and self._less(right, left):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child
        return i > start

    def push(self, node: Node) -> None:
        """Add a node to the heap."""
        node.index = len(self._heap)
        self._heap.append(node)
        self._up(node.index)

    def pop(self) -> Node:
        """Remove and return the node with the lowest f cost."""
        if not self._heap:
            raise IndexError("pop from an empty open list")
        last = len(self._heap) - 1
        self._swap(0, last)
        self._down(0, last)
        node = self._heap.pop()
        node.index = -1
        return node

    def fix(self, node: Node) -> None:
        """Restore heap order after the cost of ``node`` has changed."""
        i = node.index
        if not 0 <= i < len(self._heap) or self._heap[i] is not node:
            raise ValueError(f"node {node} is not in the open list")
        if not self._down(i, len(self._heap)):
            self._up(i)

    def update(self, node: Node, g: float, h: float) -> None:
        """Set the costs of ``node`` and reorder the heap."""
        node.g_cost = g
        node.h_cost = h
        node.f_cost = g + h
        self.fix(node)

    def find(self, point: Point) -> Node | None:
        """Return the node at ``point`` if it is in the list, else None."""
        return next((node for node in self._heap if node.position == point), None)


class ClosedList:
    """The set of positions that have already been expanded."""

    def __init__(self) -> None:
        self._nodes: dict[Point, Node] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, node: Node) -> None:
        """Mark the node's position as expanded."""
        self._nodes[node.position] = node

    def __contains__(self, point: object) -> bool:
        return point in self._nodes