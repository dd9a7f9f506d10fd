"""A* shortest-path search on the bounded 4-connected grid.

The Manhattan heuristic is admissible and consistent on a uniform-cost
4-connected grid, so the first time the goal is popped its path is optimal.

The open set is a binary heap keyed by ``(f, insertion_order)``: among nodes
with equal f-cost the one pushed first is expanded first, which makes the
returned path reproducible. Relaxing a node already in the open set pushes a
fresh entry; superseded entries are skipped when popped.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Collection
from dataclasses import dataclass

from snake_lookahead.domain.grid import Grid, Position, manhattan


@dataclass
class SearchNode:
    """One open/closed entry of a single search run."""

    position: Position
    g: int
    h: int
    parent: SearchNode | None = None

    @property
    def f(self) -> int:
        return self.g + self.h


def _reconstruct(node: SearchNode) -> list[Position]:
    path: list[Position] = []
    current: SearchNode | None = node
    while current is not None and current.parent is not None:
        path.append(current.position)
        current = current.parent
    path.reverse()
    return path


def find_path(
    grid: Grid, start: Position, goal: Position, obstacles: Collection[Position]
) -> list[Position]:
    """Return the cells from the first step after ``start`` up to ``goal``.

    Returns an empty list when ``start == goal`` or when the goal cannot be
    reached. ``start`` itself is never treated as an obstacle.
    """
    if start == goal or not grid.in_bounds(goal) or goal in obstacles:
        return []

    counter = itertools.count()
    start_node = SearchNode(position=start, g=0, h=manhattan(start, goal))
    open_nodes: dict[Position, SearchNode] = {start: start_node}
    heap: list[tuple[int, int, SearchNode]] = [(start_node.f, next(counter), start_node)]
    closed: set[Position] = set()

    while heap:
        _, _, current = heapq.heappop(heap)
        if current.position in closed or open_nodes.get(current.position) is not current:
            continue
        del open_nodes[current.position]
        closed.add(current.position)

        if current.position == goal:
            return _reconstruct(current)

        tentative_g = current.g + 1
        for cell in grid.neighbors(current.position):
            if cell in closed or cell in obstacles:
                continue
            existing = open_nodes.get(cell)
            if existing is None:
                node = SearchNode(
                    position=cell, g=tentative_g, h=manhattan(cell, goal), parent=current
                )
            elif tentative_g < existing.g:
                node = SearchNode(position=cell, g=tentative_g, h=existing.h, parent=current)
            else:
                continue
            open_nodes[cell] = node
            heapq.heappush(heap, (node.f, next(counter), node))

    return []
