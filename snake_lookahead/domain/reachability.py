"""Flood-fill reachability over free cells."""

from __future__ import annotations

from collections import deque
from collections.abc import Collection

from snake_lookahead.domain.grid import Grid, Position


def reachable_cells(grid: Grid, origin: Position, obstacles: Collection[Position]) -> set[Position]:
    """Return every cell reachable from ``origin`` through in-bounds, non-obstacle cells.

    The origin itself is always included, even when it is listed as an
    obstacle: a snake head is never an obstacle to itself.
    """
    visited = {origin}
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        for cell in grid.neighbors(current):
            if cell in visited or cell in obstacles:
                continue
            visited.add(cell)
            queue.append(cell)
    return visited


def reachable_count(grid: Grid, origin: Position, obstacles: Collection[Position]) -> int:
    """Number of cells reachable from ``origin``, origin included."""
    return len(reachable_cells(grid, origin, obstacles))
