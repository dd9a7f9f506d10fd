"""Immutable occupancy snapshot of a hypothetical snake configuration.

A snapshot pairs the ordered snake body (head first) with the derived
obstacle set: every body cell except the head. Simulating a move never
touches the parent snapshot, so recursive lookahead branches cannot alias
each other's body or obstacles.

Self-collision is checked against the pre-move obstacle set, which still
holds the current tail cell. The live game does the same: it tests the new
head against the whole body before the tail is removed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from snake_lookahead.domain.grid import DIRECTIONS, Direction, Grid, Position, step
from snake_lookahead.domain.reachability import reachable_count


@dataclass(frozen=True)
class OccupancySnapshot:
    """Snake body plus obstacle set on a bounded grid."""

    grid: Grid
    body: tuple[Position, ...]
    obstacles: frozenset[Position]

    @classmethod
    def from_body(cls, grid: Grid, body: Iterable[Position]) -> OccupancySnapshot:
        """Build a snapshot whose obstacles are every body cell except the head."""
        cells = tuple((int(x), int(y)) for x, y in body)
        if not cells:
            raise ValueError("body must contain at least one cell")
        return cls(grid=grid, body=cells, obstacles=frozenset(cells[1:]))

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    def is_free(self, pos: Position) -> bool:
        return self.grid.in_bounds(pos) and pos not in self.obstacles

    def simulate_move(
        self, direction: Direction, ate_food: bool = False
    ) -> OccupancySnapshot | None:
        """Return the snapshot after moving one cell, or None on wall/self collision."""
        new_head = step(self.head, direction)
        if not self.is_free(new_head):
            return None
        new_body = (new_head,) + (self.body if ate_food else self.body[:-1])
        return OccupancySnapshot(grid=self.grid, body=new_body, obstacles=frozenset(new_body[1:]))

    def valid_moves(self) -> list[Direction]:
        """Directions, in enumeration order, that do not collide this tick."""
        return [d for d in DIRECTIONS if self.is_free(step(self.head, d))]

    def reachable_count(self) -> int:
        """Free cells reachable from the head, head included."""
        return reachable_count(self.grid, self.head, self.obstacles)
