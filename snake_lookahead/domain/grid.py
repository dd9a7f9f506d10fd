"""Bounded square grid geometry and the four movement directions.

The grid does not wrap: a cell is valid iff both coordinates lie in
``[0, size)``. Neighbor enumeration always follows the order up, down, left,
right so that every tie-break downstream is deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Position = tuple[int, int]
"""Cell coordinates ``(x, y)``; ``y`` grows downward."""


class Direction(Enum):
    """Unit step on the grid. Member order is the enumeration order."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))

    @classmethod
    def between(cls, a: Position, b: Position) -> Direction | None:
        """Return the direction of the unit step from ``a`` to ``b``, if adjacent."""
        delta = (b[0] - a[0], b[1] - a[1])
        try:
            return cls(delta)
        except ValueError:
            return None


DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


def step(pos: Position, direction: Direction) -> Position:
    return (pos[0] + direction.dx, pos[1] + direction.dy)


def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(frozen=True)
class Grid:
    """Square board of ``size`` x ``size`` cells."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("size must be >= 1")

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def neighbors(self, pos: Position) -> list[Position]:
        """Return in-bounds neighbors of ``pos`` in up, down, left, right order."""
        result: list[Position] = []
        for direction in DIRECTIONS:
            cell = step(pos, direction)
            if self.in_bounds(cell):
                result.append(cell)
        return result

    def encode(self, pos: Position) -> int:
        """Row-major cell index of ``pos``."""
        if not self.in_bounds(pos):
            raise ValueError(f"position out of bounds: {pos}")
        return pos[1] * self.size + pos[0]

    def decode(self, index: int) -> Position:
        """Inverse of :meth:`encode`."""
        if not 0 <= index < self.cell_count:
            raise ValueError(f"cell index out of range: {index}")
        return (index % self.size, index // self.size)

    def wall_distance(self, pos: Position) -> int:
        """Distance from ``pos`` to the nearest border cell (0 on the border)."""
        x, y = pos
        return min(x, y, self.size - 1 - x, self.size - 1 - y)

    def cells(self) -> list[Position]:
        """All cells in row-major order."""
        return [(x, y) for y in range(self.size) for x in range(self.size)]
