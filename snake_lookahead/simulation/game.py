"""Headless snake game: the collaborator that feeds the decision engine.

Mirrors the browser game loop without any presentation. Each tick the new
head is checked against the walls and the whole current body, tail
included, before the tail is removed. Food is placed uniformly at random on a
free cell from a seeded RNG; a board with no free cell ends the game.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random

from snake_lookahead.config.types import EpisodeConfig, TerminationReason
from snake_lookahead.domain.grid import Direction, Grid, Position, step


@dataclass(frozen=True)
class TickOutcome:
    """What happened during one game tick."""

    ate_food: bool
    terminated: bool
    reason: TerminationReason | None = None


@dataclass
class SnakeGame:
    """Mutable game state advanced one tick at a time."""

    grid: Grid
    body: list[Position]
    direction: Direction
    rng: Random
    food: Position | None = None
    score: int = 0
    ticks: int = 0
    termination_reason: TerminationReason | None = None
    _occupied: set[Position] = field(default_factory=set, repr=False)

    @classmethod
    def create(cls, config: EpisodeConfig, rng: Random) -> SnakeGame:
        """Start a game from the configured body and heading, then place food."""
        game = cls(
            grid=Grid(config.grid_size),
            body=list(config.initial_body),
            direction=Direction(config.initial_direction),
            rng=rng,
        )
        game._occupied = set(game.body)
        game.food = game.place_food()
        if game.food is None:
            game.termination_reason = TerminationReason.BOARD_FULL
        return game

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def over(self) -> bool:
        return self.termination_reason is not None

    def place_food(self) -> Position | None:
        """Pick a random free cell, or None when the snake fills the board."""
        free = [cell for cell in self.grid.cells() if cell not in self._occupied]
        if not free:
            return None
        return self.rng.choice(free)

    def tick(self, direction: Direction | None = None) -> TickOutcome:
        """Advance one tick; ``None`` keeps the current heading."""
        if self.over:
            raise RuntimeError("game is already over")
        if direction is not None:
            self.direction = direction
        self.ticks += 1

        new_head = step(self.head, self.direction)
        if not self.grid.in_bounds(new_head) or new_head in self._occupied:
            self.termination_reason = TerminationReason.COLLISION
            return TickOutcome(ate_food=False, terminated=True, reason=self.termination_reason)

        self.body.insert(0, new_head)
        self._occupied.add(new_head)

        if new_head != self.food:
            self._occupied.discard(self.body.pop())
            return TickOutcome(ate_food=False, terminated=False)

        self.score += 1
        self.food = self.place_food()
        if self.food is None:
            self.termination_reason = TerminationReason.BOARD_FULL
            return TickOutcome(ate_food=True, terminated=True, reason=self.termination_reason)
        return TickOutcome(ate_food=True, terminated=False)
