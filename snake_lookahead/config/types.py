"""Configuration dataclasses, enums, and result containers.

All frozen dataclasses that parameterise the decision policy, single
episodes, and multi-policy benchmark runs live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from snake_lookahead.config.constants import (
    BASE_DISTANCE_WEIGHT,
    DEAD_END_PENALTY,
    FOOD_WEIGHT,
    FUTURE_DISCOUNT,
    GRID_SIZE,
    INITIAL_BODY,
    INITIAL_DIRECTION,
    INVALID_MOVE_SCORE,
    LOOKAHEAD_DEPTH,
    MAX_BENCHMARK_WORK_UNITS,
    MAX_TICKS,
    PATH_BONUS,
    SAFETY_MARGIN,
    SAFETY_THRESHOLD_EXTRA,
    SPACE_WEIGHT,
    STARVATION_WINDOW,
    WALL_CONTACT_PENALTY,
    WALL_NEAR_PENALTY,
)

__all__ = [
    "MAX_BENCHMARK_WORK_UNITS",
    "BenchmarkConfig",
    "DecisionStatus",
    "EpisodeConfig",
    "EpisodeResult",
    "EvaluatorWeights",
    "FuturePooling",
    "PolicyConfig",
    "PolicyKind",
    "TerminationReason",
]

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class FuturePooling(Enum):
    """How the lookahead evaluator folds follow-up move scores into one value."""

    MAX = "max"
    MEAN = "mean"


class PolicyKind(Enum):
    """Decision policies available to the episode engine."""

    LOOKAHEAD = "lookahead"
    PATH_FIRST = "path_first"


class DecisionStatus(Enum):
    """Outcome of one decision request."""

    CHOSEN = "chosen"
    NO_VALID_MOVES = "no_valid_moves"
    INVALID_INPUT = "invalid_input"


class TerminationReason(Enum):
    """Why an episode ended before its tick cap."""

    COLLISION = "collision"
    BOARD_FULL = "board_full"
    STARVED = "starved"


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EpisodeResult:
    """Top-level result for one played episode."""

    episode_id: str
    policy: str
    seed: int
    score: int
    ticks: int
    final_length: int
    survived: bool
    termination_reason: str | None
    safety_overrides: int = 0


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EvaluatorWeights:
    """Scoring weights for the lookahead evaluator and path bonus."""

    invalid_move: float = INVALID_MOVE_SCORE
    base_distance: float = BASE_DISTANCE_WEIGHT
    food: float = FOOD_WEIGHT
    space: float = SPACE_WEIGHT
    wall_contact: float = WALL_CONTACT_PENALTY
    wall_near: float = WALL_NEAR_PENALTY
    dead_end: float = DEAD_END_PENALTY
    discount: float = FUTURE_DISCOUNT
    path_bonus: float = PATH_BONUS

    def __post_init__(self) -> None:
        if not 0.0 <= self.discount <= 1.0:
            raise ValueError("discount must be in [0.0, 1.0]")
        for name in ("base_distance", "food", "space", "wall_contact", "wall_near", "dead_end"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} must be >= 0")


@dataclass(frozen=True)
class PolicyConfig:
    """Knobs of the lookahead decision policy."""

    depth: int = LOOKAHEAD_DEPTH
    pooling: FuturePooling = FuturePooling.MAX
    weights: EvaluatorWeights = field(default_factory=EvaluatorWeights)
    safety_threshold_extra: int = SAFETY_THRESHOLD_EXTRA
    safety_margin: int = SAFETY_MARGIN

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("depth must be >= 0")
        if self.safety_threshold_extra < 0:
            raise ValueError("safety_threshold_extra must be >= 0")
        if self.safety_margin < 0:
            raise ValueError("safety_margin must be >= 0")


@dataclass(frozen=True)
class EpisodeConfig:
    """Board and termination settings for one headless episode."""

    grid_size: int = GRID_SIZE
    max_ticks: int = MAX_TICKS
    starvation_window: int = STARVATION_WINDOW
    initial_body: tuple[tuple[int, int], ...] = INITIAL_BODY
    initial_direction: tuple[int, int] = INITIAL_DIRECTION

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ValueError("grid_size must be >= 2")
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")
        if self.starvation_window < 1:
            raise ValueError("starvation_window must be >= 1")
        if not self.initial_body:
            raise ValueError("initial_body must not be empty")
        if len(set(self.initial_body)) != len(self.initial_body):
            raise ValueError("initial_body must not contain duplicate cells")
        if len(self.initial_body) >= self.grid_size * self.grid_size:
            raise ValueError("initial_body must leave at least one free cell")
        for x, y in self.initial_body:
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError("initial_body cells must lie inside the grid")
        if self.initial_direction not in {(0, -1), (0, 1), (-1, 0), (1, 0)}:
            raise ValueError("initial_direction must be a unit vector")


@dataclass(frozen=True)
class BenchmarkConfig:
    """Multi-policy, multi-seed benchmark settings."""

    policies: tuple[PolicyKind, ...] = (PolicyKind.LOOKAHEAD, PolicyKind.PATH_FIRST)
    n_episodes: int = 20
    out_dir: Path = Path("data")
    base_seed: int = 0
    grid_size: int = GRID_SIZE
    max_ticks: int = MAX_TICKS
    starvation_window: int = STARVATION_WINDOW
    depth: int = LOOKAHEAD_DEPTH
    pooling: FuturePooling = FuturePooling.MAX

    def __post_init__(self) -> None:
        if not self.policies:
            raise ValueError("policies must not be empty")
        if len(set(self.policies)) != len(self.policies):
            raise ValueError("policies must include distinct values")
        if self.n_episodes < 1:
            raise ValueError("n_episodes must be >= 1")
        self.episode_config()
        self.policy_config()

    def episode_config(self) -> EpisodeConfig:
        # The default starting body sits on row 8, so small boards recentre it.
        body = INITIAL_BODY
        if self.grid_size != GRID_SIZE:
            row = self.grid_size // 2
            body = tuple((x, row) for x in range(min(2, self.grid_size - 2), -1, -1))
        return EpisodeConfig(
            grid_size=self.grid_size,
            max_ticks=self.max_ticks,
            starvation_window=self.starvation_window,
            initial_body=body,
        )

    def policy_config(self) -> PolicyConfig:
        return PolicyConfig(depth=self.depth, pooling=self.pooling)

    def total_work_units(self) -> int:
        return len(self.policies) * self.n_episodes * self.max_ticks
