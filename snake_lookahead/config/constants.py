"""Centralized constants for the decision engine and the benchmark harness.

All weights and thresholds used by the lookahead evaluator and the decision
policy are defined here. Consuming modules should import from this module
rather than defining their own inline literals.
"""

from __future__ import annotations

GRID_SIZE = 17
"""Default board edge length in cells (square board)."""

INITIAL_BODY: tuple[tuple[int, int], ...] = ((2, 8), (1, 8), (0, 8))
"""Starting snake body, head first."""

INITIAL_DIRECTION: tuple[int, int] = (1, 0)
"""Starting heading (right)."""

LOOKAHEAD_DEPTH = 4
"""Plies simulated by the lookahead evaluator for each candidate move."""

INVALID_MOVE_SCORE = -1000.0
"""Score assigned to a move that collides or leaves the board."""

BASE_DISTANCE_WEIGHT = 2.0
"""Leaf score penalty per unit of Manhattan distance to the food."""

FOOD_WEIGHT = 3.0
"""Reward per unit of proximity to the food after a simulated move."""

SPACE_WEIGHT = 8.0
"""Reward per reachable free cell after a simulated move."""

WALL_CONTACT_PENALTY = 40.0
"""Penalty when the simulated head lies on the border."""

WALL_NEAR_PENALTY = 15.0
"""Penalty when the simulated head lies one cell from the border."""

DEAD_END_PENALTY = 400.0
"""Penalty when the simulated state has no valid follow-up move."""

FUTURE_DISCOUNT = 0.6
"""Weight applied to the pooled score of follow-up moves."""

PATH_BONUS = 80.0
"""Bonus for the move that follows the first step of the A* path."""

SAFETY_THRESHOLD_EXTRA = 3
"""Safety override arms when reachable space < body length + this value."""

SAFETY_MARGIN = 8
"""Safer move must beat the chosen move's reachable space by more than this."""

MAX_TICKS = 5_000
"""Default tick cap for one benchmark episode."""

STARVATION_WINDOW = 2 * GRID_SIZE * GRID_SIZE
"""Ticks without eating after which an episode is declared starved."""

FLUSH_THRESHOLD = 8_192
"""Flush tick log rows to Parquet once this in-memory row count is reached."""

MAX_BENCHMARK_WORK_UNITS = 50_000_000
"""Safety cap on total ticks across all policies and episodes."""
