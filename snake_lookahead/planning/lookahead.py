"""Bounded-depth lookahead scoring of candidate moves.

Single-agent game-tree search: each candidate move is simulated, scored on
food proximity, reachable space, wall proximity and dead ends, and then the
pooled score of its follow-up moves is added with a discount. The space term
dominates, which biases the agent toward survivability over greed.
"""

from __future__ import annotations

from dataclasses import dataclass

from snake_lookahead.config.types import EvaluatorWeights, FuturePooling
from snake_lookahead.domain.grid import Direction, Position, manhattan
from snake_lookahead.domain.snapshot import OccupancySnapshot


@dataclass(frozen=True)
class MoveEvaluation:
    """Score of one candidate move plus the diagnostics behind it."""

    direction: Direction
    score: float
    reachable: int
    distance_to_food: float


def wall_penalty(snapshot: OccupancySnapshot, weights: EvaluatorWeights) -> float:
    distance = snapshot.grid.wall_distance(snapshot.head)
    if distance == 0:
        return weights.wall_contact
    if distance == 1:
        return weights.wall_near
    return 0.0


def _pool(scores: list[float], pooling: FuturePooling) -> float:
    if pooling is FuturePooling.MEAN:
        return sum(scores) / len(scores)
    return max(scores)


def evaluate_move(
    snapshot: OccupancySnapshot,
    direction: Direction,
    food: Position,
    depth: int,
    weights: EvaluatorWeights | None = None,
    pooling: FuturePooling = FuturePooling.MAX,
) -> MoveEvaluation:
    """Score ``direction`` from ``snapshot`` looking ``depth`` plies ahead.

    At depth 0 the move is not applied: the leaf is scored on the current
    head's distance to the food. An invalid move scores
    ``weights.invalid_move`` with zero reachable space.
    """
    weights = weights or EvaluatorWeights()

    if depth <= 0:
        distance = manhattan(snapshot.head, food)
        return MoveEvaluation(
            direction=direction,
            score=-weights.base_distance * distance,
            reachable=snapshot.reachable_count(),
            distance_to_food=distance,
        )

    moved = snapshot.simulate_move(direction)
    if moved is None:
        return MoveEvaluation(
            direction=direction,
            score=weights.invalid_move,
            reachable=0,
            distance_to_food=float("inf"),
        )

    distance = manhattan(moved.head, food)
    reachable = moved.reachable_count()
    score = weights.food * (2 * snapshot.grid.size - distance)
    score += weights.space * reachable
    score -= wall_penalty(moved, weights)

    follow_ups = moved.valid_moves()
    if not follow_ups:
        score -= weights.dead_end
    else:
        child_scores = [
            evaluate_move(moved, child, food, depth - 1, weights, pooling).score
            for child in follow_ups
        ]
        score += weights.discount * _pool(child_scores, pooling)

    return MoveEvaluation(
        direction=direction,
        score=score,
        reachable=reachable,
        distance_to_food=distance,
    )
