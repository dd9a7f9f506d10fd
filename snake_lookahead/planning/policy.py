"""Decision policies: turn a live snake body and food cell into one direction.

``decide`` is the lookahead policy: it runs A* once, scores every valid move
with the lookahead evaluator, rewards the move that follows the path, and
finally applies a safety override that trades greed for reachable space when
the chosen move would leave the snake in a pocket barely larger than itself.

``decide_path_first`` is the plain A* baseline: follow the path when one
exists, otherwise take the first valid move.

Both are pure functions of their arguments. The caller's current direction
is an explicit parameter and is only used by :func:`choose_direction` as the
fallback when no decision can be made.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from snake_lookahead.config.types import DecisionStatus, PolicyConfig, PolicyKind
from snake_lookahead.domain.grid import Direction, Grid, Position, step
from snake_lookahead.domain.snapshot import OccupancySnapshot
from snake_lookahead.planning.lookahead import MoveEvaluation, evaluate_move
from snake_lookahead.planning.pathfinder import find_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decision:
    """Result of one decision request; ``direction is None`` means no decision."""

    direction: Direction | None
    status: DecisionStatus
    evaluations: tuple[MoveEvaluation, ...] = ()
    path: tuple[Position, ...] = ()
    safety_override: bool = False

    @property
    def decided(self) -> bool:
        return self.direction is not None


DecisionFn = Callable[..., Decision]

_NO_INPUT = Decision(direction=None, status=DecisionStatus.INVALID_INPUT)
_BOXED_IN = Decision(direction=None, status=DecisionStatus.NO_VALID_MOVES)


def _normalize_input(
    grid: Grid, body: Sequence[Sequence[int]] | None, food: Sequence[int] | None
) -> tuple[tuple[Position, ...], Position] | None:
    """Return ``(body, food)`` as integer tuples, or None when no decision is possible."""
    if not body or food is None:
        return None
    try:
        cells = tuple((int(x), int(y)) for x, y in body)
        target = (int(food[0]), int(food[1]))
    except (TypeError, ValueError, IndexError):
        return None
    if not grid.in_bounds(target) or any(not grid.in_bounds(cell) for cell in cells):
        return None
    if len(set(cells)) != len(cells) or target in cells:
        return None
    return cells, target


def _safety_override(
    chosen: MoveEvaluation,
    evaluations: Sequence[MoveEvaluation],
    body_length: int,
    config: PolicyConfig,
) -> MoveEvaluation | None:
    """Return a roomier move when the chosen one would trap the snake, else None."""
    if chosen.reachable >= body_length + config.safety_threshold_extra:
        return None
    safest = evaluations[0]
    for evaluation in evaluations[1:]:
        if evaluation.reachable > safest.reachable:
            safest = evaluation
    if safest.reachable > chosen.reachable + config.safety_margin:
        return safest
    return None


def decide(
    grid: Grid,
    body: Sequence[Sequence[int]] | None,
    food: Sequence[int] | None,
    current_direction: Direction | None = None,
    config: PolicyConfig | None = None,
) -> Decision:
    """Choose the next direction with A* guidance and lookahead scoring."""
    config = config or PolicyConfig()
    normalized = _normalize_input(grid, body, food)
    if normalized is None:
        logger.debug("no decision: invalid input (body=%r, food=%r)", body, food)
        return _NO_INPUT
    cells, food = normalized

    snapshot = OccupancySnapshot.from_body(grid, cells)
    valid_moves = snapshot.valid_moves()
    if not valid_moves:
        logger.debug("no decision: head %s is boxed in", snapshot.head)
        return _BOXED_IN

    path = find_path(grid, snapshot.head, food, snapshot.obstacles)
    first_step = path[0] if path else None

    evaluations: list[MoveEvaluation] = []
    for move in valid_moves:
        evaluation = evaluate_move(
            snapshot, move, food, config.depth, config.weights, config.pooling
        )
        if first_step is not None and step(snapshot.head, move) == first_step:
            evaluation = MoveEvaluation(
                direction=evaluation.direction,
                score=evaluation.score + config.weights.path_bonus,
                reachable=evaluation.reachable,
                distance_to_food=evaluation.distance_to_food,
            )
        evaluations.append(evaluation)

    best = evaluations[0]
    for evaluation in evaluations[1:]:
        if evaluation.score > best.score:
            best = evaluation

    override = _safety_override(best, evaluations, snapshot.length, config)
    if override is not None:
        logger.debug(
            "safety override: %s (space %d) -> %s (space %d)",
            best.direction.name,
            best.reachable,
            override.direction.name,
            override.reachable,
        )
        best = override

    return Decision(
        direction=best.direction,
        status=DecisionStatus.CHOSEN,
        evaluations=tuple(evaluations),
        path=tuple(path),
        safety_override=override is not None,
    )


def decide_path_first(
    grid: Grid,
    body: Sequence[Sequence[int]] | None,
    food: Sequence[int] | None,
    current_direction: Direction | None = None,
    config: PolicyConfig | None = None,
) -> Decision:
    """Follow the A* path; without one, take the first valid move."""
    normalized = _normalize_input(grid, body, food)
    if normalized is None:
        return _NO_INPUT
    cells, food = normalized

    snapshot = OccupancySnapshot.from_body(grid, cells)
    path = find_path(grid, snapshot.head, food, snapshot.obstacles)
    if path:
        direction = Direction.between(snapshot.head, path[0])
        return Decision(direction=direction, status=DecisionStatus.CHOSEN, path=tuple(path))

    valid_moves = snapshot.valid_moves()
    if not valid_moves:
        return _BOXED_IN
    return Decision(direction=valid_moves[0], status=DecisionStatus.CHOSEN)


_POLICIES: dict[PolicyKind, DecisionFn] = {
    PolicyKind.LOOKAHEAD: decide,
    PolicyKind.PATH_FIRST: decide_path_first,
}


def get_policy(kind: PolicyKind | str) -> DecisionFn:
    """Resolve a policy by enum member or its string value."""
    try:
        resolved = kind if isinstance(kind, PolicyKind) else PolicyKind(kind)
    except ValueError as exc:
        valid = ", ".join(p.value for p in PolicyKind)
        raise ValueError(f"policy must be one of {valid}") from exc
    return _POLICIES[resolved]


def choose_direction(
    grid: Grid,
    body: Sequence[Sequence[int]] | None,
    food: Sequence[int] | None,
    current_direction: Direction | None,
    config: PolicyConfig | None = None,
    policy: PolicyKind | str = PolicyKind.LOOKAHEAD,
) -> Direction | None:
    """Return the decided direction, or ``current_direction`` when there is none."""
    decision = get_policy(policy)(grid, body, food, current_direction, config)
    if decision.direction is None:
        return current_direction
    return decision.direction
