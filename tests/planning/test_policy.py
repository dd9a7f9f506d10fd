"""Tests for snake_lookahead.planning.policy module."""

from __future__ import annotations

import pytest

from snake_lookahead.config.types import (
    DecisionStatus,
    EvaluatorWeights,
    PolicyConfig,
    PolicyKind,
)
from snake_lookahead.domain.grid import Direction, Grid, manhattan, step
from snake_lookahead.planning.lookahead import MoveEvaluation
from snake_lookahead.planning.policy import (
    _safety_override,
    choose_direction,
    decide,
    decide_path_first,
    get_policy,
)

# 8x8 board split by the body: the head sits on top of a vertical wall at
# x=3, the left half is mostly filled by the rest of the body, and the food
# lies in the small left pocket.
CORRIDOR_GRID = Grid(8)
CORRIDOR_BODY = (
    [(3, y) for y in range(8)]
    + [(2, 7), (1, 7), (0, 7), (0, 6), (1, 6), (2, 6)]
    + [(2, 5), (1, 5), (0, 5), (0, 4), (1, 4), (2, 4)]
)
CORRIDOR_FOOD = (0, 0)

BOXED_IN_BODY = [(2, 2), (2, 1), (1, 1), (1, 2), (1, 3), (2, 3), (3, 3), (3, 2)]


def _evaluation(direction: Direction, score: float, reachable: int) -> MoveEvaluation:
    return MoveEvaluation(direction=direction, score=score, reachable=reachable, distance_to_food=1)


class TestDecide:
    def test_never_reverses_into_neck(self) -> None:
        body = [(5, 5), (4, 5), (3, 5)]
        # Food directly behind the snake
        decision = decide(Grid(10), body, (0, 5), Direction.RIGHT)
        assert decision.status is DecisionStatus.CHOSEN
        assert decision.direction is not Direction.LEFT

    def test_reaches_food_on_open_board(self) -> None:
        grid = Grid(5)
        food = (4, 4)
        body = [(2, 2)]
        direction = None
        for _ in range(4):
            direction = decide(grid, body, food, direction).direction
            assert direction is not None
            body = [step(body[0], direction)]
            if body[0] == food:
                break
        assert body[0] == food

    def test_path_step_gets_bonus(self) -> None:
        decision = decide(Grid(5), [(2, 2)], (4, 4))
        assert decision.path[0] == step((2, 2), decision.direction)
        assert manhattan(decision.path[-1], (4, 4)) == 0

    def test_evaluations_follow_enumeration_order(self) -> None:
        decision = decide(Grid(10), [(5, 5), (4, 5), (3, 5)], (8, 8))
        directions = [evaluation.direction for evaluation in decision.evaluations]
        assert directions == [Direction.UP, Direction.DOWN, Direction.RIGHT]

    def test_boxed_in_returns_no_decision(self) -> None:
        decision = decide(Grid(5), BOXED_IN_BODY, (0, 0), Direction.LEFT)
        assert decision.direction is None
        assert decision.status is DecisionStatus.NO_VALID_MOVES
        assert not decision.decided

    def test_tail_counts_as_obstacle(self) -> None:
        decision = decide(Grid(2), [(0, 0), (0, 1), (1, 1)], (1, 0))
        assert decision.direction is Direction.RIGHT
        loop = decide(Grid(3), [(0, 0), (0, 1), (1, 1), (1, 0)], (2, 2))
        assert loop.status is DecisionStatus.NO_VALID_MOVES

    @pytest.mark.parametrize(
        ("body", "food"),
        [
            ([], (1, 1)),
            (None, (1, 1)),
            ([(2, 2)], None),
            ([(2, 2)], (9, 9)),
            ([(7, 2)], (1, 1)),
            ([(2, 2), (2, 3), (2, 2)], (1, 1)),
            ([(2, 2), (2, 3)], (2, 2)),
            ([(2, 2), (1, 2), (0, 2)], (0, 2)),
            ([(2, 2), (1, 2, 0)], (4, 4)),
            ([(2, 2)], "food"),
        ],
    )
    def test_invalid_input_returns_no_decision(
        self, body: list[tuple[int, ...]] | None, food: tuple[int, int] | str | None
    ) -> None:
        decision = decide(Grid(5), body, food, Direction.UP)
        assert decision.direction is None
        assert decision.status is DecisionStatus.INVALID_INPUT

    def test_list_cells_are_accepted(self) -> None:
        from_lists = decide(Grid(5), [[2, 2], [1, 2]], [4, 4])
        from_tuples = decide(Grid(5), [(2, 2), (1, 2)], (4, 4))
        assert from_lists.status is DecisionStatus.CHOSEN
        assert from_lists == from_tuples

    def test_food_on_body_is_invalid_for_baseline(self) -> None:
        decision = decide_path_first(Grid(5), [(2, 2), (1, 2), (0, 2)], (1, 2))
        assert decision.status is DecisionStatus.INVALID_INPUT

    def test_same_input_same_decision(self) -> None:
        body = [(4, 3), (3, 3), (2, 3), (2, 4)]
        first = decide(Grid(7), body, (0, 0), Direction.RIGHT)
        second = decide(Grid(7), list(body), (0, 0), Direction.RIGHT)
        assert first == second

    def test_does_not_mutate_body(self) -> None:
        body = [(4, 3), (3, 3), (2, 3)]
        decide(Grid(7), body, (0, 0))
        assert body == [(4, 3), (3, 3), (2, 3)]


class TestSafetyOverride:
    def test_default_weights_prefer_open_side(self) -> None:
        decision = decide(CORRIDOR_GRID, CORRIDOR_BODY, CORRIDOR_FOOD, Direction.UP)
        assert decision.direction is Direction.RIGHT
        reachable = {e.direction: e.reachable for e in decision.evaluations}
        assert reachable == {Direction.LEFT: 13, Direction.RIGHT: 32}

    def test_override_beats_greedy_path(self) -> None:
        config = PolicyConfig(weights=EvaluatorWeights(path_bonus=10_000.0))
        decision = decide(CORRIDOR_GRID, CORRIDOR_BODY, CORRIDOR_FOOD, Direction.UP, config)
        assert decision.path[0] == (2, 0)
        assert decision.direction is Direction.RIGHT
        assert decision.safety_override

    def test_large_margin_keeps_greedy_choice(self) -> None:
        config = PolicyConfig(weights=EvaluatorWeights(path_bonus=10_000.0), safety_margin=100)
        decision = decide(CORRIDOR_GRID, CORRIDOR_BODY, CORRIDOR_FOOD, Direction.UP, config)
        assert decision.direction is Direction.LEFT
        assert not decision.safety_override

    def test_roomy_choice_is_kept(self) -> None:
        chosen = _evaluation(Direction.UP, 10.0, reachable=20)
        others = [chosen, _evaluation(Direction.DOWN, 0.0, reachable=60)]
        assert _safety_override(chosen, others, body_length=5, config=PolicyConfig()) is None

    def test_margin_must_be_exceeded(self) -> None:
        chosen = _evaluation(Direction.UP, 10.0, reachable=4)
        exactly = [chosen, _evaluation(Direction.DOWN, 0.0, reachable=12)]
        beyond = [chosen, _evaluation(Direction.DOWN, 0.0, reachable=13)]
        config = PolicyConfig()
        assert _safety_override(chosen, exactly, body_length=5, config=config) is None
        override = _safety_override(chosen, beyond, body_length=5, config=config)
        assert override is not None
        assert override.direction is Direction.DOWN

    def test_first_safest_move_wins_ties(self) -> None:
        chosen = _evaluation(Direction.UP, 10.0, reachable=2)
        evaluations = [
            chosen,
            _evaluation(Direction.LEFT, 0.0, reachable=30),
            _evaluation(Direction.RIGHT, 5.0, reachable=30),
        ]
        override = _safety_override(chosen, evaluations, body_length=5, config=PolicyConfig())
        assert override is not None
        assert override.direction is Direction.LEFT


class TestPathFirst:
    def test_follows_path(self) -> None:
        decision = decide_path_first(Grid(5), [(2, 2)], (4, 4))
        assert decision.direction is Direction.DOWN
        assert decision.path[-1] == (4, 4)

    def test_walks_into_pocket_when_path_leads_there(self) -> None:
        decision = decide_path_first(CORRIDOR_GRID, CORRIDOR_BODY, CORRIDOR_FOOD)
        assert decision.direction is Direction.LEFT

    def test_without_path_takes_first_valid_move(self) -> None:
        # Food sealed off in the corner behind the body
        body = [(1, 2), (0, 2), (0, 1), (1, 1), (1, 0)]
        decision = decide_path_first(Grid(5), body, (0, 0))
        assert decision.path == ()
        assert decision.direction is Direction.DOWN

    def test_boxed_in(self) -> None:
        decision = decide_path_first(Grid(5), BOXED_IN_BODY, (0, 0))
        assert decision.status is DecisionStatus.NO_VALID_MOVES


class TestChooseDirection:
    def test_falls_back_to_current_direction(self) -> None:
        assert choose_direction(Grid(5), BOXED_IN_BODY, (0, 0), Direction.LEFT) is Direction.LEFT
        assert choose_direction(Grid(5), [], (0, 0), Direction.UP) is Direction.UP

    def test_returns_decided_direction(self) -> None:
        chosen = choose_direction(Grid(10), [(5, 5), (4, 5), (3, 5)], (0, 5), Direction.RIGHT)
        assert chosen in (Direction.UP, Direction.DOWN, Direction.RIGHT)

    def test_policy_by_name(self) -> None:
        chosen = choose_direction(Grid(5), [(2, 2)], (4, 4), None, policy="path_first")
        assert chosen is Direction.DOWN


class TestGetPolicy:
    def test_resolves_enum_and_string(self) -> None:
        assert get_policy(PolicyKind.LOOKAHEAD) is decide
        assert get_policy("path_first") is decide_path_first

    def test_unknown_policy_raises(self) -> None:
        with pytest.raises(ValueError, match="policy must be one of"):
            get_policy("greedy")
