"""Tests for snake_lookahead.domain.snapshot module."""

from __future__ import annotations

import pytest

from snake_lookahead.domain.grid import Direction, Grid
from snake_lookahead.domain.snapshot import OccupancySnapshot

BODY = [(5, 5), (4, 5), (3, 5)]


class TestFromBody:
    def test_obstacles_exclude_head(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(10), BODY)
        assert snapshot.head == (5, 5)
        assert snapshot.tail == (3, 5)
        assert snapshot.obstacles == frozenset({(4, 5), (3, 5)})

    def test_single_cell_body_has_no_obstacles(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(5), [(2, 2)])
        assert snapshot.obstacles == frozenset()
        assert snapshot.length == 1

    def test_empty_body_raises(self) -> None:
        with pytest.raises(ValueError):
            OccupancySnapshot.from_body(Grid(5), [])


class TestSimulateMove:
    def test_move_shifts_body_and_drops_tail(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(10), BODY)
        moved = snapshot.simulate_move(Direction.UP)
        assert moved is not None
        assert moved.body == ((5, 4), (5, 5), (4, 5))
        assert moved.obstacles == frozenset({(5, 5), (4, 5)})

    def test_eating_keeps_tail(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(10), BODY)
        moved = snapshot.simulate_move(Direction.RIGHT, ate_food=True)
        assert moved is not None
        assert moved.body == ((6, 5), (5, 5), (4, 5), (3, 5))
        assert moved.obstacles == frozenset({(5, 5), (4, 5), (3, 5)})

    def test_original_snapshot_is_not_mutated(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(10), BODY)
        snapshot.simulate_move(Direction.DOWN)
        assert snapshot.body == tuple(BODY)
        assert snapshot.obstacles == frozenset({(4, 5), (3, 5)})

    def test_same_input_yields_equal_result(self) -> None:
        a = OccupancySnapshot.from_body(Grid(10), BODY)
        b = OccupancySnapshot.from_body(Grid(10), list(BODY))
        assert a.simulate_move(Direction.UP) == b.simulate_move(Direction.UP)
        assert a.simulate_move(Direction.UP) == a.simulate_move(Direction.UP)

    def test_leaving_the_board_fails(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(5), [(0, 0)])
        assert snapshot.simulate_move(Direction.UP) is None
        assert snapshot.simulate_move(Direction.LEFT) is None

    def test_reversing_into_neck_fails(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(10), BODY)
        assert snapshot.simulate_move(Direction.LEFT) is None

    def test_moving_into_current_tail_fails(self) -> None:
        # 2x2 loop: the only free-looking neighbor of the head is the tail cell
        snapshot = OccupancySnapshot.from_body(Grid(4), [(0, 0), (0, 1), (1, 1), (1, 0)])
        assert snapshot.simulate_move(Direction.RIGHT) is None

    def test_single_cell_snake_moves_without_growing(self) -> None:
        moved = OccupancySnapshot.from_body(Grid(5), [(2, 2)]).simulate_move(Direction.DOWN)
        assert moved is not None
        assert moved.body == ((2, 3),)
        assert moved.obstacles == frozenset()


class TestValidMoves:
    def test_excludes_neck_and_keeps_order(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(10), BODY)
        assert snapshot.valid_moves() == [Direction.UP, Direction.DOWN, Direction.RIGHT]

    def test_corner_head(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(5), [(0, 0), (1, 0)])
        assert snapshot.valid_moves() == [Direction.DOWN]

    def test_boxed_in_head_has_no_moves(self) -> None:
        body = [(2, 2), (2, 1), (1, 1), (1, 2), (1, 3), (2, 3), (3, 3), (3, 2)]
        snapshot = OccupancySnapshot.from_body(Grid(5), body)
        assert snapshot.valid_moves() == []

    def test_matches_simulate_move(self) -> None:
        snapshot = OccupancySnapshot.from_body(Grid(6), [(0, 2), (0, 3), (1, 3), (1, 2)])
        for direction in Direction:
            expected = snapshot.simulate_move(direction) is not None
            assert (direction in snapshot.valid_moves()) == expected


class TestReachableCount:
    def test_open_board(self) -> None:
        assert OccupancySnapshot.from_body(Grid(5), [(2, 2)]).reachable_count() == 25

    def test_body_wall_splits_board(self) -> None:
        # Column x=2 fully occupied below the head, which sits on top of it
        body = [(2, 0), (2, 1), (2, 2), (2, 3), (2, 4)]
        snapshot = OccupancySnapshot.from_body(Grid(5), body)
        # Head plus both 2-column halves are connected through the head only
        assert snapshot.reachable_count() == 21
