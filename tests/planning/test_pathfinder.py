"""Tests for snake_lookahead.planning.pathfinder module.

Path lengths are checked against networkx's breadth-first shortest path on
the same obstacle layout.
"""

from __future__ import annotations

import random

import networkx as nx
import pytest

from snake_lookahead.domain.grid import Grid, Position, manhattan
from snake_lookahead.planning.pathfinder import SearchNode, find_path


def _oracle_length(size: int, start: Position, goal: Position, obstacles: set[Position]) -> int:
    graph = nx.grid_2d_graph(size, size)
    graph.remove_nodes_from(obstacles)
    try:
        return nx.shortest_path_length(graph, start, goal)
    except nx.NetworkXNoPath:
        return -1


def _assert_valid_path(
    grid: Grid, start: Position, goal: Position, obstacles: set[Position], path: list[Position]
) -> None:
    assert path[-1] == goal
    previous = start
    for cell in path:
        assert grid.in_bounds(cell)
        assert cell not in obstacles
        assert manhattan(previous, cell) == 1
        previous = cell


class TestFindPath:
    def test_open_board_path_has_manhattan_length(self) -> None:
        grid = Grid(8)
        path = find_path(grid, (1, 1), (6, 4), set())
        assert len(path) == 8
        _assert_valid_path(grid, (1, 1), (6, 4), set(), path)

    def test_start_is_excluded(self) -> None:
        path = find_path(Grid(5), (0, 0), (0, 2), set())
        assert path == [(0, 1), (0, 2)]

    def test_start_equals_goal_is_empty(self) -> None:
        assert find_path(Grid(5), (2, 2), (2, 2), set()) == []

    def test_unreachable_goal_is_empty(self) -> None:
        wall = {(2, y) for y in range(5)}
        assert find_path(Grid(5), (0, 0), (4, 4), wall) == []

    def test_goal_on_obstacle_is_empty(self) -> None:
        assert find_path(Grid(5), (0, 0), (3, 3), {(3, 3)}) == []

    def test_goal_out_of_bounds_is_empty(self) -> None:
        assert find_path(Grid(5), (0, 0), (5, 0), set()) == []

    def test_start_listed_as_obstacle_is_ignored(self) -> None:
        path = find_path(Grid(5), (0, 0), (2, 0), {(0, 0)})
        assert path == [(1, 0), (2, 0)]

    def test_routes_around_wall(self) -> None:
        grid = Grid(5)
        # Vertical wall with a gap at the bottom
        wall = {(2, 0), (2, 1), (2, 2), (2, 3)}
        path = find_path(grid, (0, 0), (4, 0), wall)
        assert (2, 4) in path
        assert len(path) == 12
        _assert_valid_path(grid, (0, 0), (4, 0), wall, path)

    def test_open_node_reached_again_by_cheaper_route(self) -> None:
        # (2, 3) is first opened from (2, 2) with g=5, then lowered to g=3 via (1, 3)
        grid = Grid(5)
        obstacles = {(1, 2), (3, 1), (4, 0)}
        path = find_path(grid, (0, 2), (4, 1), obstacles)
        assert path == [(0, 1), (1, 1), (2, 1), (2, 2), (3, 2), (4, 2), (4, 1)]
        assert len(path) == _oracle_length(5, (0, 2), (4, 1), obstacles)
        _assert_valid_path(grid, (0, 2), (4, 1), obstacles, path)

    def test_repeated_calls_return_identical_paths(self) -> None:
        grid = Grid(7)
        obstacles = {(3, 1), (3, 2), (3, 3), (1, 5), (5, 5)}
        first = find_path(grid, (0, 3), (6, 3), obstacles)
        assert first == find_path(grid, (0, 3), (6, 3), set(obstacles))

    @pytest.mark.parametrize("seed", range(12))
    def test_length_matches_breadth_first_oracle(self, seed: int) -> None:
        rng = random.Random(seed)
        size = rng.randint(4, 9)
        grid = Grid(size)
        cells = grid.cells()
        obstacles = set(rng.sample(cells, len(cells) // 4))
        free = [cell for cell in cells if cell not in obstacles]
        start, goal = rng.sample(free, 2)

        path = find_path(grid, start, goal, obstacles)
        expected = _oracle_length(size, start, goal, obstacles)
        if expected < 0:
            assert path == []
        else:
            assert len(path) == expected
            _assert_valid_path(grid, start, goal, obstacles, path)


def test_search_node_f_cost() -> None:
    node = SearchNode(position=(0, 0), g=3, h=4)
    assert node.f == 7
    assert node.parent is None
