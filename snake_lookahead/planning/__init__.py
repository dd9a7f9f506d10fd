"""Planning layer: A* pathfinding, lookahead evaluation, and decision policies."""

from snake_lookahead.planning.lookahead import MoveEvaluation, evaluate_move
from snake_lookahead.planning.pathfinder import SearchNode, find_path
from snake_lookahead.planning.policy import (
    Decision,
    choose_direction,
    decide,
    decide_path_first,
    get_policy,
)

__all__ = [
    "Decision",
    "MoveEvaluation",
    "SearchNode",
    "choose_direction",
    "decide",
    "decide_path_first",
    "evaluate_move",
    "find_path",
    "get_policy",
]
