"""Snake decision engine: A* pathfinding with lookahead safety evaluation."""

from snake_lookahead.config.types import DecisionStatus, PolicyConfig, PolicyKind
from snake_lookahead.domain.grid import Direction, Grid, Position
from snake_lookahead.domain.snapshot import OccupancySnapshot
from snake_lookahead.planning.policy import Decision, choose_direction, decide, decide_path_first

__all__ = [
    "Decision",
    "DecisionStatus",
    "Direction",
    "Grid",
    "OccupancySnapshot",
    "PolicyConfig",
    "PolicyKind",
    "Position",
    "choose_direction",
    "decide",
    "decide_path_first",
]
