"""Domain layer: grid geometry, occupancy snapshots, and reachability."""

from snake_lookahead.domain.grid import DIRECTIONS, Direction, Grid, Position, manhattan, step
from snake_lookahead.domain.reachability import reachable_cells, reachable_count
from snake_lookahead.domain.snapshot import OccupancySnapshot

__all__ = [
    "DIRECTIONS",
    "Direction",
    "Grid",
    "OccupancySnapshot",
    "Position",
    "manhattan",
    "reachable_cells",
    "reachable_count",
    "step",
]
