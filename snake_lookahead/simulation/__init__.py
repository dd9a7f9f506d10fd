"""Simulation layer: headless game, episode engine, and Parquet persistence."""

from snake_lookahead.simulation.engine import run_episode, run_episodes
from snake_lookahead.simulation.game import SnakeGame, TickOutcome
from snake_lookahead.simulation.persistence import empty_tick_columns, flush_tick_columns

__all__ = [
    "SnakeGame",
    "TickOutcome",
    "empty_tick_columns",
    "flush_tick_columns",
    "run_episode",
    "run_episodes",
]
