"""Configuration layer: constants and typed config dataclasses."""

from snake_lookahead.config.constants import (
    FLUSH_THRESHOLD,
    GRID_SIZE,
    INITIAL_BODY,
    INITIAL_DIRECTION,
    LOOKAHEAD_DEPTH,
    MAX_BENCHMARK_WORK_UNITS,
    MAX_TICKS,
    STARVATION_WINDOW,
)
from snake_lookahead.config.types import (
    BenchmarkConfig,
    DecisionStatus,
    EpisodeConfig,
    EpisodeResult,
    EvaluatorWeights,
    FuturePooling,
    PolicyConfig,
    PolicyKind,
    TerminationReason,
)

__all__ = [
    "BenchmarkConfig",
    "DecisionStatus",
    "EpisodeConfig",
    "EpisodeResult",
    "EvaluatorWeights",
    "FLUSH_THRESHOLD",
    "FuturePooling",
    "GRID_SIZE",
    "INITIAL_BODY",
    "INITIAL_DIRECTION",
    "LOOKAHEAD_DEPTH",
    "MAX_BENCHMARK_WORK_UNITS",
    "MAX_TICKS",
    "PolicyConfig",
    "PolicyKind",
    "STARVATION_WINDOW",
    "TerminationReason",
]
