"""Experiments layer: benchmark orchestration, summaries, and CLI."""

from snake_lookahead.experiments.benchmark import run_benchmark
from snake_lookahead.experiments.summaries import (
    bootstrap_mean_ci,
    build_policy_comparison,
    build_policy_summary,
    load_run_rows,
)

__all__ = [
    "bootstrap_mean_ci",
    "build_policy_comparison",
    "build_policy_summary",
    "load_run_rows",
    "run_benchmark",
]
