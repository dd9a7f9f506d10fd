"""Path construction helpers for benchmark output directories.

Centralises the directory/file naming conventions used by the episode engine
and the benchmark orchestration layer.
"""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def tick_log_path(out_dir: Path) -> Path:
    """Return path to the per-tick decision log Parquet file."""
    return logs_dir(out_dir) / "tick_log.parquet"


def episodes_path(out_dir: Path) -> Path:
    """Return path to the per-episode results Parquet file."""
    return logs_dir(out_dir) / "episodes.parquet"


def policy_dir(out_dir: Path, policy: str) -> Path:
    """Return the per-policy output directory inside a benchmark directory."""
    return out_dir / f"policy_{policy}"


def benchmark_runs_path(out_dir: Path) -> Path:
    """Return path to the benchmark runs Parquet file."""
    return logs_dir(out_dir) / "benchmark_runs.parquet"


def policy_summary_path(out_dir: Path) -> Path:
    """Return path to the per-policy summary Parquet file."""
    return logs_dir(out_dir) / "policy_summary.parquet"


def policy_comparison_path(out_dir: Path) -> Path:
    """Return path to the cross-policy comparison JSON file."""
    return logs_dir(out_dir) / "policy_comparison.json"


def score_plot_path(out_dir: Path) -> Path:
    """Return path to the score distribution figure."""
    return out_dir / "figures" / "score_distribution.png"
