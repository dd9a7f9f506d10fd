"""Policy summary and comparison builders for benchmark aggregation.

Functions here build the per-policy episode summaries and cross-policy
comparisons that are persisted as Parquet/JSON artifacts.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import pyarrow.parquet as pq

from snake_lookahead.config.types import EpisodeResult
from snake_lookahead.io.schemas import AGGREGATE_SCHEMA_VERSION, POLICY_SUMMARY_METRIC_NAMES

BOOTSTRAP_RESAMPLES = 1_000
"""Resamples drawn for the bootstrap CI of the mean score."""


def _percentile_pre_sorted(sorted_values: list[float], q: float) -> float | None:
    """Compute percentile in [0, 1] with linear interpolation on pre-sorted values."""
    if not sorted_values:
        return None
    if len(sorted_values) == 1:
        return sorted_values[0]

    pos = (len(sorted_values) - 1) * q
    lo = int(pos)
    hi = min(lo + 1, len(sorted_values) - 1)
    fraction = pos - lo
    return sorted_values[lo] * (1.0 - fraction) + sorted_values[hi] * fraction


def _to_float_list(rows: list[dict[str, Any]], key: str) -> list[float]:
    values: list[float] = []
    for row in rows:
        value = row.get(key)
        if value is None:
            continue
        numeric = float(value)
        if numeric != numeric:
            continue
        values.append(numeric)
    return values


def _mean(values: list[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def bootstrap_mean_ci(
    values: list[float],
    n_bootstrap: int = BOOTSTRAP_RESAMPLES,
    seed: int = 0,
) -> tuple[float, float]:
    """Percentile bootstrap 95 % CI for the mean of *values*.

    Returns ``(nan, nan)`` when *values* is empty or *n_bootstrap* is zero.
    """
    if not values or n_bootstrap <= 0:
        return float("nan"), float("nan")
    arr = np.asarray(values, dtype=float)
    rng = np.random.default_rng(seed)
    samples = rng.choice(arr, size=(n_bootstrap, arr.size), replace=True)
    means = samples.mean(axis=1)
    lo, hi = np.percentile(means, [2.5, 97.5])
    return float(lo), float(hi)


def result_to_row(result: EpisodeResult, grid_size: int) -> dict[str, Any]:
    """Flatten one episode result into a benchmark-runs row."""
    return {
        "schema_version": AGGREGATE_SCHEMA_VERSION,
        "episode_id": result.episode_id,
        "policy": result.policy,
        "seed": result.seed,
        "grid_size": grid_size,
        "score": result.score,
        "ticks": result.ticks,
        "final_length": result.final_length,
        "survived": result.survived,
        "termination_reason": result.termination_reason,
        "safety_overrides": result.safety_overrides,
    }


def build_policy_summary(policy: str, run_rows: list[dict[str, Any]]) -> dict[str, Any]:
    """Build a per-policy metric summary from benchmark run rows."""
    episodes = len(run_rows)
    survived_count = sum(1 for row in run_rows if bool(row["survived"]))
    reasons: dict[str, int] = {}
    for row in run_rows:
        reason = row.get("termination_reason") or "max_ticks"
        reasons[reason] = reasons.get(reason, 0) + 1

    summary: dict[str, Any] = {
        "schema_version": AGGREGATE_SCHEMA_VERSION,
        "policy": policy,
        "episodes": episodes,
        "survival_rate": (survived_count / episodes) if episodes else 0.0,
        "collision_rate": (reasons.get("collision", 0) / episodes) if episodes else 0.0,
    }

    for metric_name in POLICY_SUMMARY_METRIC_NAMES:
        values = sorted(_to_float_list(run_rows, metric_name))
        summary[f"{metric_name}_mean"] = _mean(values)
        summary[f"{metric_name}_p25"] = _percentile_pre_sorted(values, 0.25)
        summary[f"{metric_name}_p50"] = _percentile_pre_sorted(values, 0.50)
        summary[f"{metric_name}_p75"] = _percentile_pre_sorted(values, 0.75)

    ci_low, ci_high = bootstrap_mean_ci(_to_float_list(run_rows, "score"))
    summary["score_mean_ci_low"] = ci_low
    summary["score_mean_ci_high"] = ci_high
    return summary


def build_policy_comparison(policy_summaries: list[dict[str, Any]]) -> dict[str, Any]:
    """Build cross-policy comparison payload from a list of policy summary rows."""

    def _policy_name(row: dict[str, Any]) -> str:
        name = row.get("policy")
        if not isinstance(name, str):
            raise ValueError("policy summary row missing string 'policy'")
        return name

    payload: dict[str, Any] = {
        "schema_version": AGGREGATE_SCHEMA_VERSION,
        "policies": [_policy_name(row) for row in policy_summaries],
        "pairwise_deltas": [],
    }

    def _row_delta(
        base: dict[str, Any], target: dict[str, Any]
    ) -> dict[str, dict[str, float | None]]:
        deltas: dict[str, dict[str, float | None]] = {}
        for key, target_value in target.items():
            if key in {"policy", "schema_version"}:
                continue
            base_value = base.get(key)
            if isinstance(base_value, bool) or isinstance(target_value, bool):
                continue
            if not isinstance(base_value, (int, float)) or not isinstance(
                target_value, (int, float)
            ):
                continue
            delta_abs = float(target_value) - float(base_value)
            delta_rel = None if float(base_value) == 0.0 else delta_abs / float(base_value)
            deltas[key] = {"absolute": delta_abs, "relative": delta_rel}
        return deltas

    for i in range(len(policy_summaries)):
        for j in range(i + 1, len(policy_summaries)):
            base = policy_summaries[i]
            target = policy_summaries[j]
            payload["pairwise_deltas"].append(
                {
                    "base_policy": _policy_name(base),
                    "target_policy": _policy_name(target),
                    "deltas": _row_delta(base, target),
                }
            )
    return payload


def load_run_rows(runs_path: Path, columns: list[str] | None = None) -> list[dict[str, Any]]:
    """Load benchmark run rows from Parquet, checking required columns."""
    runs_file = pq.ParquetFile(runs_path)
    available_columns = set(runs_file.schema_arrow.names)
    for required_col in ("policy", "score"):
        if required_col not in available_columns:
            raise ValueError(f"benchmark runs parquet missing required column: {required_col}")
    wanted = [col for col in columns if col in available_columns] if columns else None
    return runs_file.read(columns=wanted).to_pylist()
