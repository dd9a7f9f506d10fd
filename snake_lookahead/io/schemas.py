"""Parquet schema definitions and summary metric names for benchmark artifacts.

All Arrow schemas used for persisting tick logs, episode results and policy
summaries are centralised here so that every module works against the same
column contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

AGGREGATE_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Episode schemas
# ---------------------------------------------------------------------------

TICK_LOG_SCHEMA = pa.schema(
    [
        ("episode_id", pa.string()),
        ("tick", pa.int64()),
        ("head_x", pa.int64()),
        ("head_y", pa.int64()),
        ("food_x", pa.int64()),
        ("food_y", pa.int64()),
        ("length", pa.int64()),
        ("direction", pa.string()),
        ("decision_status", pa.string()),
        ("path_length", pa.int64()),
        ("chosen_score", pa.float64()),
        ("chosen_reachable", pa.int64()),
        ("safety_override", pa.bool_()),
        ("ate_food", pa.bool_()),
    ]
)

EPISODE_SCHEMA = pa.schema(
    [
        ("episode_id", pa.string()),
        ("policy", pa.string()),
        ("seed", pa.int64()),
        ("score", pa.int64()),
        ("ticks", pa.int64()),
        ("final_length", pa.int64()),
        ("survived", pa.bool_()),
        ("termination_reason", pa.string()),
        ("safety_overrides", pa.int64()),
    ]
)

BENCHMARK_RUNS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("episode_id", pa.string()),
        ("policy", pa.string()),
        ("seed", pa.int64()),
        ("grid_size", pa.int64()),
        ("score", pa.int64()),
        ("ticks", pa.int64()),
        ("final_length", pa.int64()),
        ("survived", pa.bool_()),
        ("termination_reason", pa.string()),
        ("safety_overrides", pa.int64()),
    ]
)

# Single source of truth for per-policy summary metric names.
POLICY_SUMMARY_METRIC_NAMES = [
    "score",
    "ticks",
    "final_length",
    "safety_overrides",
]
