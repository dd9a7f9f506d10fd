"""Multi-policy benchmark orchestration."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from snake_lookahead.config.constants import MAX_BENCHMARK_WORK_UNITS
from snake_lookahead.config.types import BenchmarkConfig, EpisodeResult
from snake_lookahead.experiments.summaries import (
    build_policy_comparison,
    build_policy_summary,
    result_to_row,
)
from snake_lookahead.io.paths import (
    benchmark_runs_path,
    logs_dir,
    policy_comparison_path,
    policy_dir,
    policy_summary_path,
)
from snake_lookahead.io.schemas import BENCHMARK_RUNS_SCHEMA
from snake_lookahead.simulation.engine import run_episodes

logger = logging.getLogger(__name__)


def run_benchmark(config: BenchmarkConfig) -> list[EpisodeResult]:
    """Run every policy over the same seeds and persist aggregate artifacts."""
    if config.total_work_units() > MAX_BENCHMARK_WORK_UNITS:
        raise ValueError(
            "benchmark workload exceeds safety threshold; reduce policies/n_episodes/max_ticks"
        )
    out_dir = Path(config.out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    episode_config = config.episode_config()
    policy_config = config.policy_config()

    all_results: list[EpisodeResult] = []
    run_rows: list[dict[str, object]] = []
    policy_summaries: list[dict[str, object]] = []

    for policy in config.policies:
        logger.info("benchmarking policy %s over %d episodes", policy.value, config.n_episodes)
        results = run_episodes(
            n_episodes=config.n_episodes,
            policy=policy,
            out_dir=policy_dir(out_dir, policy.value),
            base_seed=config.base_seed,
            episode_config=episode_config,
            policy_config=policy_config,
        )
        all_results.extend(results)

        current_policy_rows = [result_to_row(r, config.grid_size) for r in results]
        run_rows.extend(current_policy_rows)
        policy_summaries.append(build_policy_summary(policy.value, current_policy_rows))

    pq.write_table(
        pa.Table.from_pylist(run_rows, schema=BENCHMARK_RUNS_SCHEMA), benchmark_runs_path(out_dir)
    )
    pq.write_table(pa.Table.from_pylist(policy_summaries), policy_summary_path(out_dir))
    comparison = build_policy_comparison(policy_summaries)
    policy_comparison_path(out_dir).write_text(json.dumps(comparison, ensure_ascii=False, indent=2))

    return all_results
