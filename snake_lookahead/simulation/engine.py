"""Episode engine: seeded headless games driven by a decision policy."""

from __future__ import annotations

import logging
from pathlib import Path
from random import Random

import pyarrow as pa
import pyarrow.parquet as pq

from snake_lookahead.config.constants import FLUSH_THRESHOLD
from snake_lookahead.config.types import (
    EpisodeConfig,
    EpisodeResult,
    PolicyConfig,
    PolicyKind,
    TerminationReason,
)
from snake_lookahead.io.paths import episodes_path, logs_dir, tick_log_path
from snake_lookahead.io.schemas import EPISODE_SCHEMA
from snake_lookahead.planning.policy import Decision, get_policy
from snake_lookahead.simulation.game import SnakeGame
from snake_lookahead.simulation.persistence import (
    TickColumns,
    empty_tick_columns,
    flush_tick_columns,
)

logger = logging.getLogger(__name__)


def _deterministic_episode_id(policy: PolicyKind, seed: int) -> str:
    """Build reproducible episode ID stable across runs for identical seeds."""
    return f"{policy.value}_s{seed}"


def _chosen_evaluation(decision: Decision) -> tuple[float | None, int | None]:
    for evaluation in decision.evaluations:
        if evaluation.direction is decision.direction:
            return evaluation.score, evaluation.reachable
    return None, None


def run_episode(
    policy: PolicyKind,
    seed: int,
    episode_config: EpisodeConfig | None = None,
    policy_config: PolicyConfig | None = None,
    tick_columns: TickColumns | None = None,
) -> EpisodeResult:
    """Play one game until it ends or hits ``max_ticks``.

    When ``tick_columns`` is given, one row per tick is appended to it.
    """
    episode_config = episode_config or EpisodeConfig()
    policy_config = policy_config or PolicyConfig()
    decide_fn = get_policy(policy)
    episode_id = _deterministic_episode_id(policy, seed)

    game = SnakeGame.create(episode_config, Random(seed))
    ticks_since_food = 0
    safety_overrides = 0
    starved = False

    while not game.over and game.ticks < episode_config.max_ticks:
        head = game.head
        food = game.food
        length = len(game.body)
        decision = decide_fn(game.grid, game.body, food, game.direction, policy_config)
        if decision.safety_override:
            safety_overrides += 1
        outcome = game.tick(decision.direction)

        if tick_columns is not None:
            chosen_score, chosen_reachable = _chosen_evaluation(decision)
            row: dict[str, int | str | float | bool | None] = {
                "episode_id": episode_id,
                "tick": game.ticks,
                "head_x": head[0],
                "head_y": head[1],
                "food_x": food[0] if food is not None else None,
                "food_y": food[1] if food is not None else None,
                "length": length,
                "direction": game.direction.name,
                "decision_status": decision.status.value,
                "path_length": len(decision.path),
                "chosen_score": chosen_score,
                "chosen_reachable": chosen_reachable,
                "safety_override": decision.safety_override,
                "ate_food": outcome.ate_food,
            }
            for name, value in row.items():
                tick_columns[name].append(value)

        ticks_since_food = 0 if outcome.ate_food else ticks_since_food + 1
        if not game.over and ticks_since_food >= episode_config.starvation_window:
            starved = True
            break

    reason = TerminationReason.STARVED if starved else game.termination_reason
    result = EpisodeResult(
        episode_id=episode_id,
        policy=policy.value,
        seed=seed,
        score=game.score,
        ticks=game.ticks,
        final_length=len(game.body),
        survived=reason not in (TerminationReason.COLLISION, TerminationReason.STARVED),
        termination_reason=reason.value if reason is not None else None,
        safety_overrides=safety_overrides,
    )
    logger.info(
        "episode %s finished: score=%d ticks=%d reason=%s",
        episode_id,
        result.score,
        result.ticks,
        result.termination_reason,
    )
    return result


def run_episodes(
    n_episodes: int,
    policy: PolicyKind,
    out_dir: Path,
    base_seed: int = 0,
    episode_config: EpisodeConfig | None = None,
    policy_config: PolicyConfig | None = None,
) -> list[EpisodeResult]:
    """Run seeded episodes and persist tick and episode Parquet logs."""
    if n_episodes < 1:
        raise ValueError("n_episodes must be >= 1")

    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    tick_path = tick_log_path(out_dir)

    tick_writer: pq.ParquetWriter | None = None
    tick_columns = empty_tick_columns()
    results: list[EpisodeResult] = []

    try:
        for i in range(n_episodes):
            result = run_episode(
                policy,
                seed=base_seed + i,
                episode_config=episode_config,
                policy_config=policy_config,
                tick_columns=tick_columns,
            )
            results.append(result)
            if len(tick_columns["episode_id"]) >= FLUSH_THRESHOLD:
                tick_writer = flush_tick_columns(tick_columns, tick_path, tick_writer)
        tick_writer = flush_tick_columns(tick_columns, tick_path, tick_writer)
    finally:
        if tick_writer is not None:
            tick_writer.close()

    episode_rows = [
        {
            "episode_id": r.episode_id,
            "policy": r.policy,
            "seed": r.seed,
            "score": r.score,
            "ticks": r.ticks,
            "final_length": r.final_length,
            "survived": r.survived,
            "termination_reason": r.termination_reason,
            "safety_overrides": r.safety_overrides,
        }
        for r in results
    ]
    pq.write_table(
        pa.Table.from_pylist(episode_rows, schema=EPISODE_SCHEMA), episodes_path(out_dir)
    )
    return results
