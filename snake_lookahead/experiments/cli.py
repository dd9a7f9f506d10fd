"""CLI entrypoint for benchmark execution.

This module owns CLI argument parsing and dispatch. All domain logic lives
in the extracted modules:

- ``snake_lookahead.config``            – configuration dataclasses
- ``snake_lookahead.simulation.engine`` – ``run_episodes`` engine
- ``snake_lookahead.experiments``       – benchmark orchestration and summaries
- ``snake_lookahead.viz``               – score distribution figure
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from snake_lookahead.config.constants import (
    GRID_SIZE,
    LOOKAHEAD_DEPTH,
    MAX_TICKS,
    STARVATION_WINDOW,
)
from snake_lookahead.config.types import BenchmarkConfig, FuturePooling, PolicyKind
from snake_lookahead.experiments.benchmark import run_benchmark
from snake_lookahead.io.paths import benchmark_runs_path, score_plot_path

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_policy(raw_policy: str) -> PolicyKind:
    """Parse CLI policy name into PolicyKind enum."""
    try:
        return PolicyKind(raw_policy)
    except ValueError as exc:
        valid = ", ".join(p.value for p in PolicyKind)
        raise ValueError(f"policy must be one of {valid}") from exc


def _parse_policy_list(raw_policies: str) -> tuple[PolicyKind, ...]:
    """Parse comma-delimited policy list and require distinct entries."""
    parts = [part.strip() for part in raw_policies.split(",") if part.strip()]
    if not parts:
        raise ValueError("policies must not be empty")
    policies = tuple(_parse_policy(part) for part in parts)
    if len(set(policies)) != len(policies):
        raise ValueError("policies must include distinct values")
    return policies


def _parse_pooling(raw_pooling: str) -> FuturePooling:
    """Parse lookahead pooling mode from CLI/config."""
    try:
        return FuturePooling(raw_pooling)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in FuturePooling)
        raise ValueError(f"pooling must be one of {valid}") from exc


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (list, tuple)):
        return ",".join(_coerce_str(item, key) for item in raw)
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="snake-lookahead",
        description="Benchmark snake decision policies on seeded headless games",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--policies",
        type=str,
        default=None,
        help=f"Comma-separated policies ({', '.join(p.value for p in PolicyKind)})",
    )
    parser.add_argument("--n-episodes", type=int, default=None)
    parser.add_argument("--grid-size", type=int, default=None)
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument("--starvation-window", type=int, default=None)
    parser.add_argument("--depth", type=int, default=None, help="Lookahead plies")
    parser.add_argument(
        "--pooling",
        type=str,
        choices=[mode.value for mode in FuturePooling],
        default=None,
    )
    parser.add_argument("--seed", type=int, default=None, help="Base episode seed")
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--plot",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write a score distribution figure",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for benchmark execution.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        policies = _parse_policy_list(
            _get_str(args.policies, "policies", file_cfg, "lookahead,path_first")
        )
        pooling = _parse_pooling(
            _get_str(args.pooling, "pooling", file_cfg, FuturePooling.MAX.value)
        )
        config = BenchmarkConfig(
            policies=policies,
            n_episodes=_get_int(args.n_episodes, "n_episodes", file_cfg, 20),
            out_dir=Path(_get_str(args.out_dir, "out_dir", file_cfg, "data")),
            base_seed=_get_int(args.seed, "seed", file_cfg, 0),
            grid_size=_get_int(args.grid_size, "grid_size", file_cfg, GRID_SIZE),
            max_ticks=_get_int(args.max_ticks, "max_ticks", file_cfg, MAX_TICKS),
            starvation_window=_get_int(
                args.starvation_window, "starvation_window", file_cfg, STARVATION_WINDOW
            ),
            depth=_get_int(args.depth, "depth", file_cfg, LOOKAHEAD_DEPTH),
            pooling=pooling,
        )
        plot = _get_bool(args.plot, "plot", file_cfg, False)
    except ValueError as exc:
        parser.error(str(exc))

    results = run_benchmark(config)

    summary: dict[str, object] = {
        "policies": [p.value for p in config.policies],
        "n_episodes": config.n_episodes,
        "grid_size": config.grid_size,
        "total_episodes": len(results),
        "mean_score": {
            p.value: sum(r.score for r in results if r.policy == p.value) / config.n_episodes
            for p in config.policies
        },
        "survived": sum(1 for r in results if r.survived),
        "collisions": sum(1 for r in results if r.termination_reason == "collision"),
    }
    if plot:
        from snake_lookahead.viz.plots import plot_score_distribution

        figure_path = score_plot_path(config.out_dir)
        plot_score_distribution(benchmark_runs_path(config.out_dir), figure_path)
        summary["figure"] = str(figure_path)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
