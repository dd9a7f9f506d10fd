"""Benchmark figures: per-policy episode score distributions."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from snake_lookahead.experiments.summaries import load_run_rows  # noqa: E402


def load_scores(runs_path: Path) -> dict[str, np.ndarray]:
    """Load benchmark runs parquet; return one score array per policy, in first-seen order."""
    grouped: dict[str, list[int]] = {}
    for row in load_run_rows(runs_path, columns=["policy", "score"]):
        grouped.setdefault(row["policy"], []).append(row["score"])
    return {policy: np.asarray(values, dtype=np.int64) for policy, values in grouped.items()}


def plot_score_distribution(
    runs_path: Path,
    out_path: Path,
    title: str | None = None,
    return_fig: bool = False,
) -> plt.Figure | None:
    """Box plot of episode scores per policy, with individual episodes overlaid.

    Parameters
    ----------
    return_fig:
        If True, return the figure instead of closing it (for testing).
    """
    scores = load_scores(runs_path)
    if not scores:
        raise ValueError(f"no benchmark runs found in {runs_path}")
    labels = list(scores)
    data = [scores[label] for label in labels]

    fig, ax = plt.subplots(figsize=(max(4, 2 * len(labels)), 4))
    ax.boxplot(data, showmeans=True)
    ax.set_xticks(np.arange(1, len(labels) + 1), labels)
    for i, values in enumerate(data, start=1):
        # Deterministic horizontal spread so identical scores stay visible
        offsets = np.linspace(-0.15, 0.15, num=max(len(values), 1))
        ax.scatter(np.full(len(values), i) + offsets, values, s=10, alpha=0.5, color="tab:gray")

    ax.set_xlabel("Policy")
    ax.set_ylabel("Food eaten per episode")
    n_episodes = max(len(values) for values in data)
    ax.set_title(title or f"Episode scores ($N={n_episodes}$ episodes per policy)")

    fig.tight_layout()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight")
    if return_fig:
        return fig
    plt.close(fig)
    return None
