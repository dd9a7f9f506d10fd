"""Figure helpers for benchmark artifacts."""

from snake_lookahead.viz.plots import load_scores, plot_score_distribution

__all__ = ["load_scores", "plot_score_distribution"]
