"""
Scorecard - Strategy Execution Metrics

Key Components:
- compute_metrics: Per-board snapshot with weekly windows and a 7-day timeline
- aggregate_snapshots: Sums boards, recomputing ratios from summed counts
- compute_trends / status_distribution / week_comparison: Derived views
- VelocityEstimator: Pluggable decision velocity estimate (placeholder by default)

Decision events are counted with a wider marker set than the extractor's
decision text ("agreed" and the lock glyph also count). The extractor asks
whether text reads as a decision; the scorecard asks whether an item
records a decision event.
"""

from .aggregator import (
    compute_metrics,
    compute_board_metrics,
    aggregate_snapshots,
    compute_trends,
    status_distribution,
    week_comparison,
    start_of_week,
    DAY_LABELS,
)
from .velocity import (
    VelocityEstimator,
    RandomVelocityEstimator,
    FixedVelocityEstimator,
    get_velocity_estimator,
)

__all__ = [
    "compute_metrics",
    "compute_board_metrics",
    "aggregate_snapshots",
    "compute_trends",
    "status_distribution",
    "week_comparison",
    "start_of_week",
    "DAY_LABELS",
    "VelocityEstimator",
    "RandomVelocityEstimator",
    "FixedVelocityEstimator",
    "get_velocity_estimator",
]
