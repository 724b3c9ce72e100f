"""
Metrics Aggregator

Execution metrics for strategy boards: completion ratios, this-week vs.
last-week activity, goal tracking and a 7-day activity timeline.

"now" is always passed in explicitly; nothing in here reads the clock.
"""

import logging
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from ..common.schemas import (
    Board,
    BoardMetricsSnapshot,
    CanvasItem,
    PeriodTrends,
    SemanticType,
    StatusSlice,
    TimelineDay,
    WeekComparison,
    is_strategy_relevant,
)
from ..common.schemas.bundle import round_half_up
from ..extractor.markers import is_completed, is_decision_event, is_goal
from .velocity import RandomVelocityEstimator, VelocityEstimator

logger = logging.getLogger("canvas.scorecard.aggregator")

TIMELINE_DAYS = 7

# Indexed by date.weekday()
DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def start_of_week(now: datetime) -> datetime:
    """Most recent Sunday (day index 0) at local midnight"""
    days_since_sunday = (now.weekday() + 1) % 7
    start = now - timedelta(days=days_since_sunday)
    return start.replace(hour=0, minute=0, second=0, microsecond=0)


def timeline_dates(now: datetime) -> List[date]:
    """The 7 calendar days ending today, oldest first"""
    today = now.date()
    return [today - timedelta(days=offset) for offset in range(TIMELINE_DAYS - 1, -1, -1)]


def empty_timeline(now: datetime) -> List[TimelineDay]:
    return [TimelineDay(date=DAY_LABELS[d.weekday()]) for d in timeline_dates(now)]


def _align(timestamp: datetime, now: datetime) -> datetime:
    """Express an item timestamp in the same clock as `now` (naive means local time)"""
    if now.tzinfo is None:
        if timestamp.tzinfo is None:
            return timestamp
        return timestamp.astimezone().replace(tzinfo=None)
    return timestamp.astimezone(now.tzinfo)


def compute_metrics(
    items: Iterable[CanvasItem],
    now: datetime,
    board_id: str = "",
    board_name: str = "",
    estimator: Optional[VelocityEstimator] = None,
) -> BoardMetricsSnapshot:
    """
    Compute the metrics snapshot for one board.

    Totals, completion, decisions, goals and weekly counts cover
    strategy-relevant items only; nodes_by_type and the activity timeline
    cover every item. Items without a timestamp are left out of the weekly
    counts and the timeline but still count toward the totals.

    Args:
        items: Canvas items in store order
        now: Reference time for week boundaries and the timeline
        board_id: Board id carried into the snapshot
        board_name: Board name carried into the snapshot
        estimator: Decision velocity estimator (default: random placeholder)

    Returns:
        BoardMetricsSnapshot
    """
    estimator = estimator or RandomVelocityEstimator()

    this_week_start = start_of_week(now)
    last_week_start = this_week_start - timedelta(days=7)

    days = timeline_dates(now)
    day_index = {d: i for i, d in enumerate(days)}
    timeline = [TimelineDay(date=DAY_LABELS[d.weekday()]) for d in days]

    nodes_by_type: Dict[str, int] = {}
    total_items = 0
    completed_items = 0
    decisions_count = 0
    goals_tracked = 0
    goals_completed = 0
    risk_items = 0
    action_items = 0
    actions_completed = 0
    weekly_created = 0
    weekly_completed = 0
    last_week_created = 0
    last_week_completed = 0

    for item in items:
        type_key = item.type_name or item.semantic_type.value
        nodes_by_type[type_key] = nodes_by_type.get(type_key, 0) + 1

        content = item.content or ""
        completed = is_completed(content)
        timestamp = _align(item.created_at, now) if item.created_at is not None else None

        if timestamp is not None:
            i = day_index.get(timestamp.date())
            if i is not None:
                timeline[i].created += 1
                if completed:
                    timeline[i].completed += 1

        if not is_strategy_relevant(item.semantic_type):
            continue

        total_items += 1
        if completed:
            completed_items += 1

        if item.semantic_type == SemanticType.RISK:
            risk_items += 1
        if item.semantic_type == SemanticType.ACTION:
            action_items += 1
            if completed:
                actions_completed += 1

        if is_decision_event(content):
            decisions_count += 1

        if is_goal(item.semantic_type, content):
            goals_tracked += 1
            if completed:
                goals_completed += 1

        if timestamp is not None:
            if timestamp >= this_week_start:
                weekly_created += 1
                if completed:
                    weekly_completed += 1
            elif last_week_start <= timestamp < this_week_start:
                last_week_created += 1
                if completed:
                    last_week_completed += 1

    logger.debug(
        "Board %s: %d/%d completed, %d decisions, %d this week, %d last week",
        board_id or "(unnamed)", completed_items, total_items,
        decisions_count, weekly_created, last_week_created,
    )

    return BoardMetricsSnapshot(
        board_id=board_id,
        board_name=board_name,
        total_items=total_items,
        completed_items=completed_items,
        completion_ratio=completed_items / total_items if total_items > 0 else 0.0,
        decisions_count=decisions_count,
        avg_decision_velocity_days=estimator.estimate(decisions_count),
        goals_tracked=goals_tracked,
        goals_completed=goals_completed,
        risk_items=risk_items,
        action_items=action_items,
        actions_completed=actions_completed,
        weekly_created=weekly_created,
        weekly_completed=weekly_completed,
        last_week_created=last_week_created,
        last_week_completed=last_week_completed,
        nodes_by_type=nodes_by_type,
        activity_timeline=timeline,
    )


def compute_board_metrics(
    board: Board,
    now: datetime,
    estimator: Optional[VelocityEstimator] = None,
) -> BoardMetricsSnapshot:
    return compute_metrics(
        board.items, now, board_id=board.id, board_name=board.name, estimator=estimator,
    )


_SUMMED_FIELDS = (
    "total_items",
    "completed_items",
    "decisions_count",
    "goals_tracked",
    "goals_completed",
    "risk_items",
    "action_items",
    "actions_completed",
    "weekly_created",
    "weekly_completed",
    "last_week_created",
    "last_week_completed",
)


def aggregate_snapshots(
    snapshots: Sequence[BoardMetricsSnapshot],
    now: datetime,
    estimator: Optional[VelocityEstimator] = None,
    board_id: str = "all",
    board_name: str = "All Boards",
) -> BoardMetricsSnapshot:
    """
    Sum several board snapshots into one.

    Counts are summed; completion_ratio is recomputed from the summed
    numerator and denominator (never averaged); timelines are summed day by
    day; decision velocity is re-estimated from the summed decision count.
    All snapshots are assumed to share the same `now`, which is also used to
    label the timeline when there are no snapshots.
    """
    estimator = estimator or RandomVelocityEstimator()

    totals = {name: sum(getattr(s, name) for s in snapshots) for name in _SUMMED_FIELDS}

    nodes_by_type: Counter = Counter()
    for snapshot in snapshots:
        nodes_by_type.update(snapshot.nodes_by_type)

    if snapshots and snapshots[0].activity_timeline:
        labels = [day.date for day in snapshots[0].activity_timeline]
    else:
        labels = [day.date for day in empty_timeline(now)]

    timeline = []
    for i, label in enumerate(labels):
        created = 0
        completed = 0
        for snapshot in snapshots:
            if i < len(snapshot.activity_timeline):
                created += snapshot.activity_timeline[i].created
                completed += snapshot.activity_timeline[i].completed
        timeline.append(TimelineDay(date=label, created=created, completed=completed))

    total_items = totals["total_items"]
    completed_items = totals["completed_items"]

    return BoardMetricsSnapshot(
        board_id=board_id,
        board_name=board_name,
        completion_ratio=completed_items / total_items if total_items > 0 else 0.0,
        avg_decision_velocity_days=estimator.estimate(totals["decisions_count"]),
        nodes_by_type=dict(nodes_by_type),
        activity_timeline=timeline,
        **totals,
    )


def _percent_change(current: int, previous: int) -> int:
    if previous <= 0:
        return 0
    return round_half_up((current - previous) / previous * 100)


def compute_trends(snapshot: BoardMetricsSnapshot) -> PeriodTrends:
    """Completion percentage plus this-week vs. last-week changes"""
    completion_pct = 0
    if snapshot.total_items > 0:
        completion_pct = round_half_up(snapshot.completed_items / snapshot.total_items * 100)

    return PeriodTrends(
        completion_pct=completion_pct,
        weekly_trend_pct=_percent_change(snapshot.weekly_created, snapshot.last_week_created),
        completion_trend_pct=_percent_change(snapshot.weekly_completed, snapshot.last_week_completed),
    )


def status_distribution(snapshot: BoardMetricsSnapshot) -> List[StatusSlice]:
    """Completed / In Progress / At Risk split; empty slices are dropped"""
    in_progress = max(0, snapshot.total_items - snapshot.completed_items - snapshot.risk_items)
    slices = [
        StatusSlice(name="Completed", value=snapshot.completed_items),
        StatusSlice(name="In Progress", value=in_progress),
        StatusSlice(name="At Risk", value=snapshot.risk_items),
    ]
    return [s for s in slices if s.value > 0]


def week_comparison(snapshot: BoardMetricsSnapshot) -> List[WeekComparison]:
    return [
        WeekComparison(
            name="Last Week",
            created=snapshot.last_week_created,
            completed=snapshot.last_week_completed,
        ),
        WeekComparison(
            name="This Week",
            created=snapshot.weekly_created,
            completed=snapshot.weekly_completed,
        ),
    ]
