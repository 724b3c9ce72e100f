"""
Scorecard Schemas

Execution metrics derived from a board on demand. Never persisted by the
engine; recomputed for every request.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Serialises with camelCase keys for the presentation layer"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimelineDay(_CamelModel):
    """One calendar day of activity"""
    date: str  # Short weekday label, e.g. "Mon"
    created: int = 0
    completed: int = 0


class BoardMetricsSnapshot(_CamelModel):
    """
    Metrics for one board, or several boards summed together.

    activity_timeline always holds exactly 7 days, oldest first.
    completion_ratio is completed_items / total_items (0 when empty).
    """
    board_id: str = ""
    board_name: str = ""
    total_items: int = 0
    completed_items: int = 0
    completion_ratio: float = 0.0
    decisions_count: int = 0
    avg_decision_velocity_days: float = 0.0
    goals_tracked: int = 0
    goals_completed: int = 0
    risk_items: int = 0
    action_items: int = 0
    actions_completed: int = 0
    weekly_created: int = 0
    weekly_completed: int = 0
    last_week_created: int = 0
    last_week_completed: int = 0
    nodes_by_type: Dict[str, int] = Field(default_factory=dict)
    activity_timeline: List[TimelineDay] = Field(default_factory=list)


class PeriodTrends(_CamelModel):
    """This week vs. last week, as whole percentages"""
    completion_pct: int = 0
    weekly_trend_pct: int = 0
    completion_trend_pct: int = 0


class StatusSlice(_CamelModel):
    """One slice of the completed / in progress / at risk distribution"""
    name: str
    value: int


class WeekComparison(_CamelModel):
    name: str
    created: int = 0
    completed: int = 0
