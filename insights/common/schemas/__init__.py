"""
Canvas Insights Schemas

Canvas items in, extracted bundles and metric snapshots out.
"""

from .canvas_item import (
    CanvasItem,
    Board,
    SemanticType,
    STRATEGY_TYPES,
    is_strategy_relevant,
)
from .bundle import ExtractedContentBundle, MetricPair
from .scorecard import (
    BoardMetricsSnapshot,
    TimelineDay,
    PeriodTrends,
    StatusSlice,
    WeekComparison,
)
from .export_config import ExportConfig, ExportFormat, TemplateType, Tone

__all__ = [
    "CanvasItem",
    "Board",
    "SemanticType",
    "STRATEGY_TYPES",
    "is_strategy_relevant",
    "ExtractedContentBundle",
    "MetricPair",
    "BoardMetricsSnapshot",
    "TimelineDay",
    "PeriodTrends",
    "StatusSlice",
    "WeekComparison",
    "ExportConfig",
    "ExportFormat",
    "TemplateType",
    "Tone",
]
