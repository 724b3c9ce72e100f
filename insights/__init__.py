"""
Canvas Insights

Content classification and reporting engine for strategy canvases.

Philosophy:
- Classification is deterministic: explicit markers and keywords, no inference
- Every stage is a pure function of its inputs (no hidden clock, no caching)
- Degrade gracefully on malformed items, never throw

Usage:
    from insights.common import load_config, JsonBoardStore
    from insights.common.schemas import CanvasItem, ExportConfig
    from insights.extractor import classify
    from insights.scorecard import compute_metrics, aggregate_snapshots
    from insights.exporter import render
"""

__version__ = "0.1.0"
