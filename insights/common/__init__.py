"""
Canvas Insights Common Module

Shared infrastructure for the extractor, scorecard and exporter.
"""

from .config import CanvasConfig, load_config
from .store import ItemStore, InMemoryBoardStore, JsonBoardStore

__all__ = [
    "CanvasConfig",
    "load_config",
    "ItemStore",
    "InMemoryBoardStore",
    "JsonBoardStore",
]
