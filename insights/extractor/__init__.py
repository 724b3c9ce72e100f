"""
Extractor - Canvas Content Classification

Turns free-text canvas items into structured report content.

Key Components:
- ContentClassifier: Ordered marker-rule classification with per-category caps
- MarkerRule: One (types, markers, prefix) rule; first match wins
- Completion, decision-event and goal predicates shared with the scorecard

Rules:
1. Every non-empty item lands in exactly one category
2. Completion is tracked independently of the category
3. Original casing is kept; only the marker prefix is stripped
4. Malformed items degrade to defaults, never raise
"""

from .classifier import ContentClassifier, Classification, classify, format_display_date, CATEGORY_CAPS
from .markers import (
    Category,
    MarkerRule,
    DEFAULT_RULES,
    is_completed,
    is_decision_event,
    is_goal,
)

__all__ = [
    "ContentClassifier",
    "Classification",
    "classify",
    "format_display_date",
    "CATEGORY_CAPS",
    "Category",
    "MarkerRule",
    "DEFAULT_RULES",
    "is_completed",
    "is_decision_event",
    "is_goal",
]
