"""
Content Classifier

Rule-based extraction of decisions, risks, opportunities, action items and
key points from canvas free text. Core of the export pipeline's first stage.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from ..common.schemas import (
    CanvasItem,
    ExtractedContentBundle,
    MetricPair,
    is_strategy_relevant,
)
from .markers import (
    DEFAULT_RULES,
    KEY_POINT_MIN_LENGTH,
    KEY_POINT_TYPES,
    Category,
    MarkerRule,
    is_completed,
)

logger = logging.getLogger("canvas.extractor.classifier")


# Per-category length caps (first N in store order are kept)
CATEGORY_CAPS: Dict[Category, int] = {
    Category.DECISION: 10,
    Category.ACTION: 15,
    Category.RISK: 8,
    Category.OPPORTUNITY: 8,
    Category.KEY_POINT: 10,
}

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_display_date(day: date) -> str:
    """Long US-style date, e.g. 'October 19, 2026'"""
    return f"{_MONTHS[day.month - 1]} {day.day}, {day.year}"


@dataclass
class Classification:
    """Result of classifying a single item"""
    category: Category
    text: str
    completed: bool = False


class ContentClassifier:
    """
    Assigns each item's text to exactly one extraction category.

    Algorithm, per item:
    1. Skip items whose trimmed content is empty
    2. Note completion markers (orthogonal to the category)
    3. Walk the marker rules in order; the first match wins
    4. Fall back to key point for long sticky/text items
    5. Otherwise uncategorized

    The category is independent of the item's declared type except where a
    rule names that type explicitly.
    """

    def __init__(
        self,
        rules: Optional[Sequence[MarkerRule]] = None,
        caps: Optional[Dict[Category, int]] = None,
    ):
        """
        Initialize classifier.

        Args:
            rules: Ordered marker rules (default: risk, opportunity, action, decision)
            caps: Per-category maximum list lengths
        """
        self._rules = list(rules) if rules is not None else list(DEFAULT_RULES)
        self._caps = dict(CATEGORY_CAPS if caps is None else caps)

    def classify_item(self, item: CanvasItem) -> Optional[Classification]:
        """
        Classify a single item.

        Returns:
            Classification, or None if the item has no text
        """
        content = (item.content or "").strip()
        if not content:
            return None

        content_lower = content.lower()
        completed = is_completed(content)

        for rule in self._rules:
            if rule.matches(item.semantic_type, content_lower):
                return Classification(
                    category=rule.category,
                    text=rule.extract(content),
                    completed=completed,
                )

        if item.semantic_type in KEY_POINT_TYPES and len(content) > KEY_POINT_MIN_LENGTH:
            return Classification(category=Category.KEY_POINT, text=content, completed=completed)

        return Classification(category=Category.UNCATEGORIZED, text=content, completed=completed)

    def classify(
        self,
        items: Iterable[CanvasItem],
        title: str = "",
        as_of: Optional[date] = None,
    ) -> ExtractedContentBundle:
        """
        Build the extracted-content bundle for a board.

        Args:
            items: Canvas items in store order
            title: Board name shown in report headers
            as_of: Date shown in report headers (default: today)

        Returns:
            Immutable ExtractedContentBundle
        """
        buckets: Dict[Category, List[str]] = {category: [] for category in CATEGORY_CAPS}
        total_items = 0
        completed_items = 0

        for item in items:
            if is_strategy_relevant(item.semantic_type):
                total_items += 1

            result = self.classify_item(item)
            if result is None:
                continue

            if result.completed:
                completed_items += 1

            bucket = buckets.get(result.category)
            if bucket is not None:
                bucket.append(result.text)

        logger.debug(
            "Classified %d strategy items: %d decisions, %d actions, %d risks, %d opportunities, %d key points",
            total_items,
            len(buckets[Category.DECISION]),
            len(buckets[Category.ACTION]),
            len(buckets[Category.RISK]),
            len(buckets[Category.OPPORTUNITY]),
            len(buckets[Category.KEY_POINT]),
        )

        return ExtractedContentBundle(
            title=title,
            date=format_display_date(as_of or date.today()),
            decisions=self._capped(buckets, Category.DECISION),
            action_items=self._capped(buckets, Category.ACTION),
            risks=self._capped(buckets, Category.RISK),
            opportunities=self._capped(buckets, Category.OPPORTUNITY),
            key_points=self._capped(buckets, Category.KEY_POINT),
            metrics=(
                MetricPair(label="Total Items", value=str(total_items)),
                MetricPair(label="Completed", value=str(completed_items)),
                MetricPair(label="Decisions", value=str(len(buckets[Category.DECISION]))),
                MetricPair(label="Open Risks", value=str(len(buckets[Category.RISK]))),
            ),
            total_items=total_items,
            completed_items=completed_items,
        )

    def _capped(self, buckets: Dict[Category, List[str]], category: Category) -> tuple:
        cap = self._caps.get(category)
        values = buckets[category]
        return tuple(values if cap is None else values[:cap])


_default_classifier = ContentClassifier()


def classify(
    items: Iterable[CanvasItem],
    title: str = "",
    as_of: Optional[date] = None,
) -> ExtractedContentBundle:
    """Classify items with the default rule set"""
    return _default_classifier.classify(items, title=title, as_of=as_of)
