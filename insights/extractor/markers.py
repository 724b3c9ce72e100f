"""
Marker Rules

Ordered classification rules for canvas text. Each rule pairs a set of
declared semantic types and lower-case marker substrings with the prefix
pattern stripped from the extracted text. Rules are evaluated top to
bottom and the first match wins.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Pattern, Tuple

from ..common.schemas import SemanticType


# Glyphs recognised as markers
WARNING_GLYPH = "\u26a0"           # warning sign, with or without VS16
IDEA_GLYPH = "\U0001f4a1"          # light bulb
CHECKBOX_GLYPH = "\u2610"          # ballot box
PIN_GLYPH = "\U0001f4cc"           # pushpin
LOCK_GLYPH = "\U0001f512"          # lock
CHECKMARK_GLYPH = "\u2705"         # heavy check mark
LIGHT_CHECK_GLYPH = "\u2713"       # check mark

_VS16 = "\ufe0f"  # emoji variation selector

COMPLETION_MARKERS: Tuple[str, ...] = (
    CHECKMARK_GLYPH,
    "[done]",
    "[completed]",
    LIGHT_CHECK_GLYPH,
)

# What counts as decision *text* for extraction
DECISION_MARKERS: Tuple[str, ...] = ("decision:", "decided", "approved", PIN_GLYPH)

# What counts as a decision *event* for the scorecard: a superset of the above
DECISION_EVENT_MARKERS: Tuple[str, ...] = DECISION_MARKERS + ("agreed", LOCK_GLYPH)

GOAL_MARKERS: Tuple[str, ...] = ("goal", "objective", "okr")

KEY_POINT_TYPES = frozenset({SemanticType.STICKY, SemanticType.TEXT})
KEY_POINT_MIN_LENGTH = 10


class Category(str, Enum):
    """Extraction category assigned to an item's text"""
    RISK = "risk"
    OPPORTUNITY = "opportunity"
    ACTION = "action"
    DECISION = "decision"
    KEY_POINT = "key_point"
    UNCATEGORIZED = "uncategorized"


@dataclass(frozen=True)
class MarkerRule:
    """
    One classification rule.

    Matches when the item's declared type is in `semantic_types` or its
    lower-cased text contains any of `markers`.
    """
    category: Category
    markers: Tuple[str, ...]
    strip_pattern: Optional[Pattern] = None
    semantic_types: FrozenSet[SemanticType] = field(default_factory=frozenset)

    def matches(self, semantic_type: SemanticType, content_lower: str) -> bool:
        if semantic_type in self.semantic_types:
            return True
        return any(marker in content_lower for marker in self.markers)

    def extract(self, content: str) -> str:
        """Strip the leading category prefix (first occurrence only)"""
        if self.strip_pattern is None:
            return content
        stripped = self.strip_pattern.sub("", content, count=1)
        return stripped or content


def _prefix(*alternatives: str) -> Pattern:
    joined = "|".join(re.escape(a) for a in alternatives)
    return re.compile(rf"^(?:{joined}){_VS16}?\s*", re.IGNORECASE)


DEFAULT_RULES: List[MarkerRule] = [
    MarkerRule(
        category=Category.RISK,
        semantic_types=frozenset({SemanticType.RISK}),
        markers=("risk:", WARNING_GLYPH),
        strip_pattern=_prefix("risk:", WARNING_GLYPH),
    ),
    MarkerRule(
        category=Category.OPPORTUNITY,
        semantic_types=frozenset({SemanticType.OPPORTUNITY}),
        markers=("opportunity:", IDEA_GLYPH),
        strip_pattern=_prefix("opportunity:", IDEA_GLYPH),
    ),
    MarkerRule(
        category=Category.ACTION,
        semantic_types=frozenset({SemanticType.ACTION}),
        markers=("action:", "todo:", CHECKBOX_GLYPH),
        strip_pattern=_prefix("action:", "todo:", CHECKBOX_GLYPH),
    ),
    MarkerRule(
        category=Category.DECISION,
        markers=DECISION_MARKERS,
        strip_pattern=_prefix("decision:", "decided:", PIN_GLYPH),
    ),
]


def contains_any(content_lower: str, markers: Tuple[str, ...]) -> bool:
    return any(marker in content_lower for marker in markers)


def is_completed(content: str) -> bool:
    """True if the text carries any completion marker"""
    return contains_any(content.lower(), COMPLETION_MARKERS)


def is_decision_event(content: str) -> bool:
    return contains_any(content.lower(), DECISION_EVENT_MARKERS)


def is_goal(semantic_type: SemanticType, content: str) -> bool:
    """Goals are sticky notes mentioning a goal, objective or OKR"""
    return semantic_type == SemanticType.STICKY and contains_any(content.lower(), GOAL_MARKERS)
