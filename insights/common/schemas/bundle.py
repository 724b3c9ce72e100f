"""
Extracted Content Bundle

Structured facts pulled out of a board's free text. Built once by the
classifier and treated as immutable by every renderer.
"""

import math
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MetricPair(BaseModel):
    """A (label, value) pair shown in report headers"""
    model_config = ConfigDict(frozen=True)

    label: str
    value: str


class ExtractedContentBundle(BaseModel):
    """
    Output of the classifier.

    Category sequences keep store order and are already length-capped.
    `title` and `date` feed report headers and subject lines.
    Serialises with camelCase keys (actionItems, keyPoints, totalItems...).
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    date: str = ""
    decisions: Tuple[str, ...] = ()
    action_items: Tuple[str, ...] = ()
    risks: Tuple[str, ...] = ()
    opportunities: Tuple[str, ...] = ()
    key_points: Tuple[str, ...] = ()
    metrics: Tuple[MetricPair, ...] = ()
    total_items: int = Field(default=0, ge=0)
    completed_items: int = Field(default=0, ge=0)

    @property
    def completion_pct(self) -> int:
        """round(100 * completed / total), 0 for an empty board"""
        if self.total_items <= 0:
            return 0
        return round_half_up(100 * self.completed_items / self.total_items)


def round_half_up(value: float) -> int:
    """Round half away from zero"""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)
