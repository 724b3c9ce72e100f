"""
Export Configuration

Per-request rendering options. Built fresh for every render, never stored.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ExportFormat(str, Enum):
    """Output artifact formats"""
    EMAIL = "email"
    SLIDES = "slides"
    NEWSLETTER = "newsletter"


class TemplateType(str, Enum):
    """Email audience templates (ignored by slides and newsletter)"""
    EXECUTIVE_SUMMARY = "executive_summary"
    TEAM_UPDATE = "team_update"
    BOARD_REPORT = "board_report"
    INVESTOR_UPDATE = "investor_update"


class Tone(str, Enum):
    """Writing tone. Accepted and carried through, but does not alter output yet."""
    FORMAL = "formal"
    CASUAL = "casual"
    CONCISE = "concise"


class ExportConfig(BaseModel):
    """
    Rendering options for a single export.

    Opportunities and key points are always rendered when present; the
    include_* toggles cover the remaining sections. include_timeline and
    tone are recognized options with no effect on the rendered text.
    Accepts camelCase keys (includeMetrics, includeActionItems...) as well
    as snake_case.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    format: ExportFormat = ExportFormat.EMAIL
    template: TemplateType = TemplateType.EXECUTIVE_SUMMARY
    include_metrics: bool = True
    include_decisions: bool = True
    include_action_items: bool = True
    include_risks: bool = True
    include_timeline: bool = False
    tone: Tone = Tone.FORMAL
