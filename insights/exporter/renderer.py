"""
Report Renderer

Renders an ExtractedContentBundle into a stakeholder email (HTML), a slide
deck outline (Markdown) or a newsletter draft (Markdown prose).

render() is a pure function of (bundle, config): no clock, no I/O, and the
bundle is never modified.
"""

import html
import re
from typing import Callable, Dict, List, Sequence

from ..common.schemas import ExportConfig, ExportFormat, ExtractedContentBundle
from . import templates as t


def _email_list(heading: str, values: Sequence[str]) -> str:
    parts = [t.EMAIL_SECTION_HEADING.format(heading=heading), t.EMAIL_LIST_OPEN]
    parts.extend(t.EMAIL_LIST_ITEM.format(text=html.escape(v)) for v in values)
    parts.append(t.EMAIL_LIST_CLOSE)
    return "".join(parts)


def render_email(bundle: ExtractedContentBundle, config: ExportConfig) -> str:
    """Self-contained HTML email; greeting and subject follow config.template"""
    title = html.escape(bundle.title)
    date = html.escape(bundle.date)
    greeting = t.EMAIL_GREETINGS.get(config.template, t.DEFAULT_GREETING)
    subject = t.EMAIL_SUBJECTS.get(config.template, t.DEFAULT_SUBJECT).format(title=title, date=date)

    parts: List[str] = [
        t.EMAIL_OPEN,
        t.EMAIL_SUBJECT.format(subject=subject),
        t.EMAIL_DATE.format(date=date),
        t.EMAIL_PARAGRAPH.format(text=greeting),
    ]

    if config.include_metrics and bundle.total_items > 0 and bundle.metrics:
        parts.append(t.EMAIL_PARAGRAPH.format(text=html.escape(t.EMAIL_METRICS_INTRO)))
        parts.append(t.EMAIL_METRICS_TABLE_OPEN)
        for metric in bundle.metrics:
            parts.append(t.EMAIL_METRIC_CELL.format(
                value=html.escape(metric.value),
                label=html.escape(metric.label),
            ))
        parts.append(t.EMAIL_METRICS_TABLE_CLOSE)
        parts.append(t.EMAIL_PROGRESS.format(pct=bundle.completion_pct))

    if config.include_decisions and bundle.decisions:
        parts.append(_email_list(t.HEADING_DECISIONS, bundle.decisions))

    if config.include_action_items and bundle.action_items:
        parts.append(_email_list(t.HEADING_ACTIONS, bundle.action_items))

    if config.include_risks and bundle.risks:
        parts.append(_email_list(html.escape(t.HEADING_RISKS_EMAIL), bundle.risks))

    if bundle.opportunities:
        parts.append(_email_list(t.HEADING_OPPORTUNITIES, bundle.opportunities))

    parts.append(t.EMAIL_FOOTER.format(title=title))
    parts.append(t.EMAIL_CLOSE)

    return "".join(parts)


def _slide_list(heading: str, lines: Sequence[str]) -> str:
    body = "".join(f"{line}\n" for line in lines)
    return f"## {heading}\n\n{body}{t.SLIDE_SEPARATOR}"


def render_slides(bundle: ExtractedContentBundle, config: ExportConfig) -> str:
    """Markdown slide outline; each section ends with a separator"""
    parts: List[str] = [t.SLIDES_HEADER.format(title=bundle.title, date=bundle.date)]

    if config.include_metrics and bundle.total_items > 0 and bundle.metrics:
        rows = ["| Metric | Value |", "|--------|-------|"]
        rows.extend(f"| {m.label} | **{m.value}** |" for m in bundle.metrics)
        rows.append(f"| Completion | **{bundle.completion_pct}%** |")
        parts.append(_slide_list(t.HEADING_METRICS, rows))

    if config.include_decisions and bundle.decisions:
        parts.append(_slide_list(t.HEADING_DECISIONS, [f"- {d}" for d in bundle.decisions]))

    if config.include_action_items and bundle.action_items:
        parts.append(_slide_list(t.HEADING_ACTIONS, [f"- [ ] {a}" for a in bundle.action_items]))

    if config.include_risks and bundle.risks:
        parts.append(_slide_list(t.HEADING_RISKS_SLIDES, [f"- {r}" for r in bundle.risks]))

    if bundle.opportunities:
        parts.append(_slide_list(t.HEADING_OPPORTUNITIES, [f"- {o}" for o in bundle.opportunities]))

    parts.append(_slide_list(t.HEADING_NEXT_STEPS, [f"- {s}" for s in t.SLIDES_NEXT_STEPS]))
    parts.append(t.SLIDES_FOOTER.format(title=bundle.title))

    return "".join(parts)


def render_newsletter(bundle: ExtractedContentBundle, config: ExportConfig) -> str:
    """
    Narrative Markdown draft.

    Decisions and highlights are always included when present; risks follow
    config.include_risks. Each section is capped again at render time.
    """
    tracked = bundle.metrics[0].value if bundle.metrics else "0"
    decision_count = len(bundle.decisions)

    parts: List[str] = [
        t.NEWSLETTER_HEADER.format(title=bundle.title, date=bundle.date),
        t.NEWSLETTER_BIG_PICTURE.format(pct=bundle.completion_pct, tracked=tracked),
    ]

    if decision_count > 0:
        noun = "decision" if decision_count == 1 else "decisions"
        parts.append(t.NEWSLETTER_DECISIONS_LEAD.format(count=decision_count, noun=noun))
        parts.append(t.NEWSLETTER_DECISIONS_HEADING)
        parts.extend(
            t.NEWSLETTER_DECISION_BULLET.format(text=d)
            for d in bundle.decisions[:t.NEWSLETTER_MAX_DECISIONS]
        )
    else:
        parts.append(t.NEWSLETTER_NO_DECISIONS_LEAD)

    if bundle.key_points:
        parts.append(t.NEWSLETTER_HIGHLIGHTS_HEADING)
        parts.extend(
            t.NEWSLETTER_HIGHLIGHT_BULLET.format(text=p)
            for p in bundle.key_points[:t.NEWSLETTER_MAX_HIGHLIGHTS]
        )
        parts.append("\n")

    if config.include_risks and bundle.risks:
        parts.append(t.NEWSLETTER_RISKS_HEADING)
        parts.extend(
            t.NEWSLETTER_RISK_BULLET.format(text=r)
            for r in bundle.risks[:t.NEWSLETTER_MAX_RISKS]
        )

    if bundle.opportunities:
        parts.append(t.NEWSLETTER_OPPORTUNITIES_HEADING)
        parts.extend(
            t.NEWSLETTER_OPPORTUNITY_BULLET.format(text=o)
            for o in bundle.opportunities[:t.NEWSLETTER_MAX_OPPORTUNITIES]
        )

    parts.append(t.NEWSLETTER_FOOTER)

    return "".join(parts)


RENDERERS: Dict[ExportFormat, Callable[[ExtractedContentBundle, ExportConfig], str]] = {
    ExportFormat.EMAIL: render_email,
    ExportFormat.SLIDES: render_slides,
    ExportFormat.NEWSLETTER: render_newsletter,
}


def render(bundle: ExtractedContentBundle, config: ExportConfig) -> str:
    """
    Render the bundle in the format selected by config.format.

    Args:
        bundle: Classifier output
        config: Format, template and section toggles

    Returns:
        Artifact text (HTML for email, Markdown otherwise)
    """
    return RENDERERS[config.format](bundle, config)


def export_filename(board_name: str, export_format: ExportFormat) -> str:
    """Board name with whitespace runs collapsed to hyphens, lower-cased, plus -update.<ext>"""
    ext = "html" if export_format == ExportFormat.EMAIL else "md"
    slug = re.sub(r"\s+", "-", board_name).lower()
    return f"{slug}-update.{ext}"


def export_mime_type(export_format: ExportFormat) -> str:
    return "text/html" if export_format == ExportFormat.EMAIL else "text/markdown"
