"""
Export Templates

Literal strings and inline styles for the three export formats.
Greeting and subject lines vary by email template; everything else is shared.
"""

from ..common.schemas import TemplateType


EMAIL_GREETINGS = {
    TemplateType.EXECUTIVE_SUMMARY: "Dear Leadership Team,",
    TemplateType.BOARD_REPORT: "Dear Board Members,",
    TemplateType.INVESTOR_UPDATE: "Dear Investors,",
}
DEFAULT_GREETING = "Hi Team,"

EMAIL_SUBJECTS = {
    TemplateType.EXECUTIVE_SUMMARY: "Executive Summary: {title}",
    TemplateType.BOARD_REPORT: "Board Report: {title} — {date}",
    TemplateType.INVESTOR_UPDATE: "Investor Update: {title}",
}
DEFAULT_SUBJECT = "Strategy Update: {title}"

PRODUCT_NAME = "Strategic Canvas"


# ============================================================================
# Email (HTML)
# ============================================================================

EMAIL_OPEN = (
    '<div style="font-family: -apple-system, BlinkMacSystemFont, \'Segoe UI\', Roboto, sans-serif; '
    'max-width: 640px; margin: 0 auto; padding: 24px; color: #1a1a2e;">'
)
EMAIL_CLOSE = "</div>"

EMAIL_SUBJECT = '<h1 style="font-size: 22px; font-weight: 700; margin-bottom: 4px; color: #1a1a2e;">{subject}</h1>'
EMAIL_DATE = '<p style="color: #64748b; font-size: 14px; margin-bottom: 24px;">{date}</p>'
EMAIL_PARAGRAPH = '<p style="font-size: 15px; line-height: 1.6; color: #334155;">{text}</p>'

EMAIL_METRICS_INTRO = "Here's a quick snapshot of our strategic progress:"
EMAIL_METRICS_TABLE_OPEN = '<table style="width: 100%; border-collapse: collapse; margin: 16px 0;"><tr>'
EMAIL_METRICS_TABLE_CLOSE = "</tr></table>"
EMAIL_METRIC_CELL = (
    '<td style="text-align: center; padding: 12px; background: #f8fafc; border: 1px solid #e2e8f0; border-radius: 8px;">'
    '<div style="font-size: 24px; font-weight: 700; color: #6366f1;">{value}</div>'
    '<div style="font-size: 12px; color: #64748b; margin-top: 4px;">{label}</div>'
    "</td>"
)
EMAIL_PROGRESS = (
    '<div style="background: #f0f9ff; border-left: 4px solid #6366f1; padding: 12px 16px; margin: 16px 0; border-radius: 0 8px 8px 0;">'
    '<span style="font-size: 14px; color: #334155;">Overall progress: <strong>{pct}% complete</strong></span>'
    "</div>"
)

EMAIL_SECTION_HEADING = (
    '<h2 style="font-size: 16px; font-weight: 600; color: #1a1a2e; margin-top: 24px; margin-bottom: 8px;">{heading}</h2>'
)
EMAIL_LIST_OPEN = '<ul style="padding-left: 20px; line-height: 1.8; color: #334155;">'
EMAIL_LIST_CLOSE = "</ul>"
EMAIL_LIST_ITEM = '<li style="margin-bottom: 4px;">{text}</li>'

EMAIL_FOOTER = (
    '<hr style="border: none; border-top: 1px solid #e2e8f0; margin: 24px 0;" />'
    '<p style="font-size: 13px; color: #94a3b8;">Generated from {title} · ' + PRODUCT_NAME + "</p>"
)


# ============================================================================
# Section headings (email and slides)
# ============================================================================

HEADING_METRICS = "📊 Key Metrics"
HEADING_DECISIONS = "📌 Key Decisions"
HEADING_ACTIONS = "✅ Action Items"
HEADING_RISKS_EMAIL = "⚠️ Risks & Concerns"
HEADING_RISKS_SLIDES = "⚠️ Risks"
HEADING_OPPORTUNITIES = "💡 Opportunities"
HEADING_NEXT_STEPS = "🔮 Next Steps"


# ============================================================================
# Slides (Markdown outline)
# ============================================================================

SLIDES_HEADER = """# {title}
### Strategic Update — {date}

---

"""
SLIDE_SEPARATOR = "\n---\n\n"

SLIDES_NEXT_STEPS = (
    "Review priorities for the upcoming sprint",
    "Address identified risks",
    "Follow up on pending action items",
)

SLIDES_FOOTER = "*Generated from {title} · " + PRODUCT_NAME + "*\n"


# ============================================================================
# Newsletter (narrative Markdown)
# ============================================================================

NEWSLETTER_HEADER = """# {title} — Strategy Update

*{date}*

"""
NEWSLETTER_BIG_PICTURE = (
    "## The Big Picture\n\n"
    "We're {pct}% through our current strategic cycle with {tracked} items tracked across our canvas. "
)
NEWSLETTER_DECISIONS_LEAD = "This period, we've made **{count} key {noun}** that shape our direction forward.\n\n"
NEWSLETTER_NO_DECISIONS_LEAD = "The team continues to make progress on our strategic initiatives.\n\n"

NEWSLETTER_DECISIONS_HEADING = "## What We've Decided\n\n"
NEWSLETTER_HIGHLIGHTS_HEADING = "## Key Highlights\n\n"
NEWSLETTER_RISKS_HEADING = "## On Our Radar\n\n"
NEWSLETTER_OPPORTUNITIES_HEADING = "## Opportunities Ahead\n\n"

NEWSLETTER_DECISION_BULLET = "→ {text}\n\n"
NEWSLETTER_HIGHLIGHT_BULLET = "- {text}\n"
NEWSLETTER_RISK_BULLET = "⚡ {text}\n\n"
NEWSLETTER_OPPORTUNITY_BULLET = "💡 {text}\n\n"

NEWSLETTER_FOOTER = (
    "---\n\n"
    "*This update was generated from our strategic planning canvas. "
    "For the full interactive view, visit the " + PRODUCT_NAME + " workspace.*\n"
)

# Render-time caps, independent of the bundle's own caps
NEWSLETTER_MAX_DECISIONS = 5
NEWSLETTER_MAX_HIGHLIGHTS = 5
NEWSLETTER_MAX_RISKS = 3
NEWSLETTER_MAX_OPPORTUNITIES = 3
