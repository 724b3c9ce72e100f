"""
Tests for the Report Renderer

Tests the email, slides and newsletter formats, section toggles,
render-time caps and export file naming.
"""

import pytest

from insights.common.schemas import (
    ExportConfig,
    ExportFormat,
    ExtractedContentBundle,
    MetricPair,
    TemplateType,
)


def _metrics(total, completed, decisions, risks):
    return (
        MetricPair(label="Total Items", value=str(total)),
        MetricPair(label="Completed", value=str(completed)),
        MetricPair(label="Decisions", value=str(decisions)),
        MetricPair(label="Open Risks", value=str(risks)),
    )


@pytest.fixture
def bundle():
    return ExtractedContentBundle(
        title="Q3 Planning",
        date="October 19, 2026",
        decisions=("Launch in Q3", "Hire two PMs"),
        action_items=("Draft memo",),
        risks=("Vendor lock-in",),
        opportunities=("Reseller channel",),
        key_points=("Customers love onboarding",),
        metrics=_metrics(4, 1, 2, 1),
        total_items=4,
        completed_items=1,
    )


class TestEmail:
    """Tests for HTML email rendering"""

    def test_subject_and_greeting_follow_template(self, bundle):
        from insights.exporter import render

        html = render(bundle, ExportConfig(template=TemplateType.BOARD_REPORT))

        assert "Board Report: Q3 Planning — October 19, 2026" in html
        assert "Dear Board Members," in html

    def test_team_update_uses_default_greeting(self, bundle):
        from insights.exporter import render

        html = render(bundle, ExportConfig(template=TemplateType.TEAM_UPDATE))

        assert "Hi Team," in html
        assert "Strategy Update: Q3 Planning" in html

    def test_sections_in_order(self, bundle):
        from insights.exporter import render

        html = render(bundle, ExportConfig())
        positions = [
            html.index("Overall progress"),
            html.index("📌 Key Decisions"),
            html.index("✅ Action Items"),
            html.index("Risks &amp; Concerns"),
            html.index("💡 Opportunities"),
            html.index("Generated from Q3 Planning"),
        ]

        assert positions == sorted(positions)
        assert "<strong>25% complete</strong>" in html

    def test_toggles_hide_sections(self, bundle):
        from insights.exporter import render

        config = ExportConfig(
            include_metrics=False,
            include_decisions=False,
            include_action_items=False,
            include_risks=False,
        )
        html = render(bundle, config)

        assert "Overall progress" not in html
        assert "Key Decisions" not in html
        assert "Action Items" not in html
        assert "Risks" not in html
        assert "💡 Opportunities" in html

    def test_content_is_escaped(self):
        from insights.exporter import render

        bundle = ExtractedContentBundle(title="R&D <Board>", decisions=("Use <b>bold</b>",))
        html = render(bundle, ExportConfig())

        assert "R&amp;D &lt;Board&gt;" in html
        assert "Use &lt;b&gt;bold&lt;/b&gt;" in html
        assert "<b>bold</b>" not in html

    def test_is_single_container(self, bundle):
        from insights.exporter import render

        html = render(bundle, ExportConfig())

        assert html.startswith("<div")
        assert html.endswith("</div>")


class TestSlides:
    """Tests for Markdown slide outlines"""

    def test_header_and_metrics_table(self, bundle):
        from insights.exporter import render

        md = render(bundle, ExportConfig(format=ExportFormat.SLIDES))

        assert md.startswith("# Q3 Planning\n### Strategic Update — October 19, 2026\n\n---\n\n")
        assert "| Total Items | **4** |" in md
        assert "| Completion | **25%** |" in md

    def test_action_items_are_checkboxes(self, bundle):
        from insights.exporter import render

        md = render(bundle, ExportConfig(format=ExportFormat.SLIDES))

        assert "- [ ] Draft memo" in md

    def test_next_steps_always_present(self):
        from insights.exporter import render

        md = render(ExtractedContentBundle(title="Empty"), ExportConfig(format=ExportFormat.SLIDES))

        assert "## 🔮 Next Steps" in md
        assert "- Address identified risks" in md
        assert "Key Metrics" not in md
        assert md.rstrip().endswith("*Generated from Empty · Strategic Canvas*")

    def test_template_is_ignored(self, bundle):
        from insights.exporter import render

        a = render(bundle, ExportConfig(format=ExportFormat.SLIDES, template=TemplateType.BOARD_REPORT))
        b = render(bundle, ExportConfig(format=ExportFormat.SLIDES, template=TemplateType.TEAM_UPDATE))

        assert a == b


class TestNewsletter:
    """Tests for narrative newsletter drafts"""

    def test_big_picture(self, bundle):
        from insights.exporter import render

        md = render(bundle, ExportConfig(format=ExportFormat.NEWSLETTER))

        assert "## The Big Picture" in md
        assert "We're 25% through our current strategic cycle with 4 items tracked" in md
        assert "**2 key decisions**" in md

    def test_singular_decision(self):
        from insights.exporter import render

        bundle = ExtractedContentBundle(decisions=("Go",), metrics=_metrics(1, 0, 1, 0), total_items=1)
        md = render(bundle, ExportConfig(format=ExportFormat.NEWSLETTER))

        assert "**1 key decision**" in md

    def test_no_decisions_lead(self):
        from insights.exporter import render

        md = render(ExtractedContentBundle(), ExportConfig(format=ExportFormat.NEWSLETTER))

        assert "The team continues to make progress" in md
        assert "What We've Decided" not in md

    def test_render_time_caps(self):
        from insights.exporter import render

        bundle = ExtractedContentBundle(
            decisions=tuple(f"d{i}" for i in range(8)),
            key_points=tuple(f"k{i}" for i in range(8)),
            risks=tuple(f"r{i}" for i in range(8)),
            opportunities=tuple(f"o{i}" for i in range(8)),
        )
        md = render(bundle, ExportConfig(format=ExportFormat.NEWSLETTER))

        assert md.count("→ ") == 5
        assert md.count("\n- k") == 5
        assert md.count("⚡ ") == 3
        assert md.count("💡 o") == 3
        # Headline count reflects the bundle, not the render cap
        assert "**8 key decisions**" in md

    def test_risks_follow_toggle(self, bundle):
        from insights.exporter import render

        md = render(bundle, ExportConfig(format=ExportFormat.NEWSLETTER, include_risks=False))

        assert "On Our Radar" not in md
        assert "What We've Decided" in md


class TestRender:
    """Tests for dispatch and purity"""

    def test_render_is_deterministic(self, bundle):
        from insights.exporter import render

        for export_format in ExportFormat:
            config = ExportConfig(format=export_format)
            assert render(bundle, config) == render(bundle, config)

    def test_tone_and_timeline_are_inert(self, bundle):
        from insights.exporter import render
        from insights.common.schemas import Tone

        base = render(bundle, ExportConfig())
        assert render(bundle, ExportConfig(tone=Tone.CASUAL, include_timeline=True)) == base

    def test_config_accepts_camel_case_keys(self, bundle):
        from insights.exporter import render

        config = ExportConfig.model_validate({"includeMetrics": False, "includeDecisions": False})

        assert config.include_metrics is False
        assert config.include_decisions is False
        assert "Key Decisions" not in render(bundle, config)

    def test_bundle_unchanged(self, bundle):
        from insights.exporter import render

        before = bundle.model_dump()
        render(bundle, ExportConfig(format=ExportFormat.NEWSLETTER))

        assert bundle.model_dump() == before


class TestExportNaming:

    def test_filename(self):
        from insights.exporter import export_filename

        assert export_filename("Q3  Planning Board", ExportFormat.EMAIL) == "q3-planning-board-update.html"
        assert export_filename("Roadmap", ExportFormat.SLIDES) == "roadmap-update.md"
        assert export_filename("Roadmap", ExportFormat.NEWSLETTER) == "roadmap-update.md"

    def test_mime_type(self):
        from insights.exporter import export_mime_type

        assert export_mime_type(ExportFormat.EMAIL) == "text/html"
        assert export_mime_type(ExportFormat.SLIDES) == "text/markdown"
