"""
Tests for Content Classifier

Tests marker-rule precedence, prefix stripping, completion tracking,
category caps and the metrics pairs on the bundle.
"""

import pytest
from datetime import date

from insights.common.schemas import CanvasItem, SemanticType


def _item(content, semantic_type="sticky", item_id="n"):
    return CanvasItem(id=item_id, semantic_type=semantic_type, content=content)


class TestMarkerRules:
    """Tests for individual marker rules and predicates"""

    def test_rule_order_is_risk_opportunity_action_decision(self):
        from insights.extractor import DEFAULT_RULES, Category

        assert [r.category for r in DEFAULT_RULES] == [
            Category.RISK,
            Category.OPPORTUNITY,
            Category.ACTION,
            Category.DECISION,
        ]

    def test_strip_prefix_is_case_insensitive(self):
        from insights.extractor import DEFAULT_RULES

        risk_rule = DEFAULT_RULES[0]
        assert risk_rule.extract("RISK: churn") == "churn"
        assert risk_rule.extract("Risk:churn") == "churn"

    def test_strip_prefix_only_at_start(self):
        from insights.extractor import DEFAULT_RULES

        risk_rule = DEFAULT_RULES[0]
        assert risk_rule.extract("Vendor risk: lock-in") == "Vendor risk: lock-in"

    def test_strip_glyph_with_variation_selector(self):
        from insights.extractor import DEFAULT_RULES

        risk_rule = DEFAULT_RULES[0]
        assert risk_rule.extract("⚠️ Budget overrun") == "Budget overrun"
        assert risk_rule.extract("⚠ Budget overrun") == "Budget overrun"

    def test_strip_leaves_text_when_nothing_remains(self):
        from insights.extractor import DEFAULT_RULES

        assert DEFAULT_RULES[0].extract("Risk:") == "Risk:"

    def test_completion_markers(self):
        from insights.extractor import is_completed

        assert is_completed("Ship beta ✅")
        assert is_completed("Ship beta [DONE]")
        assert is_completed("Ship beta [completed]")
        assert is_completed("✓ Ship beta")
        assert not is_completed("Ship beta")

    def test_decision_event_is_superset_of_decision_text(self):
        from insights.extractor import is_decision_event
        from insights.extractor.markers import DECISION_MARKERS, DECISION_EVENT_MARKERS

        assert set(DECISION_MARKERS) < set(DECISION_EVENT_MARKERS)
        assert is_decision_event("We agreed on pricing")
        assert is_decision_event("\U0001f512 Scope frozen")

    def test_goal_requires_sticky(self):
        from insights.extractor import is_goal

        assert is_goal(SemanticType.STICKY, "Q3 OKR: 50 new logos")
        assert is_goal(SemanticType.STICKY, "Objective: reduce churn")
        assert not is_goal(SemanticType.TEXT, "Goal: reduce churn")


class TestClassifyItem:
    """Tests for single-item classification"""

    @pytest.fixture
    def classifier(self):
        from insights.extractor import ContentClassifier
        return ContentClassifier()

    def test_empty_content_is_skipped(self, classifier):
        assert classifier.classify_item(_item("   ")) is None
        assert classifier.classify_item(_item(None)) is None

    def test_risk_type_wins_without_marker(self, classifier):
        from insights.extractor import Category

        result = classifier.classify_item(_item("Vendor lock-in", semantic_type="risk"))
        assert result.category == Category.RISK
        assert result.text == "Vendor lock-in"

    def test_risk_marker_beats_action_type(self, classifier):
        from insights.extractor import Category

        result = classifier.classify_item(_item("Risk: slipping deadline", semantic_type="action"))
        assert result.category == Category.RISK
        assert result.text == "slipping deadline"

    def test_opportunity_marker(self, classifier):
        from insights.extractor import Category

        result = classifier.classify_item(_item("\U0001f4a1 Partner with resellers"))
        assert result.category == Category.OPPORTUNITY
        assert result.text == "Partner with resellers"

    def test_action_markers(self, classifier):
        from insights.extractor import Category

        for content, expected in [
            ("Action: draft the memo", "draft the memo"),
            ("TODO: call legal", "call legal"),
            ("☐ book venue", "book venue"),
        ]:
            result = classifier.classify_item(_item(content, semantic_type="frame"))
            assert result.category == Category.ACTION
            assert result.text == expected

    def test_decision_keywords(self, classifier):
        from insights.extractor import Category

        for content in ["Decision: go", "We decided to hire", "Budget approved", "\U0001f4cc Pricing v2"]:
            result = classifier.classify_item(_item(content, semantic_type="frame"))
            assert result.category == Category.DECISION

    def test_agreed_is_not_decision_text(self, classifier):
        from insights.extractor import Category

        result = classifier.classify_item(_item("We agreed", semantic_type="frame"))
        assert result.category == Category.UNCATEGORIZED

    def test_decision_prefix_stripped_keeps_casing(self, classifier):
        result = classifier.classify_item(_item("DECISION: Move to AWS"))
        assert result.text == "Move to AWS"

    def test_key_point_needs_sticky_or_text_and_length(self, classifier):
        from insights.extractor import Category

        assert classifier.classify_item(_item("Customers love onboarding")).category == Category.KEY_POINT
        assert classifier.classify_item(_item("Long enough text", semantic_type="text")).category == Category.KEY_POINT
        assert classifier.classify_item(_item("exactly10!")).category == Category.UNCATEGORIZED
        assert classifier.classify_item(_item("Customers love onboarding", semantic_type="frame")).category == Category.UNCATEGORIZED

    def test_unknown_type_never_key_point(self, classifier):
        from insights.extractor import Category

        item = _item("A long note on an image card", semantic_type="youtube")
        assert item.semantic_type == SemanticType.OTHER
        assert classifier.classify_item(item).category == Category.UNCATEGORIZED

    def test_unknown_type_still_marker_classified(self, classifier):
        from insights.extractor import Category

        result = classifier.classify_item(_item("Risk: image rights", semantic_type="image"))
        assert result.category == Category.RISK

    def test_completion_is_orthogonal_to_category(self, classifier):
        from insights.extractor import Category

        result = classifier.classify_item(_item("Action: sign contract [done]", semantic_type="action"))
        assert result.category == Category.ACTION
        assert result.completed is True


class TestClassify:
    """Tests for bundle construction"""

    def test_store_order_preserved(self):
        from insights.extractor import classify

        items = [_item(f"Risk: r{i}", item_id=str(i)) for i in range(3)]
        bundle = classify(items)

        assert bundle.risks == ("r0", "r1", "r2")

    def test_caps_keep_first_n(self):
        from insights.extractor import classify

        items = [_item(f"Decision: d{i}") for i in range(12)]
        items += [_item(f"todo: a{i}") for i in range(20)]
        items += [_item(f"risk: r{i}") for i in range(9)]
        items += [_item(f"opportunity: o{i}") for i in range(9)]
        items += [_item(f"Key point number {i}") for i in range(11)]
        bundle = classify(items)

        assert bundle.decisions == tuple(f"d{i}" for i in range(10))
        assert len(bundle.action_items) == 15
        assert bundle.action_items[-1] == "a14"
        assert len(bundle.risks) == 8
        assert len(bundle.opportunities) == 8
        assert len(bundle.key_points) == 10

    def test_total_counts_strategy_types_only(self):
        from insights.extractor import classify

        items = [
            _item("", semantic_type="sticky"),
            _item("Frame label", semantic_type="frame"),
            _item("Risk: x", semantic_type="image"),
            _item("note", semantic_type="other"),
        ]
        bundle = classify(items)

        assert bundle.total_items == 2
        assert bundle.risks == ("x",)

    def test_metrics_pairs_fixed_order(self):
        from insights.extractor import classify

        items = [
            _item("Decision: a ✅"),
            _item("Risk: b", semantic_type="risk"),
            _item("Plain sticky note text"),
        ]
        bundle = classify(items)

        assert [(m.label, m.value) for m in bundle.metrics] == [
            ("Total Items", "3"),
            ("Completed", "1"),
            ("Decisions", "1"),
            ("Open Risks", "1"),
        ]

    def test_title_and_date(self):
        from insights.extractor import classify

        bundle = classify([], title="Q3 Planning", as_of=date(2026, 10, 19))

        assert bundle.title == "Q3 Planning"
        assert bundle.date == "October 19, 2026"

    def test_bundle_is_immutable(self):
        from insights.extractor import classify
        from pydantic import ValidationError

        bundle = classify([_item("Risk: x")])
        with pytest.raises(ValidationError):
            bundle.risks = ()

    def test_bundle_serialises_camel_case(self):
        from insights.extractor import classify

        data = classify([_item("Action: ship")]).model_dump(by_alias=True)

        assert data["actionItems"] == ("ship",)
        assert data["totalItems"] == 1
        assert "keyPoints" in data

    def test_custom_rules_and_caps(self):
        from insights.extractor import ContentClassifier, Category, DEFAULT_RULES

        classifier = ContentClassifier(rules=DEFAULT_RULES[:1], caps={Category.RISK: 1})
        bundle = classifier.classify([_item("Risk: a"), _item("Risk: b"), _item("Decision: c")])

        assert bundle.risks == ("a",)
        assert bundle.decisions == ()
