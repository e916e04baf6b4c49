"""Tests for RawMetrics, CategoryTools, ScoreResult and Recommendation models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from automation_score.models.metrics import (
    CategoryTools,
    RawMetrics,
    coerce_category_tools,
    count_categories_with_tools,
)
from automation_score.models.recommendation import AutomationAssessment, Recommendation
from automation_score.scoring.engine import compute_score_from_metrics


def _recommendation(**overrides) -> Recommendation:
    fields = {
        "title": "Improve Tool Integration",
        "description": "Connect your tools.",
        "type": "integration",
        "priority": "high",
        "potential_impact": "high",
        "time_to_implement": "medium",
        "action_items": ("Map data flows",),
    }
    fields.update(overrides)
    return Recommendation(**fields)


class TestRawMetrics:
    def test_defaults_are_empty(self):
        m = RawMetrics()
        assert m.category_tools == {}
        assert m.total_tools == 0
        assert m.category_names is None
        assert m.categories_with_tools == 0

    def test_zero_count_entries_not_counted(self):
        m = RawMetrics(category_tools={1: CategoryTools(count=3), 2: CategoryTools(count=0)})
        assert m.categories_with_tools == 1

    def test_frozen(self, example_metrics):
        with pytest.raises(ValidationError):
            example_metrics.total_tools = 99

    def test_category_tools_from_dicts(self):
        m = RawMetrics.model_validate({"category_tools": {"7": {"count": 2, "name": "Legal"}}})
        assert m.category_tools["7"].name == "Legal"


class TestCategoryHelpers:
    def test_count_categories_with_tools(self):
        tools = {1: CategoryTools(count=1), 2: CategoryTools(count=0), 3: CategoryTools(count=4)}
        assert count_categories_with_tools(tools) == 2

    def test_coerce_accepts_all_forms(self):
        out = coerce_category_tools(
            {1: CategoryTools(count=1), 2: {"count": 2, "name": "Ops"}, 3: 3}
        )
        assert [out[k].count for k in (1, 2, 3)] == [1, 2, 3]
        assert out[2].name == "Ops"

    def test_coerce_does_not_mutate(self):
        original = {1: {"count": 2}}
        coerce_category_tools(original)
        assert original == {1: {"count": 2}}


class TestRecommendation:
    def test_enum_fields_parse_slugs(self):
        rec = _recommendation()
        assert rec.type == "integration"
        assert rec.priority == "high"

    def test_unknown_priority_raises(self):
        with pytest.raises(ValidationError):
            _recommendation(priority="urgent")

    def test_unknown_effort_raises(self):
        with pytest.raises(ValidationError):
            _recommendation(time_to_implement="forever")

    def test_blank_title_raises(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            _recommendation(title="   ")

    def test_json_dump_uses_slugs(self):
        dumped = _recommendation().model_dump(mode="json")
        assert dumped["time_to_implement"] == "medium"
        assert dumped["action_items"] == ["Map data flows"]


class TestScoreResult:
    def test_components_in_weight_order(self, example_metrics):
        result = compute_score_from_metrics(example_metrics)
        assert list(result.components()) == [
            "tools_coverage",
            "tools_integration",
            "automation_sophistication",
            "process_documentation",
        ]

    def test_assessment_defaults(self, example_metrics):
        result = compute_score_from_metrics(example_metrics)
        assessment = AutomationAssessment(score_result=result, description="Basic")
        assert assessment.recommendations == ()
        assert assessment.generated_at.tzinfo is not None
