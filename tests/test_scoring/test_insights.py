"""Tests for automation_score.scoring.insights."""

from __future__ import annotations

import pytest

from automation_score.scoring.insights import (
    Band,
    classify_band,
    coverage_insight,
    describe_score,
    documentation_insight,
    integration_insight,
    sophistication_description,
)


# ── classify_band ─────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "score, expected",
    [
        (1.0, Band.EXCELLENT),
        (0.81, Band.EXCELLENT),
        (0.8, Band.GOOD),          # thresholds are exclusive
        (0.61, Band.GOOD),
        (0.6, Band.MODERATE),
        (0.41, Band.MODERATE),
        (0.4, Band.LIMITED),
        (0.21, Band.LIMITED),
        (0.2, Band.VERY_LIMITED),
        (0.0, Band.VERY_LIMITED),
    ],
)
def test_classify_band(score: float, expected: Band) -> None:
    assert classify_band(score) is expected


def test_component_insights_differ_per_component() -> None:
    """Same band, four different component sentences."""
    texts = {
        coverage_insight(0.9),
        integration_insight(0.9),
        sophistication_description(0.9),
        documentation_insight(0.9),
    }
    assert len(texts) == 4


def test_coverage_insight_text() -> None:
    assert coverage_insight(0.9) == "Excellent coverage across business functions."
    assert coverage_insight(0.1) == "Very limited coverage, most business functions are manual."


def test_sophistication_description_is_a_phrase() -> None:
    """Sophistication text is embedded mid-sentence, so it is lowercase with no full stop."""
    for score in (0.0, 0.3, 0.5, 0.7, 0.9):
        text = sophistication_description(score)
        assert text[0].islower()
        assert not text.endswith(".")


# ── describe_score ────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "score, prefix",
    [
        (100, "Excellent"),
        (90, "Excellent"),
        (89, "Very Good"),
        (75, "Very Good"),
        (74, "Good"),
        (60, "Good"),
        (59, "Fair"),
        (40, "Fair"),
        (39, "Basic"),
        (20, "Basic"),
        (19, "Limited"),
        (0, "Limited"),
    ],
)
def test_describe_score_bands(score: int, prefix: str) -> None:
    assert describe_score(score).startswith(f"{prefix} - ")


def test_describe_score_example() -> None:
    assert describe_score(32) == "Basic - Initial steps toward automation have been taken"
