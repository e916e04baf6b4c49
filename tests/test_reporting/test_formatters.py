"""Tests for automation_score.reporting.formatters."""

from __future__ import annotations

import pytest

from automation_score.config import ScoringConfig
from automation_score.recommendations.generator import generate_recommendations_from_metrics
from automation_score.reporting.formatters import (
    format_bar,
    format_recommendations,
    format_score_breakdown,
)
from automation_score.scoring.engine import compute_score_from_metrics
from automation_score.scoring.insights import describe_score


# ── format_bar ────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "pct, filled",
    [(0, 0), (30, 6), (50, 10), (100, 20), (150, 20), (-5, 0)],
)
def test_format_bar(pct: int, filled: int) -> None:
    bar = format_bar(pct)
    assert len(bar) == 22
    assert bar.count("#") == filled


# ── format_score_breakdown ────────────────────────────────────────────────────


def test_breakdown_headline(example_metrics) -> None:
    result = compute_score_from_metrics(example_metrics)
    out = format_score_breakdown(result, describe_score(result.score))
    lines = out.splitlines()
    assert lines[0] == "  Automation score: 32/100"
    assert lines[1] == "  Basic - Initial steps toward automation have been taken"


def test_breakdown_component_rows(example_metrics) -> None:
    result = compute_score_from_metrics(example_metrics)
    out = format_score_breakdown(result, "x")
    coverage_row = next(line for line in out.splitlines() if line.startswith("  Tools coverage "))
    assert "40%" in coverage_row
    assert "30%" in coverage_row
    assert "[######              ]" in coverage_row
    assert "Automation sophistication" in out
    assert "Process documentation" in out


def test_breakdown_uses_config_weights(example_metrics) -> None:
    cfg = ScoringConfig(coverage_weight=0.25, integration_weight=0.25,
                        sophistication_weight=0.25, documentation_weight=0.25)
    result = compute_score_from_metrics(example_metrics, cfg)
    out = format_score_breakdown(result, "x", cfg)
    assert "40%" not in out.split("\n\n")[1]


def test_breakdown_explanations_toggle(example_metrics) -> None:
    result = compute_score_from_metrics(example_metrics)
    with_text = format_score_breakdown(result, "x", explain=True)
    without = format_score_breakdown(result, "x", explain=False)
    assert result.tools_coverage.explanation in with_text
    assert result.tools_coverage.explanation not in without


# ── format_recommendations ────────────────────────────────────────────────────


def test_no_recommendations() -> None:
    assert "No recommendations" in format_recommendations([])


def test_recommendation_blocks(example_metrics) -> None:
    recs = generate_recommendations_from_metrics(example_metrics)
    out = format_recommendations(recs)

    assert out.startswith("  1. [HIGH] Expand Your Automation Coverage")
    assert "(type=coverage, impact=high, effort=medium)" in out
    assert f"  {len(recs)}. " in out
    assert out.count("     - ") == sum(len(r.action_items) for r in recs)
