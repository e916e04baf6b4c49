"""
Automation score engine: converts raw adoption counts into a 0–100 score
with a four-component, human-readable breakdown.

Score formula (weighted sum, range 0–100)
------------------------------------------
    score = round(100 × (
          coverage        * 0.40   # business categories touched by tools
        + integration     * 0.25   # tool pairs exchanging data
        + sophistication  * 0.20   # tier mix of the stack
        + documentation   * 0.15   # SOP coverage and depth
    ))

Component explanations
----------------------
coverage (0–1):
    0.5 × (categories with tools / total categories)
    + 0.5 × density, where density is the mean over the supplied categories
    of min(tools, 5) / 5, divided again by total categories.
    A sixth tool in a category adds nothing.

integration (0–1):
    integrated pairs / (n × (n − 1) / 2), clamped to 1.  Zero for n <= 1.

sophistication (0–1):
    Σ tools_in_tier × tier_weight / total tools, with free=0.3,
    low-cost=0.7, enterprise=1.0 and 0.5 for any other tier slug.

documentation (0–1):
    0.7 × min(SOPs / (categories × 3), 1) + 0.3 × min(avg steps / 5, 1).

Every division is guarded: a zero denominator yields a component score of
0, never an exception, NaN or infinity.  All functions are pure.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional, Union

from automation_score.config import ScoringConfig
from automation_score.models.metrics import (
    CategoryId,
    CategoryTools,
    RawMetrics,
    coerce_category_tools,
    count_categories_with_tools,
)
from automation_score.models.score import ComponentScore, ScoreResult
from automation_score.scoring.insights import (
    coverage_insight,
    documentation_insight,
    integration_insight,
    sophistication_description,
)
from automation_score.taxonomy.tier_taxonomy import ToolTier, tier_weight

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ScoringConfig()

CategoryToolsInput = Mapping[CategoryId, Union[CategoryTools, Mapping[str, Any], int]]


# ── Component scores ──────────────────────────────────────────────────────────


def compute_tools_coverage(
    category_tools:   CategoryToolsInput,
    total_categories: int,
    config:           Optional[ScoringConfig] = None,
) -> float:
    """Share of business categories with tools, blended with tool density.

    Args:
        category_tools:   category id -> tool count for categories with tools.
        total_categories: Number of categories in the catalogue.
        config:           Scoring parameters; defaults to ``ScoringConfig()``.

    Returns:
        Coverage score in [0, 1] (0 when ``total_categories`` is 0).
    """
    cfg = config or _DEFAULT_CONFIG
    if total_categories <= 0:
        return 0.0

    tools = coerce_category_tools(category_tools)
    category_coverage = count_categories_with_tools(tools) / total_categories

    if tools:
        cap = cfg.tools_per_category_cap
        mean_density = sum(min(entry.count, cap) / cap for entry in tools.values()) / len(tools)
        density = mean_density / total_categories
    else:
        density = 0.0

    blend = cfg.category_coverage_blend
    return _clamp(category_coverage * blend + density * (1.0 - blend))


def compute_tools_integration(integrated_pairs: int, total_tools: int) -> float:
    """Share of possible tool pairs that are integrated, capped at 1.

    Returns 0 when fewer than two tools exist (no pair is possible).
    """
    max_pairs = max_possible_pairs(total_tools)
    if max_pairs <= 0:
        return 0.0
    return _clamp(integrated_pairs / max_pairs)


def compute_automation_sophistication(
    tier_counts: Mapping[str, int],
    total_tools: int,
    config:      Optional[ScoringConfig] = None,
) -> float:
    """Tier-weighted sophistication of the tool stack.

    Unknown tier slugs are weighted with ``config.default_tier_weight``.
    Returns 0 when ``total_tools`` is 0.
    """
    cfg = config or _DEFAULT_CONFIG
    if total_tools <= 0:
        return 0.0

    weighted_sum = sum(
        count * tier_weight(tier, cfg.tier_weights, cfg.default_tier_weight)
        for tier, count in tier_counts.items()
    )
    return _clamp(weighted_sum / total_tools)


def compute_process_documentation(
    sop_count:        int,
    total_categories: int,
    avg_sop_steps:    float,
    config:           Optional[ScoringConfig] = None,
) -> float:
    """SOP coverage (target 3 per category) blended with SOP depth (target 5 steps).

    Returns 0 when ``total_categories`` is 0.
    """
    cfg = config or _DEFAULT_CONFIG
    if total_categories <= 0:
        return 0.0

    sop_coverage = sop_coverage_ratio(sop_count, total_categories, cfg.target_sops_per_category)
    sop_quality = _clamp(avg_sop_steps / cfg.target_steps_per_sop)

    blend = cfg.sop_coverage_blend
    return _clamp(min(sop_coverage, 1.0) * blend + sop_quality * (1.0 - blend))


# ── Final score ───────────────────────────────────────────────────────────────


def compute_score(
    category_tools:   CategoryToolsInput,
    integrated_pairs: int,
    tier_counts:      Mapping[str, int],
    sop_count:        int,
    avg_sop_steps:    float,
    total_categories: int,
    total_tools:      int,
    config:           Optional[ScoringConfig] = None,
) -> ScoreResult:
    """Compute the automation score and its four explained components.

    Args:
        category_tools:   category id -> tool count (``CategoryTools``, a
                          ``{"count": n}`` dict, or a bare int).
        integrated_pairs: Number of distinct integrated tool pairs.
        tier_counts:      tier slug -> number of tools in that tier.
        sop_count:        Number of documented SOPs.
        avg_sop_steps:    Mean number of steps per SOP.
        total_categories: Number of business categories.
        total_tools:      Number of tools in the stack.
        config:           Scoring parameters; defaults to ``ScoringConfig()``.

    Returns:
        ScoreResult with the final percentage and all components populated.
    """
    cfg = config or _DEFAULT_CONFIG
    tools = coerce_category_tools(category_tools)

    coverage = compute_tools_coverage(tools, total_categories, cfg)
    integration = compute_tools_integration(integrated_pairs, total_tools)
    sophistication = compute_automation_sophistication(tier_counts, total_tools, cfg)
    documentation = compute_process_documentation(sop_count, total_categories, avg_sop_steps, cfg)

    weighted = (
        coverage         * cfg.coverage_weight
        + integration    * cfg.integration_weight
        + sophistication * cfg.sophistication_weight
        + documentation  * cfg.documentation_weight
    )
    final_score = round_half_up(weighted * 100.0)

    # ── Explanations ──────────────────────────────────────────────────────────
    with_tools = count_categories_with_tools(tools)
    coverage_text = (
        f"{with_tools} out of {total_categories} business categories have automation tools. "
        f"{coverage_insight(coverage)}"
    )

    integration_text = (
        f"{integrated_pairs} tool integrations exist out of "
        f"{max_possible_pairs(total_tools)} possible connections. "
        f"{integration_insight(integration)}"
    )

    free_pct = _safe_share(tier_counts.get(ToolTier.FREE, 0), total_tools) * 100.0
    enterprise_pct = _safe_share(tier_counts.get(ToolTier.ENTERPRISE, 0), total_tools) * 100.0
    sophistication_text = (
        f"Your tool mix is {sophistication_description(sophistication)}. "
        f"{free_pct:.0f}% free-tier and {enterprise_pct:.0f}% enterprise-tier tools."
    )

    documentation_text = (
        f"{sop_count} SOPs documented with an average of {avg_sop_steps:.1f} steps per SOP. "
        f"{documentation_insight(documentation)}"
    )

    logger.debug(
        "Automation score %d (coverage=%.3f integration=%.3f sophistication=%.3f "
        "documentation=%.3f)",
        final_score, coverage, integration, sophistication, documentation,
    )

    return ScoreResult(
        score=final_score,
        tools_coverage=_component(coverage, coverage_text),
        tools_integration=_component(integration, integration_text),
        automation_sophistication=_component(sophistication, sophistication_text),
        process_documentation=_component(documentation, documentation_text),
    )


def compute_score_from_metrics(
    metrics: RawMetrics,
    config:  Optional[ScoringConfig] = None,
) -> ScoreResult:
    """Convenience wrapper: ``compute_score`` over a ``RawMetrics`` snapshot."""
    return compute_score(
        category_tools=metrics.category_tools,
        integrated_pairs=metrics.integrated_pairs,
        tier_counts=metrics.tier_counts,
        sop_count=metrics.sop_count,
        avg_sop_steps=metrics.avg_sop_steps,
        total_categories=metrics.total_categories,
        total_tools=metrics.total_tools,
        config=config,
    )


# ── Shared helpers ────────────────────────────────────────────────────────────


def max_possible_pairs(total_tools: int) -> int:
    """Number of unordered tool pairs: n × (n − 1) / 2, or 0 for n <= 1."""
    if total_tools <= 1:
        return 0
    return total_tools * (total_tools - 1) // 2


def integration_ratio(integrated_pairs: int, total_tools: int) -> float:
    """Unclamped share of possible pairs that are integrated (0 when n <= 1)."""
    return _safe_share(integrated_pairs, max_possible_pairs(total_tools))


def sop_coverage_ratio(sop_count: int, total_categories: int, target_per_category: int = 3) -> float:
    """Unclamped SOP count relative to the per-category target (0 when no categories)."""
    return _safe_share(sop_count, total_categories * target_per_category)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (not to even)."""
    return int(math.floor(value + 0.5))


def _component(score: float, explanation: str) -> ComponentScore:
    return ComponentScore(
        score=score,
        percentage=round_half_up(score * 100.0),
        explanation=explanation,
    )


def _safe_share(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return numerator / denominator


def _clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))
