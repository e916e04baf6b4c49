"""
Recommendation generator: evaluates the rule table in ``rules.RULES`` over
one snapshot of raw counts and returns the recommendations that fired.

The generator re-examines the raw counts itself rather than consuming the
score engine's normalised output, so the two units can run in either order
or independently.

Output order is rule-evaluation order, not priority order.  Callers that
want the most urgent items first use ``sort_by_priority()``.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from automation_score.config import RecommendationConfig, ScoringConfig
from automation_score.models.metrics import CategoryId, RawMetrics, coerce_category_tools
from automation_score.models.recommendation import Recommendation
from automation_score.recommendations.rules import RULES, build_context
from automation_score.scoring.engine import CategoryToolsInput
from automation_score.taxonomy.recommendation_taxonomy import PRIORITY_RANK

logger = logging.getLogger(__name__)


def generate_recommendations(
    category_tools:   CategoryToolsInput,
    integrated_pairs: int,
    tier_counts:      Mapping[str, int],
    sop_count:        int,
    total_categories: int,
    total_tools:      int,
    category_names:   Optional[Mapping[CategoryId, str]] = None,
    config:           Optional[RecommendationConfig] = None,
    scoring_config:   Optional[ScoringConfig] = None,
) -> list[Recommendation]:
    """Generate improvement recommendations from raw counts.

    Args:
        category_tools:   category id -> tool count for categories with tools.
        integrated_pairs: Number of distinct integrated tool pairs.
        tier_counts:      tier slug -> number of tools in that tier.
        sop_count:        Number of documented SOPs.
        total_categories: Number of business categories.
        total_tools:      Number of tools in the stack.
        category_names:   Optional id -> display name lookup; when given the
                          coverage recommendation names missing categories.
        config:           Rule thresholds; defaults to ``RecommendationConfig()``.
        scoring_config:   Supplies the SOP-per-category target; defaults to
                          ``ScoringConfig()``.

    Returns:
        Recommendations in rule-evaluation order (possibly empty).
    """
    ctx = build_context(
        category_tools=coerce_category_tools(category_tools),
        integrated_pairs=integrated_pairs,
        tier_counts=tier_counts,
        sop_count=sop_count,
        total_categories=total_categories,
        total_tools=total_tools,
        category_names=category_names,
        config=config or RecommendationConfig(),
        scoring_config=scoring_config or ScoringConfig(),
    )

    recommendations: list[Recommendation] = []
    for rule in RULES:
        if rule.predicate(ctx):
            recommendations.append(rule.build(ctx))

    logger.debug(
        "Recommendation rules fired: %s",
        ", ".join(r.type for r in recommendations) or "none",
    )
    return recommendations


def generate_recommendations_from_metrics(
    metrics:        RawMetrics,
    config:         Optional[RecommendationConfig] = None,
    scoring_config: Optional[ScoringConfig] = None,
) -> list[Recommendation]:
    """Convenience wrapper: ``generate_recommendations`` over a ``RawMetrics``."""
    return generate_recommendations(
        category_tools=metrics.category_tools,
        integrated_pairs=metrics.integrated_pairs,
        tier_counts=metrics.tier_counts,
        sop_count=metrics.sop_count,
        total_categories=metrics.total_categories,
        total_tools=metrics.total_tools,
        category_names=metrics.category_names,
        config=config,
        scoring_config=scoring_config,
    )


def sort_by_priority(recommendations: Sequence[Recommendation]) -> list[Recommendation]:
    """Return recommendations ordered high → low priority.

    The sort is stable: within one priority, rule order is preserved.
    """
    return sorted(recommendations, key=lambda r: PRIORITY_RANK.get(r.priority, len(PRIORITY_RANK)))
