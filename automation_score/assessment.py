"""
Assessment — one call that scores a snapshot, describes the score and
generates recommendations, the bundle a dashboard renders.

Assessment flow
---------------
  1. compute_score_from_metrics()             -> ScoreResult
  2. describe_score(result.score)             -> qualitative description
  3. generate_recommendations_from_metrics()  -> recommendations
     (optionally re-sorted high → low priority)
"""

from __future__ import annotations

import logging
from typing import Optional

from automation_score.config import AppConfig
from automation_score.models.metrics import RawMetrics
from automation_score.models.recommendation import AutomationAssessment
from automation_score.recommendations.generator import (
    generate_recommendations_from_metrics,
    sort_by_priority,
)
from automation_score.scoring.engine import compute_score_from_metrics
from automation_score.scoring.insights import describe_score

logger = logging.getLogger(__name__)


def assess(
    metrics: RawMetrics,
    config: Optional[AppConfig] = None,
    sort_priority: bool = False,
) -> AutomationAssessment:
    """Score one snapshot and generate its recommendations.

    Args:
        metrics:       Aggregated counts for one business.
        config:        Application config; defaults to ``AppConfig()``.
        sort_priority: Return recommendations high → low priority instead of
                       rule-evaluation order.

    Returns:
        AutomationAssessment with score, description and recommendations.
    """
    cfg = config or AppConfig()

    result = compute_score_from_metrics(metrics, cfg.scoring)
    recommendations = generate_recommendations_from_metrics(
        metrics, cfg.recommendations, cfg.scoring
    )
    if sort_priority:
        recommendations = sort_by_priority(recommendations)

    logger.info(
        "Assessment complete: score=%d recommendations=%d",
        result.score, len(recommendations),
    )

    return AutomationAssessment(
        score_result=result,
        description=describe_score(result.score),
        recommendations=tuple(recommendations),
    )
