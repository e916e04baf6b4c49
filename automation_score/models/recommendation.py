"""
Recommendation and assessment output models.

A ``Recommendation`` is produced fresh on every generator call; it has no
identity or lifecycle beyond that call.  ``AutomationAssessment`` bundles a
score, its qualitative description and the recommendations for one snapshot.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from automation_score.models.score import ScoreResult
from automation_score.taxonomy.recommendation_taxonomy import (
    ImpactLevel,
    ImplementationTime,
    Priority,
    RecommendationType,
)


class Recommendation(BaseModel):
    """An actionable improvement recommendation.

    Attributes:
        title:             Short headline.
        description:       One or two sentences with the supporting numbers.
        type:              Score area targeted (coverage, integration, ...).
        priority:          Urgency: high, medium or low.
        potential_impact:  Expected effect on the score: high, medium or low.
        time_to_implement: Effort bucket: quick, medium or extended.
        action_items:      Ordered checklist of concrete next steps.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    type: RecommendationType
    priority: Priority
    potential_impact: ImpactLevel
    time_to_implement: ImplementationTime
    action_items: tuple[str, ...]

    @field_validator("title", "description")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Recommendation text must not be empty.")
        return v


class AutomationAssessment(BaseModel):
    """Score, description and recommendations for one metrics snapshot."""

    model_config = ConfigDict(frozen=True)

    score_result: ScoreResult
    description: str
    recommendations: tuple[Recommendation, ...] = ()
    generated_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
