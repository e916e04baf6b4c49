"""
Domain models: raw metric inputs, score outputs and recommendations.

All models are frozen pydantic v2 models.
"""

from automation_score.models.metrics import CategoryTools, RawMetrics
from automation_score.models.recommendation import AutomationAssessment, Recommendation
from automation_score.models.score import ComponentScore, ScoreResult

__all__ = [
    "AutomationAssessment",
    "CategoryTools",
    "ComponentScore",
    "RawMetrics",
    "Recommendation",
    "ScoreResult",
]
