"""
Recommendation engine: converts raw adoption counts into an ordered list of
actionable improvement recommendations.

Modules
-------
rules     : RecommendationContext + the ordered (predicate, builder) rule
            table RULES — pure functions, no I/O.
generator : generate_recommendations() + sort_by_priority().
reporter  : write_assessment_json() + write_recommendation_csv() — file output.
"""

from automation_score.recommendations.generator import (
    generate_recommendations,
    generate_recommendations_from_metrics,
    sort_by_priority,
)

__all__ = [
    "generate_recommendations",
    "generate_recommendations_from_metrics",
    "sort_by_priority",
]
