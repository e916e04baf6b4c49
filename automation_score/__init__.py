"""
automation-score — business automation scoring and recommendations.

Public API::

    from automation_score import compute_score, describe_score, generate_recommendations

    result = compute_score(
        category_tools={1: {"count": 5}, 2: {"count": 5}},
        integrated_pairs=0,
        tier_counts={"enterprise": 10},
        sop_count=0,
        avg_sop_steps=0,
        total_categories=5,
        total_tools=10,
    )
    result.score                   # 32
    describe_score(result.score)   # "Basic - Initial steps toward automation ..."
"""

from automation_score.recommendations.generator import generate_recommendations
from automation_score.scoring.engine import compute_score
from automation_score.scoring.insights import describe_score

__version__ = "0.1.0"

__all__ = ["compute_score", "describe_score", "generate_recommendations"]
