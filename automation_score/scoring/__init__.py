"""
Score engine: converts raw adoption counts into a 0–100 automation score.

Modules
-------
engine   : compute_score() + the four component functions — pure, no I/O.
insights : five-band classifier, component insight sentences and
           describe_score() for the final percentage.
"""

from automation_score.scoring.engine import compute_score, compute_score_from_metrics
from automation_score.scoring.insights import describe_score

__all__ = ["compute_score", "compute_score_from_metrics", "describe_score"]
