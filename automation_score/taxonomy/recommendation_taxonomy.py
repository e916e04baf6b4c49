"""
Recommendation taxonomy.

Four orthogonal labels describe every improvement recommendation:
  - ``RecommendationType`` — the *what*: which part of the score it targets.
  - ``Priority``           — the *when*: how urgently it should be acted on.
  - ``ImpactLevel``        — the *how much*: expected effect on the score.
  - ``ImplementationTime`` — the *how long*: effort bucket to implement it.

This module has NO imports from any other ``automation_score`` package.
"""

from enum import StrEnum


class RecommendationType(StrEnum):
    """Area of the automation score a recommendation targets."""

    COVERAGE = "coverage"
    """Business categories without any automation tool."""

    INTEGRATION = "integration"
    """Tools that do not exchange data with each other."""

    DOCUMENTATION = "documentation"
    """Processes without a documented SOP."""

    SOPHISTICATION = "sophistication"
    """Stacks dominated by free-tier tools."""

    OPTIMIZATION = "optimization"
    """Stacks over-provisioned with enterprise-tier tools."""

    DATA = "data"
    """Data trapped in silos across many tools."""


class Priority(StrEnum):
    """Urgency of a recommendation."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ImpactLevel(StrEnum):
    """Expected effect of a recommendation on the automation score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ImplementationTime(StrEnum):
    """Effort bucket for implementing a recommendation."""

    QUICK = "quick"
    """Days: checklists, documentation, configuration."""

    MEDIUM = "medium"
    """Weeks: new tools or integrations."""

    EXTENDED = "extended"
    """Months: procurement, migrations, contract changes."""


# Sort rank for priority ordering (lower = more urgent).
PRIORITY_RANK: dict[str, int] = {
    Priority.HIGH:   0,
    Priority.MEDIUM: 1,
    Priority.LOW:    2,
}
