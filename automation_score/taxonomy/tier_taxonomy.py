"""
Tool tier taxonomy: pricing tiers used as a proxy for automation sophistication.

A tool's tier slug comes from the external tool catalogue (``free``,
``low-cost``, ``enterprise``).  Each known tier carries a fixed
sophistication weight; any other slug is tolerated and receives
``DEFAULT_TIER_WEIGHT``.

Usage example::

    from automation_score.taxonomy.tier_taxonomy import ToolTier, tier_weight

    tier_weight(ToolTier.ENTERPRISE)   # 1.0
    tier_weight("mid-market")          # 0.5 (unknown slug)

This module has NO imports from any other ``automation_score`` package.
"""

from enum import StrEnum


class ToolTier(StrEnum):
    """Pricing tier of a tool in the catalogue."""

    FREE = "free"
    """Free plans and free tiers. Basic automation."""

    LOW_COST = "low-cost"
    """Paid self-serve plans. Intermediate automation."""

    ENTERPRISE = "enterprise"
    """Enterprise contracts. Advanced automation."""


TIER_WEIGHTS: dict[str, float] = {
    ToolTier.FREE:       0.3,
    ToolTier.LOW_COST:   0.7,
    ToolTier.ENTERPRISE: 1.0,
}

DEFAULT_TIER_WEIGHT: float = 0.5


def tier_weight(
    tier: str,
    weights: dict[str, float] | None = None,
    default: float = DEFAULT_TIER_WEIGHT,
) -> float:
    """Return the sophistication weight for a tier slug.

    Args:
        tier:    Tier slug as stored on the tool (case-sensitive).
        weights: Optional override table; defaults to ``TIER_WEIGHTS``.
        default: Weight returned for slugs missing from the table.
    """
    table = TIER_WEIGHTS if weights is None else weights
    return table.get(str(tier), default)
