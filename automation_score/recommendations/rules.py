"""
Recommendation rules: an ordered table of (predicate, builder) pairs.

Every rule reads a ``RecommendationContext`` (raw counts plus the ratios
derived from them) and either fires, producing one ``Recommendation``, or
does not.  Rules are independent: all of them may fire for one snapshot.

Rule table (evaluated in this order)
------------------------------------
    1. coverage       : categories with tools < total categories
    2. integration    : integration ratio < 0.5  AND  tools > 3
    3. documentation  : SOP coverage < 0.5  (needs at least one category)
    4. sophistication : free-tier share > 0.7  AND  tools > 3
    5. optimization   : enterprise-tier share > 0.7  AND  tools > 5
    6. data           : tools > 5  AND  integration ratio < 0.4

Zero denominators yield ratios of 0; no predicate or builder raises.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from automation_score.config import RecommendationConfig, ScoringConfig
from automation_score.models.metrics import CategoryId, CategoryTools
from automation_score.models.recommendation import Recommendation
from automation_score.scoring.engine import (
    integration_ratio,
    max_possible_pairs,
    round_half_up,
    sop_coverage_ratio,
)
from automation_score.taxonomy.recommendation_taxonomy import (
    ImpactLevel,
    ImplementationTime,
    Priority,
    RecommendationType,
)
from automation_score.taxonomy.tier_taxonomy import ToolTier

# ── Action checklists ─────────────────────────────────────────────────────────

COVERAGE_ACTIONS: tuple[str, ...] = (
    "Identify which business categories lack automation tools",
    "Research entry-level tools for those categories",
    "Prioritize implementation based on potential time savings",
    "Start with a free trial or low-cost option before committing",
)

INTEGRATION_ACTIONS: tuple[str, ...] = (
    "Map out data flows between your current business systems",
    "Identify where manual data transfer is happening",
    "Look for native integrations between your existing tools",
    "Consider middleware like Zapier or Make.com for custom integrations",
    "Prioritize connecting your most-used tools first",
)

DOCUMENTATION_ACTIONS: tuple[str, ...] = (
    "Identify the most frequently performed processes that lack documentation",
    "Create SOPs for repetitive tasks that could eventually be automated",
    "Start with simple checklists that can be expanded later",
    "Document processes that are currently dependent on specific team members",
    "Use the built-in SOP generator to speed up the documentation process",
)

SOPHISTICATION_ACTIONS: tuple[str, ...] = (
    "Identify which core business functions would benefit most from advanced tools",
    "Calculate potential ROI for upgrading key tools from free to paid tiers",
    "Start with one critical upgrade rather than multiple at once",
    "Consider mid-tier options before committing to enterprise solutions",
    "Schedule demos with sales teams to understand advanced automation features",
)

OPTIMIZATION_ACTIONS: tuple[str, ...] = (
    "Audit which enterprise features you're actually using in each tool",
    "Identify enterprise tools where you're using less than 50% of features",
    "Research mid-tier alternatives for underutilized enterprise tools",
    "Calculate potential savings from right-sizing your tool stack",
    "Consider consolidating functionalities into fewer tools",
)

DATA_ACTIONS: tuple[str, ...] = (
    "Map out what key business data exists in each of your tools",
    "Identify where the same data is being maintained in multiple systems",
    "Set up regular data exports/imports between critical systems",
    "Consider implementing a central dashboard that pulls data from multiple tools",
    "Evaluate whether a data warehouse would benefit your business",
)


# ── Context ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RecommendationContext:
    """Raw counts and derived ratios shared by all rules.

    Attributes:
        category_tools:           category id -> tool count entry.
        category_names:           Optional id -> display name lookup.
        integrated_pairs:         Integrated tool pairs.
        tier_counts:              tier slug -> tool count.
        sop_count:                Documented SOPs.
        total_categories:         Categories in the catalogue.
        total_tools:              Tools in the stack.
        categories_with_tools:    Categories holding at least one tool.
        max_pairs:                n × (n − 1) / 2 (0 for n <= 1).
        integration_ratio:        integrated_pairs / max_pairs (0 if no pairs).
        sop_target:               total_categories × target SOPs per category.
        sop_coverage:             sop_count / sop_target (0 if no target).
        free_share:               free-tier tools / total tools (0 if no tools).
        enterprise_share:         enterprise-tier tools / total tools.
        config:                   Rule thresholds.
    """

    category_tools:        Mapping[CategoryId, CategoryTools]
    category_names:        Optional[Mapping[CategoryId, str]]
    integrated_pairs:      int
    tier_counts:           Mapping[str, int]
    sop_count:             int
    total_categories:      int
    total_tools:           int
    categories_with_tools: int
    max_pairs:             int
    integration_ratio:     float
    sop_target:            int
    sop_coverage:          float
    free_share:            float
    enterprise_share:      float
    config:                RecommendationConfig

    @property
    def categories_without_tools(self) -> int:
        return self.total_categories - self.categories_with_tools


def build_context(
    category_tools:   Mapping[CategoryId, CategoryTools],
    integrated_pairs: int,
    tier_counts:      Mapping[str, int],
    sop_count:        int,
    total_categories: int,
    total_tools:      int,
    category_names:   Optional[Mapping[CategoryId, str]],
    config:           RecommendationConfig,
    scoring_config:   ScoringConfig,
) -> RecommendationContext:
    """Derive every ratio the rules need from the raw counts."""
    target_per_category = scoring_config.target_sops_per_category
    if total_tools > 0:
        free_share = tier_counts.get(ToolTier.FREE, 0) / total_tools
        enterprise_share = tier_counts.get(ToolTier.ENTERPRISE, 0) / total_tools
    else:
        free_share = enterprise_share = 0.0

    return RecommendationContext(
        category_tools=category_tools,
        category_names=category_names,
        integrated_pairs=integrated_pairs,
        tier_counts=tier_counts,
        sop_count=sop_count,
        total_categories=total_categories,
        total_tools=total_tools,
        categories_with_tools=sum(1 for e in category_tools.values() if e.count > 0),
        max_pairs=max_possible_pairs(total_tools),
        integration_ratio=integration_ratio(integrated_pairs, total_tools),
        sop_target=max(total_categories, 0) * target_per_category,
        sop_coverage=sop_coverage_ratio(sop_count, total_categories, target_per_category),
        free_share=free_share,
        enterprise_share=enterprise_share,
        config=config,
    )


# ── Rule 1: coverage ──────────────────────────────────────────────────────────


def _needs_coverage(ctx: RecommendationContext) -> bool:
    return ctx.categories_with_tools < ctx.total_categories


def _build_coverage(ctx: RecommendationContext) -> Recommendation:
    missing = ctx.categories_without_tools
    parts = [
        f"{missing} out of {ctx.total_categories} business categories have no automation tools."
    ]
    named = missing_category_names(ctx)
    if named:
        suffix = " and others" if len(named) < missing else ""
        parts.append(f"Specifically in: {', '.join(named)}{suffix}.")
    parts.append("Adding tools to these areas could significantly improve efficiency.")

    return Recommendation(
        title="Expand Your Automation Coverage",
        description=" ".join(parts),
        type=RecommendationType.COVERAGE,
        priority=Priority.HIGH if missing > ctx.total_categories / 2 else Priority.MEDIUM,
        potential_impact=ImpactLevel.HIGH,
        time_to_implement=ImplementationTime.MEDIUM,
        action_items=COVERAGE_ACTIONS,
    )


def missing_category_names(ctx: RecommendationContext) -> list[str]:
    """Display names of up to N categories that have no tools.

    Empty when no name lookup was supplied.  Ids are compared as strings so
    that int keys and JSON string keys match each other.
    """
    if not ctx.category_names:
        return []
    covered = {str(cat_id) for cat_id, entry in ctx.category_tools.items() if entry.count > 0}
    names = [
        ctx.category_names[cat_id]
        for cat_id in sorted(ctx.category_names, key=_id_sort_key)
        if str(cat_id) not in covered
    ]
    return names[: ctx.config.max_named_missing_categories]


def _id_sort_key(cat_id: CategoryId) -> tuple[int, int, str]:
    text = str(cat_id)
    if text.lstrip("-").isdigit():
        return (0, int(text), "")
    return (1, 0, text)


# ── Rule 2: integration ───────────────────────────────────────────────────────


def _needs_integration(ctx: RecommendationContext) -> bool:
    return (
        ctx.integration_ratio < ctx.config.integration_ratio_threshold
        and ctx.total_tools > ctx.config.integration_min_tools
    )


def _build_integration(ctx: RecommendationContext) -> Recommendation:
    pct = round_half_up(ctx.integration_ratio * 100.0)
    missing_pairs = ctx.max_pairs - ctx.integrated_pairs
    high = ctx.integration_ratio < ctx.config.integration_high_priority_ratio

    return Recommendation(
        title="Improve Tool Integration",
        description=(
            f"You're only utilizing {pct}% of possible integrations between your tools "
            f"({ctx.integrated_pairs} out of {ctx.max_pairs} possible connections, "
            f"{missing_pairs} missing). Connecting your systems could eliminate data silos "
            "and reduce manual data transfer."
        ),
        type=RecommendationType.INTEGRATION,
        priority=Priority.HIGH if high else Priority.MEDIUM,
        potential_impact=ImpactLevel.HIGH,
        time_to_implement=ImplementationTime.MEDIUM,
        action_items=INTEGRATION_ACTIONS,
    )


# ── Rule 3: documentation ─────────────────────────────────────────────────────


def _needs_documentation(ctx: RecommendationContext) -> bool:
    return ctx.total_categories > 0 and ctx.sop_coverage < ctx.config.sop_coverage_threshold


def suggested_new_sops(ctx: RecommendationContext) -> int:
    """Additional SOPs needed to reach the target share of the ideal SOP count."""
    return max(math.ceil(ctx.sop_target * ctx.config.sop_target_share - ctx.sop_count), 0)


def _build_documentation(ctx: RecommendationContext) -> Recommendation:
    return Recommendation(
        title="Document More Business Processes",
        description=(
            f"You have {ctx.sop_count} SOPs documented out of an ideal {ctx.sop_target}. "
            f"Adding approximately {suggested_new_sops(ctx)} more SOPs would significantly "
            "improve your process documentation and enable better automation."
        ),
        type=RecommendationType.DOCUMENTATION,
        priority=Priority.HIGH if ctx.sop_count < ctx.total_categories else Priority.MEDIUM,
        potential_impact=ImpactLevel.MEDIUM,
        time_to_implement=ImplementationTime.QUICK,
        action_items=DOCUMENTATION_ACTIONS,
    )


# ── Rule 4: sophistication ────────────────────────────────────────────────────


def _needs_upgrade(ctx: RecommendationContext) -> bool:
    return (
        ctx.free_share > ctx.config.free_tier_share_threshold
        and ctx.total_tools > ctx.config.free_tier_min_tools
    )


def _build_upgrade(ctx: RecommendationContext) -> Recommendation:
    high = ctx.free_share > ctx.config.free_tier_high_priority_share
    return Recommendation(
        title="Upgrade Critical Business Tools",
        description=(
            f"{round_half_up(ctx.free_share * 100.0)}% of your tools are basic (free tier) "
            "which may limit your automation capabilities. Identifying 2-3 critical business "
            "functions to upgrade could provide significant efficiency gains."
        ),
        type=RecommendationType.SOPHISTICATION,
        priority=Priority.HIGH if high else Priority.MEDIUM,
        potential_impact=ImpactLevel.HIGH,
        time_to_implement=ImplementationTime.EXTENDED,
        action_items=SOPHISTICATION_ACTIONS,
    )


# ── Rule 5: optimization ──────────────────────────────────────────────────────


def _needs_optimization(ctx: RecommendationContext) -> bool:
    return (
        ctx.enterprise_share > ctx.config.enterprise_share_threshold
        and ctx.total_tools > ctx.config.enterprise_min_tools
    )


def _build_optimization(ctx: RecommendationContext) -> Recommendation:
    return Recommendation(
        title="Optimize Tool Cost-Effectiveness",
        description=(
            f"{round_half_up(ctx.enterprise_share * 100.0)}% of your tools are enterprise-tier, "
            "which may represent unnecessary costs. Consider if some enterprise tools could be "
            "replaced with more cost-effective alternatives."
        ),
        type=RecommendationType.OPTIMIZATION,
        priority=Priority.MEDIUM,
        potential_impact=ImpactLevel.MEDIUM,
        time_to_implement=ImplementationTime.EXTENDED,
        action_items=OPTIMIZATION_ACTIONS,
    )


# ── Rule 6: data utilization ──────────────────────────────────────────────────


def _needs_data_utilization(ctx: RecommendationContext) -> bool:
    return (
        ctx.total_tools > ctx.config.data_min_tools
        and ctx.integration_ratio < ctx.config.data_integration_ratio_threshold
    )


def _build_data_utilization(ctx: RecommendationContext) -> Recommendation:
    return Recommendation(
        title="Improve Data Utilization",
        description=(
            "You have several tools but limited integration, which suggests data silos. "
            "Connecting your data across tools could unlock valuable business insights and "
            "automation opportunities."
        ),
        type=RecommendationType.DATA,
        priority=Priority.MEDIUM,
        potential_impact=ImpactLevel.HIGH,
        time_to_implement=ImplementationTime.MEDIUM,
        action_items=DATA_ACTIONS,
    )


# ── Rule table ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Rule:
    """One condition → recommendation pair."""

    name:      str
    predicate: Callable[[RecommendationContext], bool]
    build:     Callable[[RecommendationContext], Recommendation]


RULES: tuple[Rule, ...] = (
    Rule("coverage",       _needs_coverage,         _build_coverage),
    Rule("integration",    _needs_integration,      _build_integration),
    Rule("documentation",  _needs_documentation,    _build_documentation),
    Rule("sophistication", _needs_upgrade,          _build_upgrade),
    Rule("optimization",   _needs_optimization,     _build_optimization),
    Rule("data",           _needs_data_utilization, _build_data_utilization),
)
