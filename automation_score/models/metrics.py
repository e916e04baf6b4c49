"""
Raw metric input models.

``RawMetrics`` is the aggregated snapshot a caller hands to the score engine
and the recommendation generator.  It is built either directly by the caller
(counts already aggregated by a database query) or by
``automation_score.ingestion.snapshot.aggregate_snapshot`` from tool and SOP
records.

Counts are NOT validated here: negative values or tier counts exceeding the
tool total are the data layer's responsibility.  The models only fix the
shape of the data.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CategoryId = Union[int, str]


class CategoryTools(BaseModel):
    """Tool count for one business category.

    Attributes:
        count: Number of automation tools assigned to the category.
        name:  Optional display name of the category.
    """

    model_config = ConfigDict(frozen=True)

    count: int
    name: Optional[str] = None


class RawMetrics(BaseModel):
    """Aggregated counts for one business at one point in time.

    Attributes:
        category_tools:   category id -> ``CategoryTools`` for categories that
                          have tools.  Categories without tools may be absent.
        integrated_pairs: Number of distinct tool pairs that exchange data.
        tier_counts:      tier slug -> number of tools in that tier.
        sop_count:        Number of documented SOPs.
        avg_sop_steps:    Mean number of steps per SOP.
        total_categories: Number of business categories in the catalogue.
        total_tools:      Number of tools in the business's stack.
        category_names:   Optional category id -> display name lookup used to
                          name missing categories in recommendation text.
    """

    model_config = ConfigDict(frozen=True)

    category_tools:   dict[CategoryId, CategoryTools] = Field(default_factory=dict)
    integrated_pairs: int = 0
    tier_counts:      dict[str, int] = Field(default_factory=dict)
    sop_count:        int = 0
    avg_sop_steps:    float = 0.0
    total_categories: int = 0
    total_tools:      int = 0
    category_names:   Optional[dict[CategoryId, str]] = None

    @property
    def categories_with_tools(self) -> int:
        """Number of categories holding at least one tool."""
        return count_categories_with_tools(self.category_tools)


def count_categories_with_tools(category_tools: Mapping[CategoryId, CategoryTools]) -> int:
    """Count the categories in ``category_tools`` whose tool count is positive."""
    return sum(1 for entry in category_tools.values() if entry.count > 0)


def coerce_category_tools(
    category_tools: Mapping[CategoryId, Union[CategoryTools, Mapping[str, Any], int]],
) -> dict[CategoryId, CategoryTools]:
    """Normalise a caller-supplied category map to ``CategoryTools`` values.

    Accepts ``CategoryTools`` instances, plain ``{"count": n, "name": ...}``
    dicts (the shape a JSON API returns) or bare integer counts.
    """
    result: dict[CategoryId, CategoryTools] = {}
    for cat_id, entry in category_tools.items():
        if isinstance(entry, CategoryTools):
            result[cat_id] = entry
        elif isinstance(entry, Mapping):
            result[cat_id] = CategoryTools(**entry)
        else:
            result[cat_id] = CategoryTools(count=int(entry))
    return result
