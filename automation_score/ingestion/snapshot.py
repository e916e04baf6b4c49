"""
Snapshot aggregation — turn tool, SOP and category records into ``RawMetrics``.

The external data layer owns tools, categories and SOPs.  This module is the
seam between its records and the pure scoring core: it counts tools per
category and per tier, averages SOP step counts and counts distinct
integration pairs.

Snapshot files
--------------
``load_snapshot(path)`` accepts two JSON shapes.

Pre-aggregated counts::

    {
      "label": "acme",
      "metrics": {
        "category_tools": {"1": {"count": 5}, "2": {"count": 5}},
        "integrated_pairs": 0,
        "tier_counts": {"enterprise": 10},
        "sop_count": 0,
        "avg_sop_steps": 0,
        "total_categories": 5,
        "total_tools": 10
      }
    }

Record lists (aggregated here)::

    {
      "label": "acme",
      "categories":   [{"category_id": 1, "name": "Marketing"}, ...],
      "tools":        [{"tool_id": "hubspot", "category_id": 1, "tier_slug": "free"}, ...],
      "sops":         [{"sop_id": 1, "step_count": 6}, ...],
      "integrations": [["hubspot", "slack"], ...]
    }

When a record-list snapshot carries neither ``integrations`` nor
``integrated_pairs`` the pair count is estimated as
``floor(total_tools × estimated_integration_ratio)`` and a warning is logged.
"""

from __future__ import annotations

import json
import logging
import math
from collections import Counter
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from automation_score.models.metrics import CategoryId, CategoryTools, RawMetrics

logger = logging.getLogger(__name__)

ToolId = Union[int, str]


class SnapshotError(ValueError):
    """Raised when a snapshot file cannot be read or does not match a known shape."""


# ── Record models ─────────────────────────────────────────────────────────────


class CategoryRecord(BaseModel):
    """A business category from the catalogue."""

    model_config = ConfigDict(frozen=True)

    category_id: CategoryId
    name: str


class ToolRecord(BaseModel):
    """A tool in the business's stack."""

    model_config = ConfigDict(frozen=True)

    tool_id: ToolId
    category_id: CategoryId
    tier_slug: str


class SopRecord(BaseModel):
    """A documented SOP; only its step count matters for scoring."""

    model_config = ConfigDict(frozen=True)

    sop_id: Union[int, str]
    step_count: int = 0


# ── Aggregation ───────────────────────────────────────────────────────────────


def aggregate_snapshot(
    tools: Iterable[ToolRecord],
    sops: Iterable[SopRecord],
    categories: Iterable[CategoryRecord],
    integrations: Optional[Iterable[tuple[ToolId, ToolId]]] = None,
    integrated_pairs: Optional[int] = None,
    estimated_integration_ratio: float = 0.3,
) -> RawMetrics:
    """Aggregate records into the counts the scoring core consumes.

    Args:
        tools:                       Tools in the stack.
        sops:                        Documented SOPs.
        categories:                  Full category catalogue.
        integrations:                Optional tool-id pairs that exchange data.
        integrated_pairs:            Optional pre-counted pair total; ignored
                                     when ``integrations`` is given.
        estimated_integration_ratio: Fallback pairs-per-tool ratio when no
                                     integration data is supplied.

    Returns:
        RawMetrics with ``category_names`` populated from the catalogue.
    """
    tool_list = list(tools)
    sop_list = list(sops)
    category_list = list(categories)

    per_category = Counter(str(t.category_id) for t in tool_list)
    category_tools: dict[CategoryId, CategoryTools] = {}
    for cat in category_list:
        count = per_category.get(str(cat.category_id), 0)
        if count > 0:
            category_tools[cat.category_id] = CategoryTools(count=count, name=cat.name)

    tier_counts = dict(Counter(t.tier_slug for t in tool_list))

    if sop_list:
        avg_sop_steps = sum(s.step_count for s in sop_list) / len(sop_list)
    else:
        avg_sop_steps = 0.0

    total_tools = len(tool_list)
    if integrations is not None:
        pairs = count_integration_pairs(integrations, {t.tool_id for t in tool_list})
    elif integrated_pairs is not None:
        pairs = integrated_pairs
    else:
        pairs = math.floor(total_tools * estimated_integration_ratio)
        logger.warning(
            "No integration data supplied; estimating %d integrated pairs "
            "(%.0f%% of %d tools).",
            pairs, estimated_integration_ratio * 100, total_tools,
        )

    return RawMetrics(
        category_tools=category_tools,
        integrated_pairs=pairs,
        tier_counts=tier_counts,
        sop_count=len(sop_list),
        avg_sop_steps=avg_sop_steps,
        total_categories=len(category_list),
        total_tools=total_tools,
        category_names={c.category_id: c.name for c in category_list},
    )


def count_integration_pairs(
    integrations: Iterable[tuple[ToolId, ToolId]],
    tool_ids: Optional[set[ToolId]] = None,
) -> int:
    """Count distinct unordered tool pairs.

    ``(a, b)`` and ``(b, a)`` are the same pair; self-pairs are ignored.
    When ``tool_ids`` is given, pairs referencing a tool outside the stack
    are skipped.
    """
    known = {str(t) for t in tool_ids} if tool_ids is not None else None
    seen: set[frozenset[str]] = set()
    for a, b in integrations:
        left, right = str(a), str(b)
        if left == right:
            continue
        if known is not None and (left not in known or right not in known):
            continue
        seen.add(frozenset((left, right)))
    return len(seen)


# ── Snapshot files ────────────────────────────────────────────────────────────


def load_snapshot(path: Path, estimated_integration_ratio: float = 0.3) -> RawMetrics:
    """Read a JSON snapshot file into ``RawMetrics``.

    Args:
        path:                        Snapshot file path.
        estimated_integration_ratio: Forwarded to ``aggregate_snapshot``.

    Raises:
        SnapshotError: File missing, not JSON, or not a recognised shape.
    """
    data = read_snapshot_file(path)
    try:
        metrics = parse_snapshot(data, estimated_integration_ratio)
    except ValidationError as exc:
        raise SnapshotError(f"Snapshot does not match the expected schema: {path}\n{exc}") from exc

    logger.info(
        "Snapshot loaded: %s (%d tools, %d categories, %d SOPs)",
        path, metrics.total_tools, metrics.total_categories, metrics.sop_count,
    )
    return metrics


def read_snapshot_file(path: Path) -> dict[str, Any]:
    """Decode a snapshot file into a dict without interpreting it.

    Raises:
        SnapshotError: File missing, not JSON, or not a JSON object.
    """
    path = Path(path)
    if not path.exists():
        raise SnapshotError(f"Snapshot file not found: {path}")

    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot must be a JSON object: {path}")
    return data


def parse_snapshot(data: dict[str, Any], estimated_integration_ratio: float = 0.3) -> RawMetrics:
    """Build ``RawMetrics`` from an already-decoded snapshot dict.

    Raises:
        SnapshotError: A record section is not a list, or an integration
            entry is not a two-element pair.
        pydantic.ValidationError: Records or metrics fail model validation.
    """
    if "tools" not in data:
        return RawMetrics.model_validate(data.get("metrics", data))

    tools = _record_list(data, "tools")
    sops = _record_list(data, "sops")
    categories = _record_list(data, "categories")
    integrations = _record_list(data, "integrations", optional=True)
    pairs: Optional[list[tuple[ToolId, ToolId]]] = None
    if integrations is not None:
        pairs = []
        for entry in integrations:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise SnapshotError(f"Integration entry must be a [tool_a, tool_b] pair, got {entry!r}.")
            pairs.append((entry[0], entry[1]))

    return aggregate_snapshot(
        tools=[ToolRecord.model_validate(t) for t in tools],
        sops=[SopRecord.model_validate(s) for s in sops],
        categories=[CategoryRecord.model_validate(c) for c in categories],
        integrations=pairs,
        integrated_pairs=data.get("integrated_pairs"),
        estimated_integration_ratio=estimated_integration_ratio,
    )


def _record_list(data: dict[str, Any], key: str, optional: bool = False) -> Optional[list[Any]]:
    """Return ``data[key]`` as a list; absent or null is ``[]`` (``None`` when optional)."""
    value = data.get(key)
    if value is None:
        return None if optional else []
    if not isinstance(value, list):
        raise SnapshotError(
            f"Snapshot field '{key}' must be a list, got {type(value).__name__}."
        )
    return value


def snapshot_label(path: Path) -> str:
    """Label for report filenames: the snapshot's ``label`` field or the file stem."""
    label = read_snapshot_file(path).get("label")
    if isinstance(label, str) and label.strip():
        return label.strip()
    return Path(path).stem
