"""
Shared pytest fixtures for the automation-score test suite.

Provides:
  - ``example_metrics``: the worked example snapshot (final score 32).
  - ``healthy_metrics``: a snapshot for which no recommendation rule fires.
  - ``category_names``: five-category id -> name lookup.
  - ``record_snapshot``: a record-list snapshot dict (tools, SOPs, categories).
  - ``quiet_config_path``: a TOML config with WARNING logging, for CLI tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from automation_score.models.metrics import CategoryTools, RawMetrics

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "default.toml"


@pytest.fixture
def example_metrics() -> RawMetrics:
    """Two of five categories fully tooled, ten enterprise tools, nothing else."""
    return RawMetrics(
        category_tools={1: CategoryTools(count=5), 2: CategoryTools(count=5)},
        integrated_pairs=0,
        tier_counts={"enterprise": 10},
        sop_count=0,
        avg_sop_steps=0.0,
        total_categories=5,
        total_tools=10,
    )


@pytest.fixture
def healthy_metrics() -> RawMetrics:
    """Every category tooled, 8/15 pairs integrated, SOP coverage 50%, low-cost mix."""
    return RawMetrics(
        category_tools={1: CategoryTools(count=3), 2: CategoryTools(count=3)},
        integrated_pairs=8,
        tier_counts={"low-cost": 6},
        sop_count=3,
        avg_sop_steps=5.0,
        total_categories=2,
        total_tools=6,
    )


@pytest.fixture
def category_names() -> dict[int, str]:
    return {1: "Sales", 2: "Marketing", 3: "Finance", 4: "HR", 5: "Operations"}


@pytest.fixture
def record_snapshot() -> dict[str, Any]:
    """Record-list snapshot: 3 categories, 4 tools (one outside the catalogue), 2 SOPs."""
    return {
        "label": "acme",
        "categories": [
            {"category_id": 1, "name": "Sales"},
            {"category_id": 2, "name": "Marketing"},
            {"category_id": 3, "name": "Finance"},
        ],
        "tools": [
            {"tool_id": "crm", "category_id": 1, "tier_slug": "free"},
            {"tool_id": "dialer", "category_id": 1, "tier_slug": "enterprise"},
            {"tool_id": "mailer", "category_id": 2, "tier_slug": "low-cost"},
            {"tool_id": "misc", "category_id": 99, "tier_slug": "free"},
        ],
        "sops": [
            {"sop_id": 1, "step_count": 4},
            {"sop_id": 2, "step_count": 6},
        ],
        "integrations": [
            ["crm", "dialer"],
            ["dialer", "crm"],
            ["crm", "crm"],
            ["crm", "unknown-tool"],
            ["mailer", "dialer"],
        ],
    }


@pytest.fixture
def quiet_config_path(tmp_path: Path) -> Path:
    """Config file identical to the defaults except WARNING-level logging."""
    path = tmp_path / "config" / "test.toml"
    path.parent.mkdir(parents=True)
    path.write_text(
        '[logging]\nlevel = "WARNING"\nlog_file = ""\n'
        f'[output]\nreport_dir = "{(tmp_path / "reports").as_posix()}"\n',
        encoding="utf-8",
    )
    return path
