"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``AUTOMATION_SCORE_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

Every model's defaults equal the shipped scoring constants, so the pure
scoring and recommendation functions can be called without any config file;
``ScoringConfig()`` and ``RecommendationConfig()`` are the canonical values.
"""

from __future__ import annotations

import math
import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from automation_score.taxonomy.tier_taxonomy import DEFAULT_TIER_WEIGHT, TIER_WEIGHTS

# ── Sub-config models ─────────────────────────────────────────────────────────


class ScoringConfig(BaseModel):
    """Weights and targets for the four-component automation score.

    The component weights must sum to exactly 1.0 so that a perfect snapshot
    scores 100.
    """

    model_config = ConfigDict(frozen=True)

    coverage_weight:        float = 0.40
    integration_weight:     float = 0.25
    sophistication_weight:  float = 0.20
    documentation_weight:   float = 0.15

    tier_weights: dict[str, float] = Field(
        default_factory=lambda: {str(k): v for k, v in TIER_WEIGHTS.items()}
    )
    default_tier_weight: float = DEFAULT_TIER_WEIGHT

    tools_per_category_cap:    int = 5      # density plateaus at this many tools
    category_coverage_blend:   float = 0.5  # rest goes to tool density
    target_sops_per_category:  int = 3
    target_steps_per_sop:      int = 5
    sop_coverage_blend:        float = 0.7  # rest goes to SOP quality

    @field_validator(
        "coverage_weight",
        "integration_weight",
        "sophistication_weight",
        "documentation_weight",
        "default_tier_weight",
        "category_coverage_blend",
        "sop_coverage_blend",
    )
    @classmethod
    def validate_unit_interval(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Value must be in [0.0, 1.0], got {v}.")
        return v

    @field_validator("tools_per_category_cap", "target_sops_per_category", "target_steps_per_sop")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Target must be positive, got {v}.")
        return v

    @model_validator(mode="after")
    def validate_weights_sum(self) -> "ScoringConfig":
        total = (
            self.coverage_weight
            + self.integration_weight
            + self.sophistication_weight
            + self.documentation_weight
        )
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Component weights must sum to 1.0, got {total}.")
        return self


class RecommendationConfig(BaseModel):
    """Thresholds for the rule-based recommendation generator."""

    model_config = ConfigDict(frozen=True)

    max_named_missing_categories: int = 3

    integration_ratio_threshold:      float = 0.5
    integration_high_priority_ratio:  float = 0.3
    integration_min_tools:            int = 3

    sop_coverage_threshold:  float = 0.5
    sop_target_share:        float = 0.7   # suggested SOPs aim for 70% of target

    free_tier_share_threshold:      float = 0.7
    free_tier_high_priority_share:  float = 0.9
    free_tier_min_tools:            int = 3

    enterprise_share_threshold:  float = 0.7
    enterprise_min_tools:        int = 5

    data_integration_ratio_threshold:  float = 0.4
    data_min_tools:                    int = 5

    @field_validator(
        "integration_ratio_threshold",
        "integration_high_priority_ratio",
        "sop_coverage_threshold",
        "sop_target_share",
        "free_tier_share_threshold",
        "free_tier_high_priority_share",
        "enterprise_share_threshold",
        "data_integration_ratio_threshold",
    )
    @classmethod
    def validate_ratio(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Ratio threshold must be in [0.0, 1.0], got {v}.")
        return v


class IngestionConfig(BaseModel):
    """Snapshot aggregation settings."""

    model_config = ConfigDict(frozen=True)

    # Used only when no integration data is supplied with a snapshot.
    estimated_integration_ratio: float = 0.3


class OutputConfig(BaseModel):
    """Report output paths."""

    model_config = ConfigDict(frozen=True)

    report_dir: str = "data/outputs/assessments"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    CLI commands receive an ``AppConfig`` instance built by ``load_config()``.
    """

    model_config = ConfigDict(frozen=True)

    scoring: ScoringConfig = ScoringConfig()
    recommendations: RecommendationConfig = RecommendationConfig()
    ingestion: IngestionConfig = IngestionConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply AUTOMATION_SCORE_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply AUTOMATION_SCORE_* env vars to the raw config dict.

    Supported overrides:
      AUTOMATION_SCORE_LOG_LEVEL   → raw["logging"]["level"]
      AUTOMATION_SCORE_OUTPUT_DIR  → raw["output"]["report_dir"]
      AUTOMATION_SCORE_DEBUG       → raw["debug"]
    """
    if log_level := os.environ.get("AUTOMATION_SCORE_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if output_dir := os.environ.get("AUTOMATION_SCORE_OUTPUT_DIR"):
        raw.setdefault("output", {})["report_dir"] = output_dir

    if debug := os.environ.get("AUTOMATION_SCORE_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        scoring=ScoringConfig(**raw.get("scoring", {})),
        recommendations=RecommendationConfig(**raw.get("recommendations", {})),
        ingestion=IngestionConfig(**raw.get("ingestion", {})),
        output=OutputConfig(**raw.get("output", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
