"""Tests for automation_score.config: models, layered loading and env overrides."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from automation_score.config import (
    AppConfig,
    LoggingConfig,
    RecommendationConfig,
    ScoringConfig,
    load_config,
)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "default.toml"

_ENV_VARS = ("AUTOMATION_SCORE_LOG_LEVEL", "AUTOMATION_SCORE_OUTPUT_DIR", "AUTOMATION_SCORE_DEBUG")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config" / "default.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


# ── Models ────────────────────────────────────────────────────────────────────


class TestScoringConfig:
    def test_default_weights(self):
        cfg = ScoringConfig()
        assert (
            cfg.coverage_weight,
            cfg.integration_weight,
            cfg.sophistication_weight,
            cfg.documentation_weight,
        ) == (0.40, 0.25, 0.20, 0.15)

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValidationError, match="sum to 1.0"):
            ScoringConfig(coverage_weight=0.5)

    def test_rebalanced_weights_accepted(self):
        cfg = ScoringConfig(coverage_weight=0.25, integration_weight=0.25,
                            sophistication_weight=0.25, documentation_weight=0.25)
        assert cfg.documentation_weight == 0.25

    def test_weight_out_of_range(self):
        with pytest.raises(ValidationError, match=r"\[0.0, 1.0\]"):
            ScoringConfig(coverage_weight=1.5, integration_weight=-0.5)

    def test_non_positive_target(self):
        with pytest.raises(ValidationError, match="positive"):
            ScoringConfig(target_sops_per_category=0)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            ScoringConfig().coverage_weight = 0.1


class TestRecommendationConfig:
    def test_ratio_out_of_range(self):
        with pytest.raises(ValidationError):
            RecommendationConfig(integration_ratio_threshold=2.0)


class TestLoggingConfig:
    def test_level_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_bad_level(self):
        with pytest.raises(ValidationError, match="Log level"):
            LoggingConfig(level="LOUD")


# ── load_config ───────────────────────────────────────────────────────────────


class TestLoadConfig:
    def test_shipped_defaults_match_models(self):
        assert load_config(DEFAULT_CONFIG_PATH) == AppConfig()

    def test_default_path_used_when_none(self):
        assert load_config() == load_config(DEFAULT_CONFIG_PATH)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "absent.toml")

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        path = _write_config(tmp_path, "[recommendations]\ndata_min_tools = 8\n")
        cfg = load_config(path)
        assert cfg.recommendations.data_min_tools == 8
        assert cfg.recommendations.enterprise_min_tools == 5
        assert cfg.scoring == ScoringConfig()

    def test_local_toml_deep_merged(self, tmp_path: Path):
        path = _write_config(
            tmp_path,
            '[scoring.tier_weights]\n"free" = 0.3\n"low-cost" = 0.7\n"enterprise" = 1.0\n',
        )
        (path.parent / "local.toml").write_text(
            '[scoring.tier_weights]\n"free" = 0.2\n', encoding="utf-8"
        )
        weights = load_config(path).scoring.tier_weights
        assert weights == {"free": 0.2, "low-cost": 0.7, "enterprise": 1.0}

    def test_invalid_weights_in_file(self, tmp_path: Path):
        path = _write_config(tmp_path, "[scoring]\ncoverage_weight = 0.9\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_project_debug_flag(self, tmp_path: Path):
        path = _write_config(tmp_path, "[project]\ndebug = true\n")
        assert load_config(path).debug is True


class TestEnvOverrides:
    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("AUTOMATION_SCORE_LOG_LEVEL", "warning")
        assert load_config(DEFAULT_CONFIG_PATH).logging.level == "WARNING"

    def test_output_dir(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("AUTOMATION_SCORE_OUTPUT_DIR", str(tmp_path))
        assert load_config(DEFAULT_CONFIG_PATH).output.report_dir == str(tmp_path)

    @pytest.mark.parametrize("value, expected", [("1", True), ("true", True), ("no", False)])
    def test_debug(self, monkeypatch, value, expected):
        monkeypatch.setenv("AUTOMATION_SCORE_DEBUG", value)
        assert load_config(DEFAULT_CONFIG_PATH).debug is expected
