"""Tests for automation_score.assessment and automation_score.utils.logging."""

from __future__ import annotations

import json
import logging

import pytest

from automation_score.assessment import assess
from automation_score.config import AppConfig, LoggingConfig, ScoringConfig
from automation_score.utils.logging import _JsonFormatter, configure_logging


class TestAssess:
    def test_example_assessment(self, example_metrics):
        result = assess(example_metrics)
        assert result.score_result.score == 32
        assert result.description.startswith("Basic - ")
        assert [str(r.type) for r in result.recommendations] == [
            "coverage", "integration", "documentation", "optimization", "data",
        ]

    def test_healthy_assessment_has_no_recommendations(self, healthy_metrics):
        assert assess(healthy_metrics).recommendations == ()

    def test_sort_priority(self, example_metrics):
        # make coverage medium so it sorts behind the high-priority items
        metrics = example_metrics.model_copy(update={"total_categories": 4})
        ordered = assess(metrics, sort_priority=True).recommendations
        priorities = [str(r.priority) for r in ordered]
        assert priorities == sorted(priorities, key=["high", "medium", "low"].index)

    def test_uses_supplied_config(self, example_metrics):
        cfg = AppConfig(
            scoring=ScoringConfig(
                coverage_weight=0.0,
                integration_weight=0.0,
                sophistication_weight=1.0,
                documentation_weight=0.0,
            )
        )
        assert assess(example_metrics, cfg).score_result.score == 100

    def test_logs_summary(self, example_metrics, caplog):
        with caplog.at_level(logging.INFO, logger="automation_score.assessment"):
            assess(example_metrics)
        assert "Assessment complete: score=32 recommendations=5" in caplog.text


class TestLogging:
    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("automation_score").setLevel(logging.NOTSET)

    def test_configure_sets_level(self):
        configure_logging(LoggingConfig(level="WARNING"))
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("automation_score").getEffectiveLevel() == logging.WARNING

    def test_debug_lowers_package_logger_only(self):
        configure_logging(LoggingConfig(level="WARNING"), debug=True)
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("automation_score").level == logging.DEBUG
        assert logging.getLogger("automation_score.scoring.engine").isEnabledFor(logging.DEBUG)

    def test_file_handler_created(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        configure_logging(LoggingConfig(level="INFO", log_file=str(log_file)))
        logging.getLogger("automation_score.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_json_formatter_includes_extras(self):
        record = logging.LogRecord(
            "automation_score.x", logging.INFO, __file__, 1, "scored %d", (32,), None
        )
        record.label = "acme"
        payload = json.loads(_JsonFormatter().format(record))
        assert payload["msg"] == "scored 32"
        assert payload["level"] == "INFO"
        assert payload["label"] == "acme"
