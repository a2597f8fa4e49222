"""
Unit tests for structured logging and metrics.
"""

import json
import logging

from moresettings.core.rules import FormModel
from moresettings.core.validators import NumberValidator
from moresettings.observability import metrics
from moresettings.observability.logger import get_logger, log_operation, setup_logger
from moresettings.settings import SettingsSearch


def sample(name: str, labels: dict | None = None) -> float:
    return metrics.REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestLogger:
    """Tests for the JSON logger"""

    def test_json_output(self, capsys):
        logger = setup_logger("moresettings-test-json", level="INFO", format_type="json")
        logger.info("hello", extra={"field_name": "qty"})

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["message"] == "hello"
        assert record["level"] == "INFO"
        assert record["logger"] == "moresettings-test-json"
        assert record["field_name"] == "qty"

    def test_text_output(self, capsys):
        logger = setup_logger("moresettings-test-text", level="INFO", format_type="text")
        logger.info("plain message")

        assert "plain message" in capsys.readouterr().err

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        logger = setup_logger("moresettings-test-level")
        assert logger.level == logging.ERROR

    def test_module_loggers_share_package_handler(self):
        logger = get_logger("moresettings.some.module")
        assert logger.handlers == []
        assert logging.getLogger("moresettings").handlers

    def test_log_operation_reports_failure(self, capsys):
        logger = setup_logger("moresettings-test-op", level="INFO", format_type="json")
        try:
            with log_operation("Doing work", logger=logger, page=2):
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["message"] == "Failed: Doing work"
        assert record["status"] == "error"
        assert record["error_type"] == "RuntimeError"
        assert record["page"] == 2


class TestMetrics:
    """Tests for Prometheus counters"""

    def test_validation_failures_counted(self):
        labels = {"rule_type": "number", "field_name": "metric_qty", "kind": "above_maximum"}
        before = sample("moresettings_validation_failures_total", labels)

        NumberValidator("metric_qty", max=1).validate_attribute(
            FormModel(attributes={"metric_qty": 5}), "metric_qty"
        )

        assert sample("moresettings_validation_failures_total", labels) == before + 1

    def test_deferred_resolutions_counted(self):
        before = sample("moresettings_bound_resolutions_total", {"bound": "max"})

        NumberValidator("qty", max=lambda subject, field: 9).validate_attribute(
            FormModel(attributes={"qty": 5}), "qty"
        )

        assert sample("moresettings_bound_resolutions_total", {"bound": "max"}) == before + 1

    def test_settings_searches_counted(self, sample_settings):
        before = sample("moresettings_settings_searches_total", {"status": "unfiltered"})
        SettingsSearch().search(sample_settings, {"status": "x"}, form_name="")
        assert sample("moresettings_settings_searches_total", {"status": "unfiltered"}) == before + 1

    def test_generate_metrics(self):
        assert b"moresettings_validation_failures_total" in metrics.generate_metrics()
        assert metrics.get_content_type().startswith("text/plain")
