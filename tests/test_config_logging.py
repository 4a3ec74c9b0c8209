"""Tests for config and logging."""

import json
import logging
import os
from decimal import Decimal
from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

from finance_engine.config import EngineConfig, OutputConfig, WindowConfig
from finance_engine.exceptions import ConfigurationError
from finance_engine.logging import JsonFormatter, configure_logging, setup_logging


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self) -> None:
        config = OutputConfig()

        assert config.json_output_dir == Path("output")
        assert config.pretty_json is False


class TestWindowConfig:
    """Tests for WindowConfig."""

    def test_default_values(self) -> None:
        config = WindowConfig()

        assert config.trend_days == 30
        assert config.weekly_buckets == 12
        assert config.spending_history_months == 3

    @pytest.mark.parametrize("name", ["trend_days", "weekly_buckets", "spending_history_months"])
    def test_non_positive_window_rejected(self, name: str) -> None:
        with pytest.raises(ConfigurationError, match=name):
            WindowConfig(**{name: 0})


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_default_values(self) -> None:
        config = EngineConfig()

        assert config.currency == "USD"
        assert config.faker_locale == "es_ES"
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig(log_level="LOUD")

    def test_invalid_log_format(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig(log_format="xml")

    def test_to_dict(self) -> None:
        result = EngineConfig(seed=7).to_dict()

        assert result["seed"] == 7
        assert result["json_output_dir"] == "output"
        assert result["trend_days"] == 30

    def test_from_env_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = EngineConfig.from_env()

        assert config.seed is None
        assert config.windows.weekly_buckets == 12
        assert config.output.pretty_json is False

    def test_from_env_custom(self) -> None:
        env = {
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
            "CURRENCY": "EUR",
            "OUTPUT_DIR": "/tmp/reports",
            "PRETTY_JSON": "true",
            "SEED": "42",
            "FAKER_LOCALE": "en_US",
            "TREND_DAYS": "14",
            "WEEKLY_BUCKETS": "8",
            "SPENDING_HISTORY_MONTHS": "6",
        }
        with patch.dict(os.environ, env, clear=True):
            config = EngineConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.currency == "EUR"
        assert config.output.json_output_dir == Path("/tmp/reports")
        assert config.output.pretty_json is True
        assert config.seed == 42
        assert config.faker_locale == "en_US"
        assert config.windows.trend_days == 14
        assert config.windows.weekly_buckets == 8
        assert config.windows.spending_history_months == 6

    def test_from_env_non_integer(self) -> None:
        with patch.dict(os.environ, {"SEED": "abc"}, clear=True):
            with pytest.raises(ConfigurationError, match="SEED"):
                EngineConfig.from_env()


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_standard(self) -> None:
        setup_logging("DEBUG", "standard")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_setup_logging_json(self) -> None:
        setup_logging("INFO", "json")

        root = logging.getLogger()
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_setup_logging_quiets_faker(self) -> None:
        setup_logging("DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING
        assert logging.getLogger("finance_engine").level == logging.DEBUG

    def test_json_formatter(self) -> None:
        record = logging.LogRecord(
            name="finance_engine.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Applied %d auto-saves",
            args=(2,),
            exc_info=None,
        )
        record.extra = {"goal_id": "goal-001"}

        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "finance_engine.test"
        assert data["message"] == "Applied 2 auto-saves"
        assert data["goal_id"] == "goal-001"
        assert "timestamp" in data

    def test_json_formatter_renders_amounts(self) -> None:
        record = logging.LogRecord(
            name="finance_engine.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Auto-save",
            args=(),
            exc_info=None,
        )
        record.extra = {"amount": Decimal("50.00")}

        data = json.loads(JsonFormatter().format(record))

        assert data["amount"] == "50.00"

    def test_setup_logging_writes_to_stream(self) -> None:
        stream = StringIO()
        setup_logging("INFO", "standard", stream=stream)

        logging.getLogger("finance_engine.test").info("Refreshed dashboard")

        assert "Refreshed dashboard" in stream.getvalue()
        assert "INFO" in stream.getvalue()

    def test_repeated_setup_keeps_one_handler(self) -> None:
        setup_logging("INFO")
        setup_logging("INFO")

        assert len(logging.getLogger().handlers) == 1

    def test_configure_logging_from_config(self) -> None:
        config = EngineConfig(log_level="WARNING", log_format="json")

        handler = configure_logging(config)

        assert isinstance(handler.formatter, JsonFormatter)
        assert logging.getLogger().level == logging.WARNING
