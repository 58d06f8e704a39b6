"""Tests for accesscore.logging module."""

from __future__ import annotations

import json
import logging
import os
from typing import Iterator
from unittest.mock import patch

import pytest

from accesscore import (
    AccessConfig,
    AccessFormatter,
    LogLevel,
    get_access_logger,
    safe_preview,
    setup_logging,
)


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo setup_logging() changes to the root logger."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSafePreview:
    """Tests for safe_preview function."""

    def test_none_value(self) -> None:
        """Test that None returns empty string."""
        assert safe_preview(None) == ""

    def test_string_value(self) -> None:
        """Test string values are preserved."""
        assert safe_preview("hello") == "hello"

    def test_string_with_whitespace(self) -> None:
        """Test that whitespace is normalized."""
        assert safe_preview("hello\n\tworld  test") == "hello world test"

    def test_string_truncation(self) -> None:
        """Test that long strings are truncated."""
        result = safe_preview("a" * 300, limit=100)
        assert len(result) == 100
        assert result.endswith("…")

    def test_dict_value(self) -> None:
        """Test that dicts are converted to JSON."""
        result = safe_preview({"crm": {"leads": ["read"]}})
        assert result == '{"crm": {"leads": ["read"]}}'

    def test_set_value(self) -> None:
        """Test that sets are rendered in sorted order."""
        assert safe_preview({"b", "a"}) == '["a", "b"]'


class TestAccessFormatter:
    """Tests for AccessFormatter."""

    def test_json_format(self) -> None:
        """Test JSON formatter includes tenant/plan context."""
        formatter = AccessFormatter(json_format=True)
        result = formatter.format(_record(tenant_id="t-1", plan_id="starter"))

        data = json.loads(result)
        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert data["tenant_id"] == "t-1"
        assert data["plan_id"] == "starter"

    def test_json_format_extra_fields(self) -> None:
        """Test non-standard record attributes are previewed."""
        formatter = AccessFormatter(json_format=True)
        data = json.loads(formatter.format(_record(applications=["crm", "hr"])))
        assert data["applications"] == '["crm", "hr"]'

    def test_plain_format(self) -> None:
        """Test plain text formatter."""
        formatter = AccessFormatter(json_format=False)
        result = formatter.format(_record(tenant_id="t-1"))

        assert "INFO" in result
        assert "Test message" in result
        assert "tenant_id=t-1" in result

    def test_without_context(self) -> None:
        """Test context can be left out."""
        formatter = AccessFormatter(include_context=False, json_format=False)
        result = formatter.format(_record(tenant_id="t-1"))
        assert "tenant_id" not in result


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_with_config(self) -> None:
        """Test logging setup with AccessConfig."""
        setup_logging(config=AccessConfig(log_level=LogLevel.DEBUG), json_format=False)
        assert logging.getLogger().level == logging.DEBUG

    @patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}, clear=True)
    def test_setup_with_env(self) -> None:
        """Test logging setup loading from environment."""
        setup_logging(json_format=False)
        assert logging.getLogger().level == logging.WARNING

    def test_single_handler(self) -> None:
        """Test repeated setup does not stack handlers."""
        setup_logging(config=AccessConfig())
        setup_logging(config=AccessConfig())
        assert len(logging.getLogger().handlers) == 1

    def test_json_format(self, capsys: pytest.CaptureFixture) -> None:
        """Test JSON format output."""
        setup_logging(config=AccessConfig(log_json=True))

        get_access_logger("test", tenant_id="t-1").info("Test message")

        data = json.loads(capsys.readouterr().err.strip())
        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert data["logger"] == "test"
        assert data["tenant_id"] == "t-1"

    def test_plain_format(self, capsys: pytest.CaptureFixture) -> None:
        """Test plain text format output."""
        setup_logging(config=AccessConfig(log_level=LogLevel.INFO), json_format=False)

        logging.getLogger("test").info("Test message")

        stderr_output = capsys.readouterr().err.strip()
        assert "INFO" in stderr_output
        assert "Test message" in stderr_output
        assert not stderr_output.startswith("{")


class TestAccessLogger:
    """Tests for the tenant/plan logger adapter."""

    def test_adapter_context(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test adapter attaches tenant_id and plan_id."""
        logger = get_access_logger("test", tenant_id="t-1", plan_id="free")

        with caplog.at_level(logging.INFO, logger="test"):
            logger.info("Provisioned")

        (record,) = caplog.records
        assert record.tenant_id == "t-1"
        assert record.plan_id == "free"

    def test_per_call_override(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test per-call plan_id overrides the adapter default."""
        logger = get_access_logger("test", tenant_id="t-1", plan_id="free")

        with caplog.at_level(logging.INFO, logger="test"):
            logger.info("Upgraded", plan_id="starter")

        assert caplog.records[0].plan_id == "starter"

    def test_without_context(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test adapter without context adds nothing."""
        logger = get_access_logger("test")

        with caplog.at_level(logging.INFO, logger="test"):
            logger.info("Test message")

        assert not hasattr(caplog.records[0], "tenant_id")
