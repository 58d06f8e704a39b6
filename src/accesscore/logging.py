"""Centralized logging utilities for accesscore.

This module provides:
- Logging configuration from AccessConfig
- Safe preview utility for logged values
- Structured logging with tenant_id / plan_id propagation
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import AccessConfig, LogLevel

_CONTEXT_FIELDS = ("tenant_id", "plan_id")

_STANDARD_RECORD_FIELDS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info", "taskName",
    *_CONTEXT_FIELDS,
})


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a safe, length-bounded preview of a value for logging.

    Converts any value to a single-line string, normalizes whitespace
    and truncates to ``limit`` characters.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A truncated single-line string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list, tuple, set, frozenset)):
        try:
            s = json.dumps(
                sorted(value) if isinstance(value, (set, frozenset)) else value,
                default=str,
                ensure_ascii=False,
            )
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


class AccessFormatter(logging.Formatter):
    """Formatter that includes tenant/plan context and optional JSON output."""

    def __init__(
        self,
        include_context: bool = True,
        json_format: bool = True,
        *args: Any,
        **kwargs: Any,
    ):
        """Initialize the formatter.

        Args:
            include_context: Whether to include tenant_id / plan_id in logs
            json_format: Whether to output JSON (True) or plain text (False)
        """
        super().__init__(*args, **kwargs)
        self.include_context = include_context
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = {
            field: getattr(record, field)
            for field in _CONTEXT_FIELDS
            if getattr(record, field, None)
        }
        if self.include_context:
            log_data.update(context)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_FIELDS:
                log_data[key] = safe_preview(value)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            f"{log_data['level']}",
            f"{log_data['logger']}",
        ]
        if self.include_context:
            parts.extend(f"{field}={value}" for field, value in context.items())
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class AccessLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds tenant_id and plan_id to log records.

    Usage:
        logger = get_access_logger(__name__, tenant_id="t-1")
        logger.warning("Plan not found", plan_id="gold")
    """

    def __init__(
        self,
        logger: logging.Logger,
        tenant_id: Optional[str] = None,
        plan_id: Optional[str] = None,
    ):
        super().__init__(logger, {})
        self.tenant_id = tenant_id
        self.plan_id = plan_id

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Process log message and add tenant/plan context."""
        tenant_id = kwargs.pop("tenant_id", self.tenant_id)
        plan_id = kwargs.pop("plan_id", self.plan_id)

        extra = kwargs.get("extra", {})
        if tenant_id:
            extra["tenant_id"] = tenant_id
        if plan_id:
            extra["plan_id"] = plan_id
        kwargs["extra"] = extra

        return msg, kwargs


def setup_logging(
    config: Optional[AccessConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure logging for a process embedding accesscore.

    Sets the root level from AccessConfig and installs a single
    console handler with AccessFormatter.

    Args:
        config: AccessConfig instance (if None, loads from environment)
        json_format: Override config.log_json when given
    """
    if config is None:
        from .config import load_access_config_from_env
        config = load_access_config_from_env()

    level_map = {
        LogLevel.DEBUG.value: logging.DEBUG,
        LogLevel.INFO.value: logging.INFO,
        LogLevel.WARNING.value: logging.WARNING,
        LogLevel.ERROR.value: logging.ERROR,
        LogLevel.CRITICAL.value: logging.CRITICAL,
    }
    log_level = level_map.get(LogLevel(config.log_level).value, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        AccessFormatter(
            include_context=True,
            json_format=config.log_json if json_format is None else json_format,
        )
    )
    root_logger.addHandler(console_handler)

    if config.service_name:
        logging.getLogger(config.service_name).setLevel(log_level)


def get_access_logger(
    name: str,
    tenant_id: Optional[str] = None,
    plan_id: Optional[str] = None,
) -> AccessLoggerAdapter:
    """Get a logger adapter carrying tenant/plan context.

    Args:
        name: Logger name (typically __name__)
        tenant_id: Optional tenant_id to include in all logs
        plan_id: Optional plan_id to include in all logs

    Returns:
        AccessLoggerAdapter instance
    """
    logger = logging.getLogger(name)
    return AccessLoggerAdapter(logger, tenant_id=tenant_id, plan_id=plan_id)


__all__ = [
    "safe_preview",
    "AccessFormatter",
    "AccessLoggerAdapter",
    "setup_logging",
    "get_access_logger",
]
