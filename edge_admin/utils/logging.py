"""
Structured logging utilities for the gateway.

Centralizes logging configuration so the app factory and the CLI behave the
same way. Standard library logging with a human-readable formatter by default
and an optional JSON formatter (LOG_FORMAT=json) for log shippers.

Usage:
    from edge_admin.utils.logging import configure_logging

    configure_logging(level="INFO", json_logs=False)
    logger = logging.getLogger(__name__)
    logger.info("message", extra={"request_id": "..."})
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict

# Keys passed through `extra=` that are copied into JSON log lines
_PROMOTED_FIELDS = (
    "request_id",
    "operation",
    "method",
    "path",
    "status_code",
    "error_code",
    "upstream_status",
    "duration_ms",
    "zone_id",
    "worker_name",
)


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: Dict[str, Any] = {
        "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    for key in _PROMOTED_FIELDS:
        value = getattr(record, key, None)
        if value is not None:
            payload[key] = value
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : str
        Logging level name (e.g., "DEBUG", "INFO", "WARNING").
    json_logs : bool
        Whether to emit logs as JSON. If False, uses a concise human formatter.
    """
    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level,
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )


__all__ = ["configure_logging", "JsonFormatter"]
