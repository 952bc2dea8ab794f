from __future__ import annotations

import json
import logging
import sys

from edge_admin.utils.logging import JsonFormatter, _json_formatter, configure_logging

UPSTREAM_STATUS = 502
DURATION_MS = 12.5


def _record(msg: str = "hello", exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


def test_json_formatter_promotes_request_fields() -> None:
    record = _record()
    record.request_id = "req-1"
    record.upstream_status = UPSTREAM_STATUS
    record.duration_ms = DURATION_MS

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["request_id"] == "req-1"
    assert payload["upstream_status"] == UPSTREAM_STATUS
    assert payload["duration_ms"] == DURATION_MS
    assert "timestamp" in payload


def test_json_formatter_ignores_unknown_extras() -> None:
    record = _record()
    record.api_key = "secret"

    payload = json.loads(_json_formatter(record))

    assert "api_key" not in payload
    assert "secret" not in json.dumps(payload)


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("bad value")
    except ValueError:
        record = _record("failed", exc_info=sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))

    assert "ValueError: bad value" in payload["exc_info"]


def test_configure_logging_installs_json_handler() -> None:
    root = logging.getLogger()
    previous_handlers = root.handlers[:]
    previous_level = root.level
    try:
        configure_logging(level="WARNING", json_logs=True)

        assert root.level == logging.WARNING
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)
