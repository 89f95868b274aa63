"""Tests for the structlog configuration."""

from __future__ import annotations

import json
import logging
from io import StringIO

import structlog

from article_reader.logging_config import configure_logging, request_id_var


def _emit(log_level: str, event: str, **fields) -> list[str]:
    buffer = StringIO()
    configure_logging(log_level, stream=buffer)
    structlog.get_logger("tests.logging").warning(event, **fields)
    for handler in logging.getLogger().handlers:
        handler.flush()
    return [line for line in buffer.getvalue().splitlines() if line.strip()]


class TestConfigureLogging:
    def test_info_level_emits_json(self) -> None:
        lines = _emit("INFO", "render_timeout", url="https://example.com/")

        record = json.loads(lines[-1])
        assert record["event"] == "render_timeout"
        assert record["url"] == "https://example.com/"
        assert record["level"] == "warning"
        assert "timestamp" in record

    def test_secret_keys_are_redacted(self) -> None:
        lines = _emit(
            "INFO",
            "fallback_http_error",
            api_key="fc-secret",
            headers={"Authorization": "Bearer fc-secret", "Accept": "application/json"},
        )

        record = json.loads(lines[-1])
        assert record["api_key"] == "[REDACTED]"
        assert record["headers"]["Authorization"] == "[REDACTED]"
        assert record["headers"]["Accept"] == "application/json"
        assert "fc-secret" not in lines[-1]

    def test_request_id_injected(self) -> None:
        token = request_id_var.set("req-123")
        try:
            lines = _emit("INFO", "request_complete")
        finally:
            request_id_var.reset(token)

        assert json.loads(lines[-1])["request_id"] == "req-123"

    def test_stdlib_records_are_rendered(self) -> None:
        buffer = StringIO()
        configure_logging("INFO", stream=buffer)
        logging.getLogger("tests.stdlib").error("plain stdlib message")

        record = json.loads(buffer.getvalue().strip().splitlines()[-1])
        assert record["event"] == "plain stdlib message"

    def test_reconfiguring_does_not_duplicate_handlers(self) -> None:
        configure_logging("INFO")
        configure_logging("INFO")

        assert len(logging.getLogger().handlers) == 1

    def test_debug_uses_console_renderer(self) -> None:
        lines = _emit("DEBUG", "console_event")

        assert "console_event" in lines[-1]
        assert not lines[-1].lstrip().startswith("{")
