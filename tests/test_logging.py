from __future__ import annotations

import io
import json
import logging

from taskdesk.core.config import Settings
from taskdesk.core.logging import JsonLogFormatter, configure_logging
from taskdesk.core.middleware import request_id_scope


def _capture(settings: Settings, emit) -> dict:
    configure_logging(settings)
    handler = next(h for h in logging.getLogger().handlers if isinstance(h.formatter, JsonLogFormatter))
    buffer = io.StringIO()
    previous_stream = handler.setStream(buffer)
    try:
        emit()
    finally:
        handler.flush()
        handler.setStream(previous_stream)
    lines = buffer.getvalue().strip().splitlines()
    assert lines, "Expected a structured log line"
    return json.loads(lines[-1])


def test_configure_logging_outputs_json_with_request_id() -> None:
    settings = Settings(environment="test", log_level="INFO")

    def emit() -> None:
        with request_id_scope("req-json-1"):
            logging.getLogger("taskdesk.tests.logging").info(
                "structured log event", extra={"component": "unit-test"}
            )

    payload = _capture(settings, emit)

    assert payload["message"] == "structured log event"
    assert payload["request_id"] == "req-json-1"
    assert payload["environment"] == "test"
    assert payload["service"] == settings.project_name
    assert payload["level"] == "INFO"
    assert payload["extra"] == {"component": "unit-test"}


def test_task_and_executor_fields_are_top_level() -> None:
    def emit() -> None:
        logging.getLogger("taskdesk.services.coordinator").info(
            "Task status updated",
            extra={"task_id": 7, "executor_id": 3, "task_status": "done", "executor_status": "free"},
        )

    payload = _capture(Settings(environment="ci"), emit)

    assert payload["task_id"] == 7
    assert payload["executor_id"] == 3
    assert payload["task_status"] == "done"
    assert payload["executor_status"] == "free"
    assert payload["request_id"] == "-"
    assert "extra" not in payload


def test_sqlalchemy_logger_follows_db_echo() -> None:
    configure_logging(Settings(environment="ci", db_echo=True))
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO

    configure_logging(Settings(environment="ci", db_echo=False))
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
