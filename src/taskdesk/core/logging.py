"""JSON logging for the service.

Records carry the request id bound by ``CorrelationIdMiddleware``. The ids and
statuses that the user, executor and task services attach through ``extra``
are promoted to top-level keys; anything else lands under ``extra``.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from .config import Settings
from .middleware import current_request_id

DOMAIN_FIELDS = ("user_id", "executor_id", "task_id", "executor_status", "task_status")

_STANDARD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
    "request_id",
}


def _jsonable(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)
    return value


class JsonLogFormatter(logging.Formatter):
    """Render one JSON object per log record."""

    def __init__(self, *, service: str, environment: str) -> None:
        super().__init__()
        self._service = service
        self._environment = environment

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
            "environment": self._environment,
            "request_id": getattr(record, "request_id", None) or "-",
        }
        for field in DOMAIN_FIELDS:
            value = record.__dict__.get(field)
            if value is not None:
                payload[field] = _jsonable(value)

        extra = {
            key: _jsonable(value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and key not in DOMAIN_FIELDS and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class RequestContextFilter(logging.Filter):
    """Copy the current request id onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = current_request_id()
        return True


def configure_logging(settings: Settings) -> None:
    """Send every log record to stdout as JSON at the configured level."""

    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.captureWarnings(True)

    routed = {"handlers": ["stdout"], "level": level, "propagate": False}
    loggers: dict[str, dict[str, Any]] = {
        name: dict(routed) for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
    }
    loggers["sqlalchemy.engine"] = {**routed, "level": logging.INFO if settings.db_echo else logging.WARNING}

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": JsonLogFormatter,
                    "service": settings.project_name,
                    "environment": settings.environment,
                }
            },
            "filters": {"request_context": {"()": RequestContextFilter}},
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "json",
                    "filters": ["request_context"],
                }
            },
            "root": {"handlers": ["stdout"], "level": level},
            "loggers": loggers,
        }
    )


__all__ = ["DOMAIN_FIELDS", "JsonLogFormatter", "RequestContextFilter", "configure_logging"]
