"""Structured JSON logging configuration."""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Keys passed via `extra={...}` become top-level fields next to
    timestamp, level, logger and message.
    """

    # Standard LogRecord attributes that should not be included as extra fields
    _STANDARD_ATTRS = frozenset({
        'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
        'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname',
        'process', 'processName', 'relativeCreated', 'thread', 'threadName',
        'exc_info', 'exc_text', 'stack_info', 'taskName',
    })

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat(timespec="milliseconds").replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self._STANDARD_ATTRS and not callable(value):
                log_data[key] = value

        # ensure_ascii off so Japanese lemmas stay readable; default=str for sets/paths
        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_structured_logging(level: str | None = None) -> None:
    """Install the JSON formatter on the root logger.

    Also quiets uvicorn access logs and httpx per-request INFO lines.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger = logging.getLogger()
    root_logger.setLevel(level or LOG_LEVEL)
    root_logger.handlers = [handler]

    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.handlers = [handler]
    uvicorn_access.setLevel(logging.WARNING)

    logging.getLogger("httpx").setLevel(logging.WARNING)
