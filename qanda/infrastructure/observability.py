"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, path, operation, identifiers) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging installs at most one handler, however often it runs

Design Decisions:
    - JSONFormatter on the stdlib logging module: no extra dependency
    - setup_logging called on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "error_code", "path", "operation", "question_uuid", "answer_uuid",
)
_HANDLER_NAME = "qanda"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure root logging; replaces the handler a previous call installed."""
    for existing in [h for h in logging.root.handlers if h.get_name() == _HANDLER_NAME]:
        logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
