"""Structured Logging — one-line JSON records for the exercise tracker.

Invariants:
    - Every record carries timestamp, level, logger name, and message
    - Request context (user_id, username, exercise_id, error_code, path, count)
      is copied from logging extras when present
    - setup_logging installs exactly one handler, however often the lifespan runs

Design Decisions:
    - stdlib logging with a small Formatter subclass: the service logs a handful
      of flat events, log shippers only need one JSON object per line
    - "text" format for local runs and tests
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "user_id", "username", "exercise_id", "error_code", "category",
    "severity", "path", "count",
)

_HANDLER_NAME = "exercise_tracker"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key]) for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Attach the service's stream handler to the root logger."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
