"""Structured Logging - JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (employee_id, field, error_code, path, affected_rows) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on the standard logging module: no extra dependency
    - setup_logging called once on startup via lifespan; repeated calls are no-ops
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "employee_id", "field", "error_code", "path", "affected_rows",
)

_HANDLER_NAME = "employee_api"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure logging for the application."""
    if any(h.get_name() == _HANDLER_NAME for h in logging.root.handlers):
        logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
        return
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
