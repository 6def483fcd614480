"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Every key passed via extra= is surfaced; LogRecord's own attributes never are
    - Extras set to None are omitted
    - Record contents are never logged: extras named after payload data are redacted
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: repeated app startups replace, not stack, handlers

Design Decisions:
    - Extras discovered by diffing against a blank LogRecord instead of a fixed
      allow-list: call sites in services/ and api/ add context without touching this module
    - Values json can't encode fall back to str() rather than dropping the line
"""

import logging
import json
from datetime import datetime, timezone

_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

# Validated records may carry passwords; these keys never reach the log stream
REDACTED_KEYS = frozenset({"payload", "record", "value", "password"})
REDACTED = "[redacted]"

_HANDLER_MARK = "_fieldguard_handler"


def record_extras(record: logging.LogRecord) -> dict:
    """Caller-supplied extra= fields of a record, redacted, None values dropped."""
    extras = {}
    for key, val in record.__dict__.items():
        if key in _STANDARD_ATTRS or key.startswith("_") or val is None:
            continue
        extras[key] = REDACTED if key in REDACTED_KEYS else val
    return extras


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, val in record_extras(record).items():
            log.setdefault(key, val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the application handler on the root logger, replacing an earlier one."""
    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_MARK, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
