"""Structured Logging — JSON formatter and setup for library consumers.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Graph extra fields (owner_uuid, object_uuid, attribute, key, error_code) surfaced when present
    - setup_logging never stacks a second handler of its own on repeated calls

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Library modules only call logging.getLogger(__name__); handlers are the host's choice
"""

import json
import logging
from datetime import datetime, timezone

from pbxgraph.config import get_settings

_EXTRA_FIELDS = ("owner_uuid", "object_uuid", "attribute", "key", "error_code")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _PbxGraphHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Configure the pbxgraph logger; defaults come from Settings."""
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format

    logger = logging.getLogger("pbxgraph")
    for existing in list(logger.handlers):
        if isinstance(existing, _PbxGraphHandler):
            logger.removeHandler(existing)

    handler = _PbxGraphHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
