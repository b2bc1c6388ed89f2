"""Logging setup for the API process.

JSON lines in production, a plain formatter while developing locally.
``setup_logging`` runs once from the application lifespan.
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("path", "method", "status_code", "resource", "item_id", "email")


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

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
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger. Calling it again replaces our handler."""
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_portfolio_handler", False):
            root.removeHandler(h)

    handler = logging.StreamHandler()
    handler._portfolio_handler = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
