"""Structured Logging: registry-aware formatters and one-shot setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Registry extras (token_id, owner, caller, event_kind, error_code, path)
      appear in both formats when present, and only then
    - setup_logging installs exactly one registry handler on the root logger,
      replacing any it installed before

Design Decisions:
    - Formatters on stdlib logging, picked by Settings.log_format ("json" | "text")
    - Text format appends extras as key=value so a burned token id is greppable
      in development output too
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS: tuple[str, ...] = (
    "token_id", "owner", "caller", "event_kind", "error_code", "path",
)


def record_extras(record: logging.LogRecord) -> dict:
    """Registry extras carried by a record, in EXTRA_FIELDS order."""
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with registry extras appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        if not extras:
            return line
        head, sep, trace = line.partition("\n")
        pairs = " ".join(f"{k}={v}" for k, v in extras.items())
        return f"{head} [{pairs}]{sep}{trace}"


_FORMATTERS: dict[str, type[logging.Formatter]] = {
    "json": JSONFormatter,
    "text": TextFormatter,
}


class _RegistryHandler(logging.StreamHandler):
    """Marker type so setup_logging can find its own handler again."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the registry handler on the root logger."""
    try:
        formatter = _FORMATTERS[fmt]()
    except KeyError:
        raise ValueError(f"Unknown log format {fmt!r}") from None
    for existing in [h for h in logging.root.handlers if isinstance(h, _RegistryHandler)]:
        logging.root.removeHandler(existing)
    handler = _RegistryHandler()
    handler.setFormatter(formatter)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
