"""
logging.py – Logging setup for the snapshot engine.

Modules log through ``logging.getLogger(__name__)``; everything lives under
the ``xbrl_snapshot`` logger, which ``configure_logging`` wires to stdout
once per process (CLI or script entry point). Library use without that call
stays silent apart from Python's last-resort handler.
"""

from __future__ import annotations

import datetime
import json
import logging
import sys
from typing import IO

PACKAGE_LOGGER = "xbrl_snapshot"

# LogRecord attributes forwarded into JSON lines when passed via ``extra=``.
_CONTEXT_FIELDS = ("ticker", "cik", "score")


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """
    Configure the package logger.

    Parameters
    ----------
    level:
        Logging level string: DEBUG, INFO, WARNING, ERROR. Unknown values
        fall back to INFO.
    json_output:
        If True, emit one JSON object per line (useful for log aggregation).
    stream:
        Destination; defaults to stdout.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if json_output:
        formatter: logging.Formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger scoped within the xbrl_snapshot namespace."""
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


class _JsonFormatter(logging.Formatter):
    """Minimal JSON log formatter for structured output."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in _CONTEXT_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)
