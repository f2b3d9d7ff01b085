"""Logging setup for loan-ledger.

Store and repository messages carry their subject as ``extra`` fields
(``loan_id``, ``payment_id``, ``path``, ``count``) rather than baking it
into the text. Both formatters render whichever of them a record has.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

CONTEXT_FIELDS = ("loan_id", "payment_id", "path", "count")


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the context fields set on ``record``, in a fixed order."""
    return {name: getattr(record, name) for name in CONTEXT_FIELDS if hasattr(record, name)}


class ContextFormatter(logging.Formatter):
    """Plain-text formatter that appends context as ``key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = record_context(record)
        if not context:
            return text
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{text} [{pairs}]"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with context fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure logging for loan-ledger.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        "standard" for text lines or "json" for one object per line.
    stream : TextIO | None
        Where to write. Defaults to stdout.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = JsonFormatter() if format_type == "json" else ContextFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("loan_ledger").setLevel(log_level)

    # Faker logs every provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (usually ``__name__``)."""
    return logging.getLogger(name)
