"""Logging setup shared by the library and the server."""

from __future__ import annotations

import logging
import sys

from htmltoc.config import HTMLTOC_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}

_configured = False


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends ``extra=`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return message
        fields = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} | {fields}"


def configure_logging(level: str | None = None) -> None:
    """Install a single stderr handler on the ``htmltoc`` and ``server`` loggers.

    Args:
        level: Log level name. Defaults to ``HTMLTOC_LOG_LEVEL``.
    """
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFieldsFormatter(_LOG_FORMAT))
    resolved = logging.getLevelName((level or HTMLTOC_LOG_LEVEL).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    for name in ("htmltoc", "server"):
        logger = logging.getLogger(name)
        logger.addHandler(handler)
        logger.setLevel(resolved)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring handlers on first use."""
    configure_logging()
    return logging.getLogger(name)
