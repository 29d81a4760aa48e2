"""Tests for logging configuration."""

from __future__ import annotations

import logging

from htmltoc.utils.logging_config import ExtraFieldsFormatter, get_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("htmltoc.test", logging.INFO, __file__, 1, "Processed", (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_extra_fields() -> None:
    formatter = ExtraFieldsFormatter("%(message)s")

    assert formatter.format(_record(count=2, cached=False)) == "Processed | cached=False count=2"


def test_formatter_without_extras() -> None:
    assert ExtraFieldsFormatter("%(message)s").format(_record()) == "Processed"


def test_get_logger_attaches_handler() -> None:
    logger = get_logger("htmltoc.test")

    assert logger.name == "htmltoc.test"
    assert logging.getLogger("htmltoc").handlers
