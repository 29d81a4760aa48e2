"""Parse user-facing ToC parameters into normalized values.

Every parser here is total: unknown or malformed tokens are dropped and the
documented default is substituted, so callers never see a validation error.
"""

from __future__ import annotations

import math
import re
from typing import Any, Iterable

from htmltoc.config import DEFAULT_INCLUDED_LEVELS, HTMLTOC_MIN_HEADINGS

_LEVEL_TOKEN_RE = re.compile(r"^h([1-6])$")
_TRUTHY = {"1", "true", "on", "yes"}


def _as_items(value: Any) -> list[Any]:
    """Split a comma-separated string, or list the items of a collection."""
    if isinstance(value, str):
        return value.split(",")
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def parse_heading_levels(value: str | Iterable[str | int] | None) -> frozenset[int]:
    """Parse ``"h2,h3"``-style tokens into a set of heading levels.

    Integers 1-6 are accepted as-is. Falls back to the default levels when
    no valid token remains.
    """
    if value is None:
        return DEFAULT_INCLUDED_LEVELS

    levels: set[int] = set()
    for token in _as_items(value):
        if isinstance(token, bool):
            continue
        if isinstance(token, int):
            if 1 <= token <= 6:
                levels.add(token)
            continue
        if not isinstance(token, str):
            continue
        match = _LEVEL_TOKEN_RE.match(token.strip().lower())
        if match:
            levels.add(int(match.group(1)))
    return frozenset(levels) if levels else DEFAULT_INCLUDED_LEVELS


def parse_exclude_selectors(value: str | Iterable[str] | None) -> list[str]:
    """Split a comma-separated selector list, trimming and dropping empties."""
    if not value:
        return []
    items = (item.strip() for item in _as_items(value) if isinstance(item, str))
    return [item for item in items if item]


def parse_min_headings(value: Any) -> int:
    """Parse the minimum heading count, defaulting on unparseable input.

    Fractional values are truncated.
    """
    if isinstance(value, bool):
        return HTMLTOC_MIN_HEADINGS
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0) if math.isfinite(value) else HTMLTOC_MIN_HEADINGS
    try:
        return max(int(str(value).strip()), 0)
    except (TypeError, ValueError):
        return HTMLTOC_MIN_HEADINGS


def parse_bool(value: Any) -> bool:
    """Interpret toggle-style flags; only explicit truthy tokens are True."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY
