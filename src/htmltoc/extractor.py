"""Extract headings from HTML markup and inject anchor ids."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from htmltoc.config import HEADING_ID_PREFIX
from htmltoc.html_utils import find_id_attribute, has_id_attribute, slugify, strip_tags
from htmltoc.schemas import Heading

logger = logging.getLogger(__name__)

# Pattern matching only, not a parser: inner content runs non-greedily up to
# the first closing tag of the same level, so unbalanced headings misparse.
_HEADING_RE = re.compile(r"<h([1-6])([^>]*)>(.*?)</h\1>", re.IGNORECASE | re.DOTALL)


def make_heading_id(index: int, text: str) -> str:
    """Build the synthesized anchor id for the heading at ``index``."""
    return f"{HEADING_ID_PREFIX}-{index}-{slugify(text)}"


def extract_headings(
    markup: str,
    included_levels: Iterable[int],
    excluded_selectors: Iterable[str] = (),
) -> tuple[str, list[Heading]]:
    """Collect headings and return the markup rewritten with anchor ids.

    Every heading match is numbered in scan order before any filtering, so a
    heading keeps its id when other headings are excluded. Accepted headings
    without an ``id`` attribute get one injected; headings that already have
    one are left untouched and anchor to their own id.

    Args:
        markup: HTML document or fragment.
        included_levels: Heading levels (1-6) to accept.
        excluded_selectors: Case-insensitive substrings matched against the
            raw attribute string and the stripped heading text.

    Returns:
        Tuple of (rewritten markup, accepted headings in document order).
    """
    if not markup:
        return markup or "", []

    levels = set(included_levels)
    selectors = [selector.lower() for selector in excluded_selectors if selector]
    content = markup
    headings: list[Heading] = []

    for index, match in enumerate(_HEADING_RE.finditer(markup)):
        level = int(match.group(1))
        if level not in levels:
            continue

        attrs = match.group(2)
        inner = match.group(3)
        text = strip_tags(inner)

        if _is_excluded(attrs, text, selectors):
            logger.debug("Skipping excluded heading", extra={"index": index, "text": text})
            continue

        unique_id = make_heading_id(index, text)
        if has_id_attribute(attrs):
            anchor = find_id_attribute(attrs) or unique_id
        else:
            anchor = unique_id
            rewritten = f'<h{level}{attrs} id="{unique_id}">{inner}</h{level}>'
            # First occurrence only; an earlier identical heading elsewhere
            # in the document would be rewritten instead of this one.
            content = content.replace(match.group(0), rewritten, 1)

        headings.append(
            Heading(level=level, raw_attributes=attrs, text=text, id=anchor, index=index)
        )

    return content, headings


def _is_excluded(attrs: str, text: str, selectors: list[str]) -> bool:
    attrs_lower = attrs.lower()
    text_lower = text.lower()
    return any(selector in attrs_lower or selector in text_lower for selector in selectors)
