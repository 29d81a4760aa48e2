"""Shared HTML utilities for heading processing."""

from __future__ import annotations

import re
import unicodedata
from urllib.parse import quote

from htmltoc.exceptions import ParseError

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_WHITESPACE_RE = re.compile(r"\s+")
_ENTITY_RE = re.compile(r"&[^\s;]+?;")
_SLUG_DISALLOWED_RE = re.compile(r"[^%a-z0-9 _-]")
_HYPHEN_RUN_RE = re.compile(r"-+")
_CLASS_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_-]")
# One ``name[=value]`` pair per match. Quoted values are consumed whole, so
# text such as ``title="the id=foo"`` is never read as an attribute name.
_ATTRIBUTE_RE = re.compile(
    r"""([^\s"'>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?"""
)


def strip_tags(fragment: str) -> str:
    """Return the text of an HTML fragment with all markup removed.

    Script and style bodies are dropped entirely, entities are decoded and
    whitespace runs are collapsed to a single space.
    """
    if not fragment or not fragment.strip():
        return ""
    if "<" not in fragment and "&" not in fragment:
        return _WHITESPACE_RE.sub(" ", fragment).strip()

    soup = BeautifulSoup(fragment, "lxml")
    for tag in soup.find_all(["script", "style"]):
        tag.decompose()
    return _WHITESPACE_RE.sub(" ", soup.get_text()).strip()


def slugify(text: str) -> str:
    """Convert heading text to a URL-safe, lowercase anchor fragment.

    Expects text that has already been through :func:`strip_tags`. Accented
    Latin characters are folded to ASCII, punctuation is dropped and
    whitespace becomes ``-``. Characters with no ASCII equivalent are kept
    percent-encoded so non-Latin headings still produce a usable slug.
    """
    text = _ENTITY_RE.sub("", text)
    folded = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch))
    folded = unicodedata.normalize("NFC", folded).lower()
    # Raw percent signs are dropped; the only ones left in the slug are the
    # octets produced by quoting non-ASCII characters below.
    folded = folded.replace("%", "")

    encoded = "".join(ch if ch.isascii() else quote(ch, safe="").lower() for ch in folded)
    slug = _SLUG_DISALLOWED_RE.sub("", encoded)
    slug = _WHITESPACE_RE.sub("-", slug.strip())
    slug = _HYPHEN_RUN_RE.sub("-", slug)
    return slug.strip("-")


def _id_attribute(attributes: str) -> tuple[bool, str | None]:
    for match in _ATTRIBUTE_RE.finditer(attributes or ""):
        if match.group(1).lower() != "id":
            continue
        value = next((group for group in match.groups()[1:] if group is not None), "")
        return True, value.strip() or None
    return False, None


def has_id_attribute(attributes: str) -> bool:
    """Check whether a raw attribute string declares an ``id``.

    Only attribute names count: ``data-id`` or an ``id=`` inside another
    attribute's quoted value does not.
    """
    return _id_attribute(attributes)[0]


def find_id_attribute(attributes: str) -> str | None:
    """Return the value of the ``id`` attribute, if one is present and non-empty."""
    return _id_attribute(attributes)[1]


def sanitize_text(text: str) -> str:
    """Strip markup and collapse whitespace in a user-supplied label."""
    return strip_tags(text or "")


def sanitize_class_token(token: str) -> str:
    """Remove everything that is not valid in a CSS class token."""
    return _CLASS_DISALLOWED_RE.sub("", token or "")
