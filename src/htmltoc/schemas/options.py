"""Per-invocation ToC options."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from htmltoc.config import DEFAULT_INCLUDED_LEVELS, DEFAULT_TITLE, HTMLTOC_MIN_HEADINGS
from htmltoc.html_utils import sanitize_class_token, sanitize_text
from htmltoc.options import (
    parse_bool,
    parse_exclude_selectors,
    parse_heading_levels,
    parse_min_headings,
)


class DefaultToggle(str, Enum):
    """Initial state of a collapsible ToC."""

    SHOW = "show"
    HIDE = "hide"


class TocOptions(BaseModel):
    """Options controlling heading selection and ToC rendering.

    Attributes:
        min_headings: Minimum accepted headings before a ToC is emitted.
        included_levels: Heading levels (1-6) to collect.
        excluded_selectors: Case-insensitive substrings; a heading whose
            attributes or text contain any of them is skipped.
        title: Label rendered above the list. Empty disables it.
        css_class: Extra class token added to the wrapper.
        toggle: Render the show/hide control.
        default_toggle: Whether a collapsible ToC starts open.
    """

    model_config = ConfigDict(frozen=True)

    min_headings: int = Field(default=HTMLTOC_MIN_HEADINGS, ge=0)
    included_levels: frozenset[int] = DEFAULT_INCLUDED_LEVELS
    excluded_selectors: list[str] = Field(default_factory=list)
    title: str = DEFAULT_TITLE
    css_class: str = ""
    toggle: bool = False
    default_toggle: DefaultToggle = DefaultToggle.SHOW

    @field_validator("min_headings", mode="before")
    @classmethod
    def normalize_min_headings(cls, v: object) -> int:
        return parse_min_headings(v)  # type: ignore[arg-type]

    @field_validator("included_levels", mode="before")
    @classmethod
    def normalize_included_levels(cls, v: object) -> frozenset[int]:
        """Accept ``"h2,h3"`` strings as well as collections of levels."""
        return parse_heading_levels(v)  # type: ignore[arg-type]

    @field_validator("excluded_selectors", mode="before")
    @classmethod
    def normalize_excluded_selectors(cls, v: object) -> list[str]:
        return parse_exclude_selectors(v)  # type: ignore[arg-type]

    @field_validator("title", mode="before")
    @classmethod
    def normalize_title(cls, v: object) -> str:
        if v is None:
            return DEFAULT_TITLE
        return sanitize_text(str(v))

    @field_validator("css_class", mode="before")
    @classmethod
    def normalize_css_class(cls, v: object) -> str:
        return sanitize_class_token(str(v)) if v is not None else ""

    @field_validator("toggle", mode="before")
    @classmethod
    def normalize_toggle(cls, v: object) -> bool:
        return parse_bool(v)  # type: ignore[arg-type]

    @field_validator("default_toggle", mode="before")
    @classmethod
    def normalize_default_toggle(cls, v: object) -> DefaultToggle:
        """Fall back to ``show`` for anything that is not ``show`` or ``hide``."""
        if isinstance(v, DefaultToggle):
            return v
        token = str(v).strip().lower() if v is not None else ""
        try:
            return DefaultToggle(token)
        except ValueError:
            return DefaultToggle.SHOW

    @field_serializer("included_levels")
    def serialize_included_levels(self, levels: frozenset[int]) -> list[int]:
        return sorted(levels)
