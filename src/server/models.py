"""Pydantic models for the ToC API."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from htmltoc.config import DEFAULT_TITLE, HTMLTOC_MIN_HEADINGS
from htmltoc.schemas import DefaultToggle, HeadingNode, TocOptions


class TocRequest(BaseModel):
    """Request model for the /api/toc endpoint.

    Option fields take the same loosely typed values a page author would
    write (``"h2,h3"``, ``"true"``, ``"hide"``); invalid tokens fall back to
    defaults instead of failing validation.

    Attributes
    ----------
    content : str
        The HTML document to process.
    min_headings : Any
        Minimum number of accepted headings before a ToC is rendered.
    included : Any
        Heading levels to include, e.g. ``"h2,h3"``.
    excluded : Any
        Comma-separated substrings excluding matching headings.
    title : Any
        ToC label.
    css_class : Any
        Extra wrapper class.
    toggle : Any
        Render the show/hide control.
    default_toggle : Any
        Initial toggle state, ``show`` or ``hide``.
    use_cache : bool
        Read and write the result cache.

    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    content: str = Field(default="", description="HTML document to process")
    min_headings: Any = Field(default=HTMLTOC_MIN_HEADINGS, description="Minimum heading count")
    included: Any = Field(default="h2,h3", description="Heading levels to include")
    excluded: Any = Field(default="", description="Selectors to exclude")
    title: Any = Field(default=DEFAULT_TITLE, description="ToC title")
    css_class: Any = Field(default="", alias="class", description="Extra CSS class")
    toggle: Any = Field(default=False, description="Render the show/hide control")
    default_toggle: Any = Field(default=DefaultToggle.SHOW.value, description="Initial toggle state")
    use_cache: Optional[bool] = Field(default=True, description="Use the result cache")

    @field_validator("content", mode="before")
    @classmethod
    def normalize_content(cls, v: Any) -> str:
        """Treat a missing document as empty content."""
        return "" if v is None else v

    @field_validator("use_cache", mode="before")
    @classmethod
    def normalize_use_cache(cls, v: Any) -> bool:
        return True if v is None else v

    def to_options(self) -> TocOptions:
        """Normalize the raw request fields into ``TocOptions``."""
        return TocOptions(
            min_headings=self.min_headings,
            included_levels=self.included,
            excluded_selectors=self.excluded,
            title=self.title,
            css_class=self.css_class,
            toggle=self.toggle,
            default_toggle=self.default_toggle,
        )


class TocSuccessResponse(BaseModel):
    """Success response model for the /api/toc endpoint.

    Attributes
    ----------
    content : str
        The document with anchor ids injected.
    toc_html : str
        Rendered ToC markup, empty when below the minimum heading count.
    headings_count : int
        Number of accepted headings.
    tree : list[HeadingNode]
        The heading tree.
    cached : bool
        Whether the result was served from the cache.

    """

    content: str
    toc_html: str
    headings_count: int
    tree: list[HeadingNode] = Field(default_factory=list)
    cached: bool = False


class TocErrorResponse(BaseModel):
    """Error response model for the /api/toc endpoint."""

    error: str


TocResponse = Union[TocSuccessResponse, TocErrorResponse]
