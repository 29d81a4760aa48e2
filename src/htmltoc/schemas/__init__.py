"""Shared schemas for htmltoc."""

from htmltoc.schemas.headings import Heading, HeadingNode
from htmltoc.schemas.options import DefaultToggle, TocOptions
from htmltoc.schemas.results import TocResult

__all__ = ["DefaultToggle", "Heading", "HeadingNode", "TocOptions", "TocResult"]
