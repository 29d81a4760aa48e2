"""htmltoc: heading anchors and nested tables of contents for HTML."""

from htmltoc.exceptions import CacheError, HtmlTocError, ParseError
from htmltoc.extractor import extract_headings
from htmltoc.processor import (
    RenderContext,
    ReentrancyGuard,
    add_heading_ids,
    build_table_of_contents,
    render_table_of_contents,
)
from htmltoc.renderer import format_toc_tree, render_toc
from htmltoc.schemas import DefaultToggle, Heading, HeadingNode, TocOptions, TocResult
from htmltoc.tree import build_heading_tree, flatten_tree

__all__ = [
    "CacheError",
    "DefaultToggle",
    "Heading",
    "HeadingNode",
    "HtmlTocError",
    "ParseError",
    "ReentrancyGuard",
    "RenderContext",
    "TocOptions",
    "TocResult",
    "add_heading_ids",
    "build_heading_tree",
    "build_table_of_contents",
    "extract_headings",
    "flatten_tree",
    "format_toc_tree",
    "render_table_of_contents",
    "render_toc",
]
