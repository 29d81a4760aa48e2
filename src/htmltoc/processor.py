"""Entry points for the content-rendering layer.

Both hooks run once per document render. Each owns a re-entrancy guard so
that markup produced while a hook is active is never fed back into it.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from htmltoc.config import DEFAULT_INCLUDED_LEVELS
from htmltoc.extractor import extract_headings
from htmltoc.renderer import render_toc
from htmltoc.schemas import TocOptions, TocResult
from htmltoc.tree import build_heading_tree

logger = logging.getLogger(__name__)


class ReentrancyGuard:
    """A context-local "in progress" flag.

    The flag lives in a ``ContextVar``, so concurrent requests (threads or
    asyncio tasks) each see their own value.
    """

    def __init__(self, name: str) -> None:
        self._active: ContextVar[bool] = ContextVar(name, default=False)

    @property
    def active(self) -> bool:
        return self._active.get()

    @contextmanager
    def enter(self) -> Iterator[bool]:
        """Yield True if the guard was acquired, False when already held.

        The flag is reset on exit even when the body raises.
        """
        if self._active.get():
            yield False
            return
        token = self._active.set(True)
        try:
            yield True
        finally:
            self._active.reset(token)


_heading_ids_guard = ReentrancyGuard("htmltoc_heading_ids")
_toc_guard = ReentrancyGuard("htmltoc_render_toc")


@dataclass(frozen=True)
class RenderContext:
    """Where the current render happens.

    Attributes:
        is_singular: Rendering a single document rather than a listing.
        in_main_loop: Rendering the primary content stream.
        is_main_query: The document comes from the request's main query.
        is_admin: Rendering inside an administrative view, where the
            primary-stream checks do not apply.
    """

    is_singular: bool = True
    in_main_loop: bool = True
    is_main_query: bool = True
    is_admin: bool = False

    @property
    def is_primary_content(self) -> bool:
        if not self.is_singular:
            return False
        if self.is_admin:
            return True
        return self.in_main_loop and self.is_main_query


def build_table_of_contents(content: str | None, options: TocOptions | None = None) -> TocResult:
    """Extract headings, build the tree and apply the minimum-count gate.

    Missing content short-circuits to an empty result. When fewer than
    ``options.min_headings`` headings are accepted the tree is emptied but
    the rewritten content and the count are still returned.
    """
    if not content:
        return TocResult(content=content or "")

    opts = options or TocOptions()
    rewritten, headings = extract_headings(
        content, opts.included_levels, opts.excluded_selectors
    )
    tree, count = build_heading_tree(headings)

    if count < opts.min_headings:
        logger.debug(
            "Heading count below minimum",
            extra={"count": count, "min_headings": opts.min_headings},
        )
        tree = []

    return TocResult(content=rewritten, headings=headings, tree=tree, count=count)


def add_heading_ids(content: str, context: RenderContext | None = None) -> str:
    """Inject anchor ids into the default heading levels of a document.

    Returns ``content`` unchanged when called re-entrantly or outside the
    primary content of a single document.
    """
    ctx = context or RenderContext()
    with _heading_ids_guard.enter() as acquired:
        if not acquired or not ctx.is_primary_content or not content:
            return content
        rewritten, _ = extract_headings(content, DEFAULT_INCLUDED_LEVELS)
        return rewritten


def render_table_of_contents(
    content: str | None,
    options: TocOptions | None = None,
    *,
    wrapper_id: str | None = None,
) -> str:
    """Render the ToC markup for ``content``, or ``""`` when there is none."""
    with _toc_guard.enter() as acquired:
        if not acquired:
            return ""
        if not content:
            return ""
        opts = options or TocOptions()
        result = build_table_of_contents(content, opts)
        if result.count < opts.min_headings or result.is_empty:
            return ""
        return render_toc(result.tree, opts, wrapper_id=wrapper_id)
