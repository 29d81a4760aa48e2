"""Process a ToC request, consulting the result cache first."""

from __future__ import annotations

import asyncio

from htmltoc.cache_utils import (
    cache_key_for,
    cache_path_for,
    is_cache_fresh,
    load_cached_result_async,
    store_result_async,
)
from htmltoc.config import HTMLTOC_CACHE_PATH, HTMLTOC_CACHE_TTL_SECONDS, HTMLTOC_MAX_CONTENT_SIZE
from htmltoc.exceptions import CacheError
from htmltoc.processor import build_table_of_contents
from htmltoc.renderer import render_toc
from htmltoc.schemas import TocOptions, TocResult
from htmltoc.utils.logging_config import get_logger
from server.models import TocErrorResponse, TocResponse, TocSuccessResponse

# Initialize logger for this module
logger = get_logger(__name__)


async def process_toc_request(
    content: str,
    options: TocOptions,
    *,
    use_cache: bool = True,
) -> TocResponse:
    """Build the ToC for ``content`` and render it.

    Cached results are keyed by the content and options. Entries are never
    modified after being written; a missing, stale or unreadable entry is
    simply recomputed.
    """
    if len(content.encode("utf-8")) > HTMLTOC_MAX_CONTENT_SIZE:
        logger.warning("Content exceeds size limit", extra={"size": len(content)})
        return TocErrorResponse(
            error=f"Content exceeds the {HTMLTOC_MAX_CONTENT_SIZE // 1024} KB limit"
        )

    result: TocResult | None = None
    cached = False
    cache_path = cache_path_for(cache_key_for(content, options), HTMLTOC_CACHE_PATH)

    if use_cache and is_cache_fresh(cache_path, HTMLTOC_CACHE_TTL_SECONDS):
        try:
            result = await load_cached_result_async(cache_path)
            cached = True
        except CacheError as exc:
            logger.warning("Discarding unreadable cache entry", extra={"error": str(exc)})

    if result is None:
        result = await asyncio.to_thread(build_table_of_contents, content, options)
        if use_cache:
            try:
                await store_result_async(cache_path, result)
            except OSError as exc:
                logger.warning("Failed to write cache entry", extra={"path": str(cache_path), "error": str(exc)})

    toc_html = ""
    if result.count >= options.min_headings and not result.is_empty:
        toc_html = render_toc(result.tree, options)

    logger.info(
        "ToC request processed",
        extra={"headings_count": result.count, "cached": cached, "rendered": bool(toc_html)},
    )

    return TocSuccessResponse(
        content=result.content,
        toc_html=toc_html,
        headings_count=result.count,
        tree=result.tree,
        cached=cached,
    )
