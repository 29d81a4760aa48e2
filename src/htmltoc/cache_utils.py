"""Cache utilities for content-addressed ToC results."""

from __future__ import annotations

import asyncio
import hashlib
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from pydantic import ValidationError

from htmltoc.exceptions import CacheError
from htmltoc.schemas import TocOptions, TocResult


def is_cache_fresh(path: Path, ttl_seconds: int) -> bool:
    """Check if a cached file is still fresh based on its modification time.

    Args:
        path: Path to the cached file.
        ttl_seconds: Time-to-live in seconds. If <= 0, cache is considered
            fresh indefinitely (cache forever mode).

    Returns:
        True if the cache is fresh and usable, False otherwise.
    """
    if not path.exists():
        return False
    if ttl_seconds <= 0:
        return True
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    age_seconds = (datetime.now(timezone.utc) - mtime).total_seconds()
    return age_seconds <= ttl_seconds


def cache_key_for(content: str, options: TocOptions) -> str:
    """Hash the document content together with the options that shape the result.

    Args:
        content: The document markup.
        options: The options used to build the ToC.

    Returns:
        A SHA-256 hex digest.
    """
    digest = hashlib.sha256()
    digest.update(options.model_dump_json().encode("utf-8"))
    digest.update(b"\0")
    digest.update(content.encode("utf-8"))
    return digest.hexdigest()


def cache_path_for(key: str, base_path: Path) -> Path:
    """Get the file path for a cache key, fanned out by its first two characters."""
    return base_path / key[:2] / f"{key}.json"


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file asynchronously using a thread pool.

    Args:
        path: Path to the file to write.
        content: Text content to write.
        encoding: Text encoding to use.
    """
    await asyncio.to_thread(path.write_text, content, encoding=encoding)


async def mkdir_async(
    path: Path, parents: bool = False, exist_ok: bool = False
) -> None:
    """Create a directory asynchronously using a thread pool.

    Args:
        path: Path to the directory to create.
        parents: If True, create parent directories as needed.
        exist_ok: If True, don't raise an error if directory exists.
    """
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)


async def load_cached_result_async(path: Path) -> TocResult:
    """Read a cached result without blocking the event loop.

    Raises:
        CacheError: If the file is missing or does not hold a valid result.
    """
    try:
        return TocResult.model_validate_json(await read_text_async(path))
    except (OSError, ValidationError) as exc:
        raise CacheError(f"Unreadable cache entry {path}: {exc}") from exc


async def store_result_async(path: Path, result: TocResult) -> None:
    """Write a result to the cache.

    The payload goes to a sibling temp file first and is moved into place,
    so readers see either no entry or a complete one.
    """
    await mkdir_async(path.parent, parents=True, exist_ok=True)
    tmp_path = path.with_name(f"{path.name}.{uuid4().hex[:8]}.tmp")
    await write_text_async(tmp_path, result.model_dump_json())
    await asyncio.to_thread(tmp_path.replace, path)
