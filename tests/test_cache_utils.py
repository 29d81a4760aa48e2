"""Tests for cache utilities module."""

from __future__ import annotations

import os
import time
from pathlib import Path

import pytest

from htmltoc.cache_utils import (
    cache_key_for,
    cache_path_for,
    is_cache_fresh,
    load_cached_result_async,
    mkdir_async,
    read_text_async,
    store_result_async,
    write_text_async,
)
from htmltoc.exceptions import CacheError
from htmltoc.processor import build_table_of_contents
from htmltoc.schemas import TocOptions


class TestIsCacheFresh:
    """Tests for is_cache_fresh function."""

    def test_returns_false_when_path_missing(self, tmp_path: Path) -> None:
        """Returns False when file does not exist."""
        path = tmp_path / "nonexistent"
        assert not is_cache_fresh(path, ttl_seconds=86400)

    def test_returns_true_when_file_is_new(self, tmp_path: Path) -> None:
        """Returns True when file is within TTL."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        assert is_cache_fresh(path, ttl_seconds=86400)

    def test_returns_false_when_file_is_old(self, tmp_path: Path) -> None:
        """Returns False when file is older than TTL."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        # Set mtime to be very old
        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert not is_cache_fresh(path, ttl_seconds=1)

    @pytest.mark.parametrize("ttl_seconds", [0, -1])
    def test_returns_true_when_ttl_disables_expiry(self, tmp_path: Path, ttl_seconds: int) -> None:
        """Returns True when TTL is 0 or negative (cache forever)."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert is_cache_fresh(path, ttl_seconds=ttl_seconds)


class TestCacheKeyFor:
    """Tests for cache_key_for function."""

    def test_same_inputs_same_key(self) -> None:
        assert cache_key_for("<h2>A</h2>", TocOptions()) == cache_key_for("<h2>A</h2>", TocOptions())

    def test_content_changes_key(self) -> None:
        assert cache_key_for("<h2>A</h2>", TocOptions()) != cache_key_for("<h2>B</h2>", TocOptions())

    def test_options_change_key(self) -> None:
        base = cache_key_for("<h2>A</h2>", TocOptions())
        assert base != cache_key_for("<h2>A</h2>", TocOptions(min_headings=1))
        assert base != cache_key_for("<h2>A</h2>", TocOptions(excluded_selectors="x"))

    def test_level_order_does_not_matter(self) -> None:
        first = cache_key_for("doc", TocOptions(included_levels="h3,h2"))
        second = cache_key_for("doc", TocOptions(included_levels="h2,h3"))
        assert first == second

    def test_key_is_sha256_hex(self) -> None:
        key = cache_key_for("doc", TocOptions())
        assert len(key) == 64
        int(key, 16)


def test_cache_path_fans_out(tmp_path: Path) -> None:
    assert cache_path_for("abcdef", tmp_path) == tmp_path / "ab" / "abcdef.json"


class TestStoredResults:
    """Tests for reading and writing cached results."""

    @pytest.mark.asyncio
    async def test_round_trip(self, tmp_path: Path, sample_document: str) -> None:
        result = build_table_of_contents(sample_document, TocOptions())
        path = cache_path_for(cache_key_for(sample_document, TocOptions()), tmp_path)

        await store_result_async(path, result)
        loaded = await load_cached_result_async(path)

        assert loaded == result
        assert list(path.parent.glob("*.tmp")) == []

    @pytest.mark.asyncio
    async def test_missing_entry_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CacheError):
            await load_cached_result_async(tmp_path / "missing.json")

    @pytest.mark.asyncio
    async def test_corrupt_entry_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CacheError, match="Unreadable cache entry"):
            await load_cached_result_async(path)


class TestAsyncFileHelpers:
    """Tests for the thread-pool file helpers."""

    @pytest.mark.asyncio
    async def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / "test.txt"

        await write_text_async(path, "Hello, World!")

        assert await read_text_async(path) == "Hello, World!"

    @pytest.mark.asyncio
    async def test_respects_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "test.txt"

        await write_text_async(path, "Café", encoding="latin-1")

        assert path.read_text(encoding="latin-1") == "Café"

    @pytest.mark.asyncio
    async def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "b" / "c"

        await mkdir_async(path, parents=True)

        assert path.is_dir()

    @pytest.mark.asyncio
    async def test_raises_when_parents_not_exist(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await mkdir_async(tmp_path / "a" / "b" / "c")
