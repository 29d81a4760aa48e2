"""Local configuration for htmltoc."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CACHE_DIR = ".htmltoc_cache"
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60
DEFAULT_MIN_HEADINGS = 3
DEFAULT_INCLUDED_LEVELS = frozenset({2, 3})
DEFAULT_TITLE = "Table of Contents"
DEFAULT_MAX_CONTENT_SIZE = 5 * 1024 * 1024
DEFAULT_LOG_LEVEL = "INFO"

# Prefix shared by generated heading ids and the ToC wrapper markup.
HEADING_ID_PREFIX = "fyptaco-heading"
WRAPPER_ID_PREFIX = "fyptaco_"

# Local-only cache directory for serialized ToC results.
HTMLTOC_CACHE_PATH = Path(os.getenv("HTMLTOC_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
HTMLTOC_CACHE_TTL_SECONDS = int(os.getenv("HTMLTOC_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
HTMLTOC_MIN_HEADINGS = int(os.getenv("HTMLTOC_MIN_HEADINGS", str(DEFAULT_MIN_HEADINGS)))
HTMLTOC_MAX_CONTENT_SIZE = int(os.getenv("HTMLTOC_MAX_CONTENT_SIZE", str(DEFAULT_MAX_CONTENT_SIZE)))
HTMLTOC_LOG_LEVEL = os.getenv("HTMLTOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
