"""Test setup for htmltoc."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from htmltoc.schemas import Heading  # noqa: E402


@pytest.fixture
def sample_document() -> str:
    """A short post with nested h2/h3 headings."""
    return (
        "<p>Intro</p>"
        "<h2>Getting started</h2><p>a</p>"
        "<h3>Install</h3><p>b</p>"
        "<h3>Configure</h3><p>c</p>"
        "<h2>Usage</h2><p>d</p>"
    )


@pytest.fixture
def make_heading():
    """Factory for Heading records with predictable ids."""

    def _make(level: int, text: str, index: int = 0) -> Heading:
        return Heading(level=level, text=text, id=f"h-{index}", index=index)

    return _make
