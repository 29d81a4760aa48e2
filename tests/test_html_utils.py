"""Tests for HTML helpers."""

from __future__ import annotations

import pytest

from htmltoc.html_utils import (
    find_id_attribute,
    has_id_attribute,
    sanitize_class_token,
    sanitize_text,
    slugify,
    strip_tags,
)


class TestStripTags:
    """Tests for strip_tags function."""

    def test_removes_inline_markup(self) -> None:
        assert strip_tags("<em>Hello</em> <strong>world</strong>") == "Hello world"

    def test_keeps_adjacent_text_together(self) -> None:
        assert strip_tags("Hel<span>lo</span>") == "Hello"

    def test_drops_script_and_style_bodies(self) -> None:
        fragment = "Title<script>alert(1)</script><style>p{}</style>"
        assert strip_tags(fragment) == "Title"

    def test_decodes_entities(self) -> None:
        assert strip_tags("Fish &amp; Chips") == "Fish & Chips"

    def test_collapses_whitespace(self) -> None:
        assert strip_tags("\n  Multi\n   line  \n") == "Multi line"

    def test_empty_input(self) -> None:
        assert strip_tags("") == ""
        assert strip_tags("   ") == ""


class TestSlugify:
    """Tests for slugify function."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello, World!", "hello-world"),
            ("Café au lait", "cafe-au-lait"),
            ("  Multiple   spaces -- here ", "multiple-spaces-here"),
            ("Fish & <Chips>", "fish-chips"),
            ("snake_case name", "snake_case-name"),
            ("Version 2.0", "version-20"),
            ("100% Pure", "100-pure"),
            ("Save 50%off", "save-50off"),
            ("", ""),
        ],
    )
    def test_slugs(self, text: str, expected: str) -> None:
        assert slugify(text) == expected

    def test_non_latin_text_is_percent_encoded(self) -> None:
        assert slugify("日本") == "%e6%97%a5%e6%9c%ac"

    def test_drops_entities(self) -> None:
        assert slugify("a &nbsp; b") == "a-b"


class TestIdAttribute:
    """Tests for id attribute detection."""

    @pytest.mark.parametrize(
        ("attrs", "expected"),
        [
            (' id="intro"', "intro"),
            (" class='x' id='intro'", "intro"),
            (" ID=intro", "intro"),
            (' id = "spaced"', "spaced"),
        ],
    )
    def test_finds_value(self, attrs: str, expected: str) -> None:
        assert has_id_attribute(attrs)
        assert find_id_attribute(attrs) == expected

    def test_data_attribute_is_not_an_id(self) -> None:
        assert not has_id_attribute(' data-id="x"')
        assert find_id_attribute(' data-id="x"') is None

    def test_id_inside_quoted_value_is_not_an_id(self) -> None:
        assert not has_id_attribute(' title="the id=foo"')
        assert find_id_attribute(' title="the id=foo"') is None
        assert find_id_attribute(" title='a id=b' id=\"real\"") == "real"

    def test_empty_value(self) -> None:
        assert has_id_attribute(' id=""')
        assert find_id_attribute(' id=""') is None

    def test_no_attributes(self) -> None:
        assert not has_id_attribute("")


def test_sanitize_text_strips_markup() -> None:
    assert sanitize_text("<b>My</b>   ToC ") == "My ToC"


def test_sanitize_class_token() -> None:
    assert sanitize_class_token("my class!") == "myclass"
    assert sanitize_class_token("toc_wide-1") == "toc_wide-1"
