#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for escaping, link predicates and text helpers."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from markhtml.utils import (
    attr_escape,
    entity_escape_with_skip,
    find_entity_ranges,
    is_html_tag,
    is_relative_link,
    is_safe_link,
    slugify,
)


@pytest.mark.unit
class TestEscape:
    """Tests for the escaping helpers."""

    def test_attr_escape(self):
        assert attr_escape('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_attr_escape_leaves_single_quotes(self):
        assert attr_escape("it's") == "it's"

    def test_find_entity_ranges(self):
        assert find_entity_ranges("a&amp;b&copy;c&x;") == [(1, 6), (7, 13)]

    def test_entity_escape_with_skip(self):
        text = "a&amp;b<c&d"
        assert entity_escape_with_skip(text, find_entity_ranges(text)) == "a&amp;b&lt;c&amp;d"

    def test_entity_escape_without_ranges(self):
        assert entity_escape_with_skip("a&amp;", []) == "a&amp;amp;"

    @pytest.mark.property
    @given(st.text(max_size=50))
    def test_no_raw_markup_survives(self, text):
        escaped = attr_escape(text)
        assert "<" not in escaped
        assert '"' not in escaped


@pytest.mark.unit
class TestSafeLink:
    """Tests for the safe-link allow-list."""

    @pytest.mark.parametrize(
        "link",
        ["/", "./", "../", "/a", "./a", "../a", "http://x", "HTTPS://x.com", "ftp://files", "mailto://a@b.com"],
    )
    def test_safe(self, link):
        assert is_safe_link(link)

    @pytest.mark.parametrize(
        "link",
        [
            "",
            "javascript:alert(1)",
            "http://",
            "http://-x",
            "mailto:a@b.com",
            "data:text/html,x",
            "a/b",
            "/-a",
            "http://\u00e9.com",
            "/\u00e9",
        ],
    )
    def test_unsafe(self, link):
        assert not is_safe_link(link)


@pytest.mark.unit
class TestRelativeLink:
    """Tests for relative link detection."""

    @pytest.mark.parametrize("link", ["#top", "/a/b", "./a", "../a", "a/b", "page.html"])
    def test_relative(self, link):
        assert is_relative_link(link)

    @pytest.mark.parametrize("link", ["", "//cdn.com/x.js", "http://x.com", "mailto:a@b.com", "javascript:x"])
    def test_not_relative(self, link):
        assert not is_relative_link(link)


@pytest.mark.unit
class TestHtmlTag:
    """Tests for raw tag name matching."""

    @pytest.mark.parametrize("tag", ["<a>", '<a href="x">', "</a>", "< / a >", "<A>", "<a/>"])
    def test_matches(self, tag):
        assert is_html_tag(tag, "a")

    @pytest.mark.parametrize("tag", ["<abbr>", "<b>", "a>", "<span>"])
    def test_does_not_match(self, tag):
        assert not is_html_tag(tag, "a")


@pytest.mark.unit
class TestSlugify:
    """Tests for footnote anchor slugs."""

    @pytest.mark.parametrize(
        "text,expected",
        [("note 1", "note-1"), ("My Note!", "My-Note"), ("  a  b  ", "a-b"), ("fn_1.2", "fn-1-2"), ("!!!", "")],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected

    def test_custom_separator(self):
        assert slugify("a b", separator="_") == "a_b"
