"""Tests for CSS-selector link extraction helpers."""

from __future__ import annotations

from episodarr.infrastructure.common.html_selectors import (
    extract_links,
    first_link,
    parse_html,
    resolve_href,
)

_BASE = "https://site.example/search?q=x"

_HTML = """
<div>
  <a class="r" href="/one">1</a>
  <a class="r">no href</a>
  <a class="r" href="">empty</a>
  <a class="r" href="http://[bad/x">broken</a>
  <a class="r" href="two">2</a>
  <a class="r" href="https://other.example/three">3</a>
  <a class="x" href="/ignored">x</a>
</div>
"""


class TestResolveHref:
    def test_absolute_path(self) -> None:
        assert resolve_href(_BASE, "/a/b") == "https://site.example/a/b"

    def test_relative_path(self) -> None:
        assert resolve_href("https://site.example/dir/page", "next") == (
            "https://site.example/dir/next"
        )

    def test_absolute_url_wins(self) -> None:
        assert resolve_href(_BASE, "http://x.example/y") == "http://x.example/y"

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert resolve_href(_BASE, "  /a  ") == "https://site.example/a"

    def test_empty_href_is_the_base(self) -> None:
        assert resolve_href(_BASE, "") == _BASE

    def test_unbalanced_bracket_in_host_is_rejected(self) -> None:
        assert resolve_href(_BASE, "http://[bad/x") is None


class TestExtractLinks:
    def test_document_order_and_skips(self) -> None:
        links = extract_links(parse_html(_HTML), "a.r", _BASE)
        assert links == [
            "https://site.example/one",
            _BASE,
            "https://site.example/two",
            "https://other.example/three",
        ]

    def test_no_match(self) -> None:
        assert extract_links(parse_html(_HTML), "a.none", _BASE) == []


class TestFirstLink:
    def test_first_resolvable(self) -> None:
        assert first_link(parse_html(_HTML), "a.r", _BASE) == "https://site.example/one"

    def test_none_when_nothing_matches(self) -> None:
        assert first_link(parse_html("<p>empty</p>"), "a", _BASE) is None
