"""Common infrastructure utilities."""

from __future__ import annotations

from .html_selectors import extract_links, first_link, parse_html, resolve_href

__all__ = [
    "extract_links",
    "first_link",
    "parse_html",
    "resolve_href",
]
