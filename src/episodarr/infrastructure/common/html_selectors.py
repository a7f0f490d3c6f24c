"""CSS-selector-based link extraction.

Selection always follows document order, and every ``href`` is resolved
to an absolute URL against an explicit base. An empty ``href`` resolves to
the base itself. Elements without an ``href``, or with one that cannot be
resolved, are skipped silently.
"""

from __future__ import annotations

from collections.abc import Iterator
from urllib.parse import urlsplit

import httpx
from bs4 import BeautifulSoup, Tag


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML string into a BeautifulSoup tree (``lxml`` parser)."""
    return BeautifulSoup(html, "lxml")


def resolve_href(base_url: httpx.URL | str, href: str) -> str | None:
    """Resolve *href* against *base_url*; ``None`` if it cannot be resolved."""
    href = href.strip()
    try:
        # httpx percent-encodes an unbalanced "[" in the authority; urlsplit rejects it.
        urlsplit(href)
        return str(httpx.URL(base_url).join(href))
    except (httpx.InvalidURL, ValueError, TypeError):
        return None


def iter_links(
    root: BeautifulSoup | Tag,
    selector: str,
    base_url: httpx.URL | str,
) -> Iterator[str]:
    """Yield resolved ``href`` values of all *selector* matches, in document order."""
    for tag in root.select(selector):
        href = tag.get("href")
        if href is None:
            continue
        resolved = resolve_href(base_url, str(href))
        if resolved is not None:
            yield resolved


def extract_links(
    root: BeautifulSoup | Tag,
    selector: str,
    base_url: httpx.URL | str,
) -> list[str]:
    """All resolvable links matching *selector*, in document order."""
    return list(iter_links(root, selector, base_url))


def first_link(
    root: BeautifulSoup | Tag,
    selector: str,
    base_url: httpx.URL | str,
) -> str | None:
    """The first resolvable link matching *selector*, or ``None``."""
    return next(iter_links(root, selector, base_url), None)
