"""Two-stage web crawler: search results page, then the result's detail page.

Stage 1 queries the indexer's search page with the rendered content query
plus the configured categories, collects result links matching
``first_stage_match`` and keeps the first one whose URL contains every
query word. Stage 2 opens that result and returns the first link matching
``second_stage_match`` (typically a magnet or torrent link).

Both stages resolve relative links against the *search* URL, the detail
page's own URL is not used as base.
"""

from __future__ import annotations

from collections.abc import Sequence

import httpx
import structlog

from episodarr.domain.entities import Content, TwoStageWebConfig, WebFile
from episodarr.domain.exceptions import (
    DiscoveryFetchError,
    FirstStageEmptyError,
    SecondStageEmptyError,
)
from episodarr.infrastructure.common.html_selectors import (
    extract_links,
    first_link,
    parse_html,
)

from .constants import DEFAULT_CLIENT_TIMEOUT, DEFAULT_USER_AGENT

log = structlog.get_logger(__name__)


def filter_by_keywords(items: Sequence[str], keywords: str) -> list[str]:
    """Keep items containing every whitespace-separated word of *keywords*.

    Only the keywords are lowercased; items are matched as-is, so a
    mixed-case URL can miss an otherwise matching word.
    """
    words = [w.lower() for w in keywords.split()]
    return [item for item in items if all(w in item for w in words)]


class TwoStageWebCrawler:
    """Crawler for ``type: twostageweb`` configurations."""

    name = "twostageweb"

    def __init__(
        self,
        config: TwoStageWebConfig,
        *,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_CLIENT_TIMEOUT,
        follow_redirects: bool = True,
    ) -> None:
        self.config = config
        self._client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout
        self._follow_redirects = follow_redirects

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout,
                follow_redirects=self._follow_redirects,
            )
        return self._client

    def close(self) -> None:
        """Close the httpx client if this crawler created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def build_search_url(self, query: str) -> httpx.URL:
        """Base URL + search page, with the query and every category appended."""
        url = httpx.URL(self.config.url).join(self.config.search_page)
        url = url.copy_add_param(self.config.search_get_name, query)
        for category in self.config.categories:
            url = url.copy_add_param(self.config.categories_get_name, category)
        return url

    def find(self, content: Content) -> WebFile:
        """Locate a download link for *content*.

        Raises:
            DiscoveryFetchError: A request failed or answered non-2xx.
            FirstStageEmptyError: No search result matched every query word.
            SecondStageEmptyError: The result page had no usable link.
        """
        query = content.to_query()
        search_url = self.build_search_url(query)

        html = self._get_text(search_url, stage="first")
        candidates = extract_links(
            parse_html(html), self.config.first_stage_match, search_url
        )
        matches = filter_by_keywords(candidates, query)
        log.debug(
            "first_stage_links",
            url=str(search_url),
            found=len(candidates),
            matched=len(matches),
        )
        if not matches:
            raise FirstStageEmptyError(f"Nothing found in first stage for {query!r}")

        detail_url = matches[0]
        html = self._get_text(detail_url, stage="second")
        link = first_link(parse_html(html), self.config.second_stage_match, search_url)
        if link is None:
            raise SecondStageEmptyError(
                f"No link matching {self.config.second_stage_match!r} on {detail_url}"
            )

        return WebFile(content=content, link=link)

    def _get_text(self, url: httpx.URL | str, *, stage: str) -> str:
        client = self._ensure_client()
        headers = {"User-Agent": self.config.user_agent or DEFAULT_USER_AGENT}
        log.debug("search_request", stage=stage, url=str(url))
        try:
            resp = client.get(url, headers=headers)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise DiscoveryFetchError(f"{stage} stage timed out: {url}") from e
        except httpx.HTTPStatusError as e:
            raise DiscoveryFetchError(
                f"{stage} stage answered HTTP {e.response.status_code}: {url}"
            ) from e
        except httpx.HTTPError as e:
            raise DiscoveryFetchError(f"{stage} stage request failed: {e}") from e
        return resp.text
