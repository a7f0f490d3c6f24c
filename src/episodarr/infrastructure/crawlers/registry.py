"""Crawler construction from configuration (closed set of types)."""

from __future__ import annotations

import httpx

from episodarr.domain.entities import CrawlerConfig, TwoStageWebConfig
from episodarr.domain.ports import CrawlerPort

from .constants import DEFAULT_CLIENT_TIMEOUT
from .two_stage_web import TwoStageWebCrawler


def build_crawler(
    config: CrawlerConfig,
    *,
    http_client: httpx.Client | None = None,
    timeout: float = DEFAULT_CLIENT_TIMEOUT,
    follow_redirects: bool = True,
) -> CrawlerPort:
    """Return the crawler implementing ``config.type``."""
    if isinstance(config, TwoStageWebConfig):
        return TwoStageWebCrawler(
            config,
            http_client=http_client,
            timeout=timeout,
            follow_redirects=follow_redirects,
        )
    raise ValueError(f"Unsupported crawler type: {getattr(config, 'type', config)!r}")
