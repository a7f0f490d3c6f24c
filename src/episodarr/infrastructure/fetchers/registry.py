"""Fetcher construction from configuration (closed set of types)."""

from __future__ import annotations

import httpx

from episodarr.domain.entities import FetcherConfig, QBittorrentConfig
from episodarr.domain.ports import FetcherPort

from .constants import DEFAULT_SUBMISSION_TIMEOUT, DEFAULT_USER_AGENT
from .qbittorrent import QBittorrentFetcher


def build_fetcher(
    config: FetcherConfig,
    *,
    http_client: httpx.Client | None = None,
    timeout: float = DEFAULT_SUBMISSION_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> FetcherPort:
    """Return the fetcher implementing ``config.type``."""
    if isinstance(config, QBittorrentConfig):
        return QBittorrentFetcher(
            config,
            http_client=http_client,
            timeout=timeout,
            user_agent=user_agent,
        )
    raise ValueError(f"Unsupported fetcher type: {getattr(config, 'type', config)!r}")
