"""Submission strategies (fetchers)."""

from __future__ import annotations

from .qbittorrent import QBittorrentFetcher
from .registry import build_fetcher

__all__ = [
    "QBittorrentFetcher",
    "build_fetcher",
]
