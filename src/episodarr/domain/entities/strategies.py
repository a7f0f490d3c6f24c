"""Pure domain models for crawler/fetcher configuration (framework-free)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

CrawlerType = Literal["twostageweb"]
FetcherType = Literal["qbfetcher"]


@dataclass(frozen=True)
class TwoStageWebConfig:
    """
    Search page -> result page -> download link.

    Example:
      type: twostageweb
      url: "https://indexer.example/"
      search_page: "search"
      search_get_name: "q"
      categories: ["tv"]
      categories_get_name: "cat"
      first_stage_match: "table.results a.title"
      second_stage_match: "a[href^='magnet:']"
    """

    url: str
    search_page: str
    search_get_name: str
    first_stage_match: str
    second_stage_match: str
    categories: tuple[str, ...] = field(default_factory=tuple)
    categories_get_name: str = ""
    user_agent: str = ""
    # Advisory only, results are not truncated.
    limit: int = 0
    type: CrawlerType = "twostageweb"


@dataclass(frozen=True)
class QBittorrentConfig:
    """qBittorrent WebUI endpoint used to queue downloads."""

    url: str
    add_url: str
    login_url: str
    save_path: str
    username: str = ""
    password: str = ""
    type: FetcherType = "qbfetcher"


CrawlerConfig = TwoStageWebConfig
FetcherConfig = QBittorrentConfig
