from .content import Content, WebFile, WebResponse
from .strategies import (
    CrawlerConfig,
    CrawlerType,
    FetcherConfig,
    FetcherType,
    QBittorrentConfig,
    TwoStageWebConfig,
)

__all__ = [
    "Content",
    "CrawlerConfig",
    "CrawlerType",
    "FetcherConfig",
    "FetcherType",
    "QBittorrentConfig",
    "TwoStageWebConfig",
    "WebFile",
    "WebResponse",
]
