from .content_repository import ContentRepository
from .crawler import CrawlerPort
from .fetcher import FetcherPort

__all__ = [
    "ContentRepository",
    "CrawlerPort",
    "FetcherPort",
]
