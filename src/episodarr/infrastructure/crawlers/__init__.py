"""Discovery strategies (crawlers)."""

from __future__ import annotations

from .registry import build_crawler
from .two_stage_web import TwoStageWebCrawler, filter_by_keywords

__all__ = [
    "TwoStageWebCrawler",
    "build_crawler",
    "filter_by_keywords",
]
