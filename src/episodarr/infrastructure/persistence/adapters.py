"""Convert between store validation models and domain models."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from episodarr.domain.entities import (
    Content,
    CrawlerConfig,
    FetcherConfig,
    QBittorrentConfig,
    TwoStageWebConfig,
)

from .validation_schema import (
    ContentModel,
    CrawlerModel,
    FetcherModel,
    QBittorrentModel,
    TwoStageWebModel,
)

# Key order written to the crawler store, "type" first.
_CRAWLER_KEYS = (
    "type",
    "url",
    "search_page",
    "search_get_name",
    "categories",
    "categories_get_name",
    "user_agent",
    "limit",
    "first_stage_match",
    "second_stage_match",
)
_FETCHER_KEYS = (
    "type",
    "url",
    "add_url",
    "login_url",
    "username",
    "password",
    "save_path",
)


def to_domain_content(model: ContentModel) -> Content:
    return Content(**model.model_dump())


def content_to_dict(content: Content) -> dict[str, Any]:
    """Plain mapping in field declaration order."""
    return asdict(content)


def to_domain_crawler(model: CrawlerModel) -> CrawlerConfig:
    if isinstance(model, TwoStageWebModel):
        return TwoStageWebConfig(
            url=model.url,
            search_page=model.search_page,
            search_get_name=model.search_get_name,
            first_stage_match=model.first_stage_match,
            second_stage_match=model.second_stage_match,
            categories=tuple(model.categories),
            categories_get_name=model.categories_get_name,
            user_agent=model.user_agent,
            limit=model.limit,
        )
    raise TypeError(f"Unsupported crawler model: {type(model).__name__}")


def crawler_to_dict(config: CrawlerConfig) -> dict[str, Any]:
    data = asdict(config)
    data["categories"] = list(config.categories)
    return {key: data[key] for key in _CRAWLER_KEYS}


def to_domain_fetcher(model: FetcherModel) -> FetcherConfig:
    if isinstance(model, QBittorrentModel):
        return QBittorrentConfig(
            url=model.url,
            add_url=model.add_url,
            login_url=model.login_url,
            save_path=model.save_path,
            username=model.username,
            password=model.password,
        )
    raise TypeError(f"Unsupported fetcher model: {type(model).__name__}")


def fetcher_to_dict(config: FetcherConfig) -> dict[str, Any]:
    data = asdict(config)
    return {key: data[key] for key in _FETCHER_KEYS}
