"""Pydantic validation models for the YAML stores."""

from __future__ import annotations

from typing import List, Literal

import httpx
import soupsieve
from pydantic import BaseModel, ConfigDict, Field, field_validator


class _StoreModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


# === Contents ===


class ContentModel(_StoreModel):
    prefix: str = ""
    title: str = ""
    first_prefix: str = ""
    first: int = Field(..., ge=0)
    second_prefix: str = ""
    second: int = Field(..., ge=0)
    digits: int = Field(default=0, ge=0)
    postfix: str = ""


class ContentFileModel(_StoreModel):
    content: List[ContentModel] = Field(default_factory=list)


# === Crawlers ===


def _check_url(value: str) -> str:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise ValueError(f"invalid url {value!r}: {e}") from e
    if url.scheme not in ("http", "https"):
        raise ValueError(f"url must be http(s), got {value!r}")
    return value


class TwoStageWebModel(_StoreModel):
    type: Literal["twostageweb"]
    url: str
    search_page: str
    search_get_name: str = Field(..., min_length=1)
    categories: List[str] = Field(default_factory=list)
    categories_get_name: str = ""
    user_agent: str = ""
    limit: int = Field(default=0, ge=0)
    first_stage_match: str
    second_stage_match: str

    @field_validator("url")
    @classmethod
    def _validate_url(cls, v: str) -> str:
        return _check_url(v)

    @field_validator("first_stage_match", "second_stage_match")
    @classmethod
    def _validate_selector(cls, v: str) -> str:
        try:
            soupsieve.compile(v)
        except soupsieve.SelectorSyntaxError as e:
            raise ValueError(f"invalid CSS selector {v!r}: {e}") from e
        return v


# Crawler models, tagged by "type".
CrawlerModel = TwoStageWebModel


class CrawlersFileModel(_StoreModel):
    crawlers: List[CrawlerModel] = Field(default_factory=list)


# === Fetchers ===


class QBittorrentModel(_StoreModel):
    type: Literal["qbfetcher"]
    url: str
    add_url: str
    login_url: str
    username: str = ""
    password: str = ""
    save_path: str = ""

    @field_validator("url")
    @classmethod
    def _validate_url(cls, v: str) -> str:
        return _check_url(v)


# Fetcher models, tagged by "type".
FetcherModel = QBittorrentModel


class FetchersFileModel(_StoreModel):
    fetchers: List[FetcherModel] = Field(default_factory=list)
