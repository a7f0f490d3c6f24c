"""Tests for runtime wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

from episodarr.domain.exceptions import ConfigLoadError
from episodarr.infrastructure.config.schema import AppConfig
from episodarr.infrastructure.crawlers import TwoStageWebCrawler
from episodarr.infrastructure.fetchers import QBittorrentFetcher
from episodarr.interfaces.composition import build_runtime, runtime_scope

_CRAWLER = """\
  - type: twostageweb
    url: https://{host}/
    search_page: search
    search_get_name: q
    first_stage_match: a
    second_stage_match: a
"""

_FETCHER = """\
  - type: qbfetcher
    url: http://{host}:8080
    add_url: /add
    login_url: /login
"""


def _config(tmp_path: Path, crawlers: list[str], fetchers: list[str]) -> AppConfig:
    contents = tmp_path / "contents.yaml"
    contents.write_text("content:\n  - {title: Show, first: 1, second: 1}\n")
    crawler_path = tmp_path / "crawlers.yaml"
    crawler_path.write_text(
        "crawlers:\n" + "".join(_CRAWLER.format(host=h) for h in crawlers)
        if crawlers
        else "crawlers: []\n"
    )
    fetcher_path = tmp_path / "fetchers.yaml"
    fetcher_path.write_text(
        "fetchers:\n" + "".join(_FETCHER.format(host=h) for h in fetchers)
        if fetchers
        else "fetchers: []\n"
    )
    return AppConfig(
        contents_path=contents,
        crawlers_path=crawler_path,
        fetchers_path=fetcher_path,
        http_timeout_seconds=7.0,
    )


class TestBuildRuntime:
    def test_first_crawler_and_fetcher_are_used(self, tmp_path: Path) -> None:
        config = _config(tmp_path, ["one.example", "two.example"], ["qb1", "qb2"])

        runtime = build_runtime(config)

        assert isinstance(runtime.crawler, TwoStageWebCrawler)
        assert runtime.crawler.config.url == "https://one.example/"
        assert isinstance(runtime.fetcher, QBittorrentFetcher)
        assert runtime.fetcher.base_url == "http://qb1:8080"
        assert [c.title for c in runtime.contents] == ["Show"]

    def test_no_crawler(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="No crawler"):
            build_runtime(_config(tmp_path, [], ["qb1"]))

    def test_no_fetcher(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="No fetcher"):
            build_runtime(_config(tmp_path, ["one.example"], []))

    def test_scope_closes_clients(self, tmp_path: Path) -> None:
        config = _config(tmp_path, ["one.example"], ["qb1"])
        with runtime_scope(config) as runtime:
            crawler_client = runtime.crawler._ensure_client()  # type: ignore[attr-defined]
            fetcher_client = runtime.fetcher._ensure_client()  # type: ignore[attr-defined]
        assert crawler_client.is_closed
        assert fetcher_client.is_closed
