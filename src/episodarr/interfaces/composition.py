"""Wire stores, strategies and the use case from an ``AppConfig``."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import structlog

from episodarr.application.use_cases import AdvanceContentsUseCase
from episodarr.domain.entities import Content
from episodarr.domain.exceptions import ConfigLoadError
from episodarr.domain.ports import CrawlerPort, FetcherPort
from episodarr.infrastructure.config import AppConfig
from episodarr.infrastructure.crawlers import build_crawler
from episodarr.infrastructure.fetchers import build_fetcher
from episodarr.infrastructure.persistence.content_store import YamlContentRepository
from episodarr.infrastructure.persistence.strategy_store import (
    load_crawler_configs,
    load_fetcher_configs,
)

log = structlog.get_logger(__name__)


@dataclass
class Runtime:
    """Everything one run needs, built before any content is processed."""

    contents: list[Content]
    use_case: AdvanceContentsUseCase
    crawler: CrawlerPort
    fetcher: FetcherPort


def build_runtime(config: AppConfig) -> Runtime:
    """Load all three stores and build the first crawler and fetcher.

    Raises:
        ConfigLoadError: A store is missing/invalid, or has no crawler/fetcher.
    """
    crawler_configs = load_crawler_configs(config.crawlers_path)
    if not crawler_configs:
        raise ConfigLoadError(f"No crawler configured in {config.crawlers_path}")

    fetcher_configs = load_fetcher_configs(config.fetchers_path)
    if not fetcher_configs:
        raise ConfigLoadError(f"No fetcher configured in {config.fetchers_path}")

    repository = YamlContentRepository(config.contents_path)
    contents = repository.load()

    crawler = build_crawler(
        crawler_configs[0],
        timeout=config.http_timeout_seconds,
        follow_redirects=config.http_follow_redirects,
    )
    fetcher = build_fetcher(
        fetcher_configs[0],
        timeout=config.submission_timeout_seconds,
        user_agent=config.submission_user_agent,
    )
    log.info(
        "runtime_built",
        contents=len(contents),
        crawler=crawler_configs[0].type,
        fetcher=fetcher_configs[0].type,
    )
    return Runtime(
        contents=contents,
        use_case=AdvanceContentsUseCase(repository, crawler, fetcher),
        crawler=crawler,
        fetcher=fetcher,
    )


@contextmanager
def runtime_scope(config: AppConfig) -> Iterator[Runtime]:
    """Build a ``Runtime`` and close its HTTP clients on exit."""
    runtime = build_runtime(config)
    try:
        yield runtime
    finally:
        runtime.crawler.close()
        runtime.fetcher.close()
