"""Loading and saving of crawler/fetcher configuration stores."""

from __future__ import annotations

from pathlib import Path

import structlog
from pydantic import ValidationError

from episodarr.domain.entities import CrawlerConfig, FetcherConfig
from episodarr.domain.exceptions import ConfigLoadError

from .adapters import (
    crawler_to_dict,
    fetcher_to_dict,
    to_domain_crawler,
    to_domain_fetcher,
)
from .validation_schema import CrawlersFileModel, FetchersFileModel
from .yaml_io import read_yaml_mapping, write_yaml

log = structlog.get_logger(__name__)


def load_crawler_configs(path: Path) -> list[CrawlerConfig]:
    """Load all crawler configurations in file order."""
    data = read_yaml_mapping(path, store="crawlers")
    try:
        model = CrawlersFileModel.model_validate(data)
    except ValidationError as e:
        log.error(
            "store_validation_failed",
            store="crawlers",
            path=str(path),
            error_details=e.errors(),
        )
        raise ConfigLoadError(f"Invalid crawlers store {path}: {e}") from e

    configs = [to_domain_crawler(item) for item in model.crawlers]
    log.debug("crawlers_loaded", path=str(path), count=len(configs))
    return configs


def save_crawler_configs(path: Path, configs: list[CrawlerConfig]) -> None:
    write_yaml(path, {"crawlers": [crawler_to_dict(c) for c in configs]})


def load_fetcher_configs(path: Path) -> list[FetcherConfig]:
    """Load all fetcher configurations in file order."""
    data = read_yaml_mapping(path, store="fetchers")
    try:
        model = FetchersFileModel.model_validate(data)
    except ValidationError as e:
        log.error(
            "store_validation_failed",
            store="fetchers",
            path=str(path),
            error_details=e.errors(),
        )
        raise ConfigLoadError(f"Invalid fetchers store {path}: {e}") from e

    configs = [to_domain_fetcher(item) for item in model.fetchers]
    log.debug("fetchers_loaded", path=str(path), count=len(configs))
    return configs


def save_fetcher_configs(path: Path, configs: list[FetcherConfig]) -> None:
    write_yaml(path, {"fetchers": [fetcher_to_dict(c) for c in configs]})
