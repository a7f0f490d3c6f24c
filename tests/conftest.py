"""Shared test fixtures for Episodarr test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from episodarr.domain.entities import (
    Content,
    QBittorrentConfig,
    TwoStageWebConfig,
    WebFile,
)
from episodarr.infrastructure.logging.setup import stop_logging

# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def content() -> Content:
    """Season 1, episode 5 of a two-digit padded show."""
    return Content(
        prefix="",
        title="Show",
        first_prefix="S",
        first=1,
        second_prefix="E",
        second=5,
        digits=2,
        postfix="",
    )


@pytest.fixture()
def web_file(content: Content) -> WebFile:
    return WebFile(content=content, link="magnet:?xt=urn:btih:abc123")


# ---------------------------------------------------------------------------
# Strategy config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def two_stage_config() -> TwoStageWebConfig:
    return TwoStageWebConfig(
        url="https://indexer.example/",
        search_page="search",
        search_get_name="q",
        categories=("tv", "hd"),
        categories_get_name="cat",
        user_agent="TestAgent/1.0",
        limit=10,
        first_stage_match="table.results a.title",
        second_stage_match="a.download",
    )


@pytest.fixture()
def qb_config() -> QBittorrentConfig:
    return QBittorrentConfig(
        url="http://qbittorrent.local:8080/",
        add_url="/api/v2/torrents/add",
        login_url="/api/v2/auth/login",
        username="admin",
        password="secret",
        save_path="/downloads/",
    )


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture()
def restore_root_logger() -> Iterator[None]:
    """Undo configure_logging(): stop the listener, restore root handlers."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    stop_logging()
    root.handlers[:] = handlers
    root.setLevel(level)
