"""Shared fixtures for integration tests.

These tests use real infrastructure components (YAML stores, the two-stage
crawler, the qBittorrent fetcher) with mocked HTTP via respx.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import respx

_INDEXER = "https://indexer.example"
_QBITTORRENT = "http://qbittorrent.local:8080"


@pytest.fixture()
def respx_mock() -> respx.MockRouter:
    """Explicit respx mock router for request interception."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture()
def store_dir(tmp_path: Path) -> Path:
    """Directory holding contents/crawlers/fetchers stores for one run."""
    (tmp_path / "crawlers.yaml").write_text(
        f"""\
crawlers:
  - type: twostageweb
    url: {_INDEXER}/
    search_page: search
    search_get_name: q
    categories: [tv]
    categories_get_name: cat
    first_stage_match: table.results a.title
    second_stage_match: a.download
""",
        encoding="utf-8",
    )
    (tmp_path / "fetchers.yaml").write_text(
        f"""\
fetchers:
  - type: qbfetcher
    url: {_QBITTORRENT}/
    add_url: /api/v2/torrents/add
    login_url: /api/v2/auth/login
    username: admin
    password: secret
    save_path: /downloads/
""",
        encoding="utf-8",
    )
    (tmp_path / "contents.yaml").write_text(
        """\
content:
  - prefix: ""
    title: Show
    first_prefix: S
    first: 1
    second_prefix: E
    second: 5
    digits: 2
    postfix: ""
  - prefix: ""
    title: Gone
    first_prefix: S
    first: 4
    second_prefix: E
    second: 10
    digits: 2
    postfix: ""
  - prefix: ""
    title: Finale
    first_prefix: S
    first: 2
    second_prefix: E
    second: 8
    digits: 2
    postfix: ""
""",
        encoding="utf-8",
    )
    return tmp_path
