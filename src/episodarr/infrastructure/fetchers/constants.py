"""Shared constants for fetchers."""

from __future__ import annotations

from episodarr.infrastructure.config.defaults import APP_VERSION

DEFAULT_USER_AGENT = f"episodarr/{APP_VERSION}"
DEFAULT_SUBMISSION_TIMEOUT = 30.0

# Exact body qBittorrent returns for an accepted request.
SUCCESS_MARKER = "Ok."
