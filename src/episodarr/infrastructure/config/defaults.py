"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

APP_VERSION = "0.1.0"

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "episodarr",
    "environment": "dev",
    "stores": {
        "contents": "./contents.yaml",
        "crawlers": "./crawlers.yaml",
        "fetchers": "./fetchers.yaml",
    },
    "http": {
        "timeout_seconds": 30.0,
        "follow_redirects": True,
    },
    "submission": {
        "timeout_seconds": 30.0,
        "user_agent": f"episodarr/{APP_VERSION}",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
        "file": None,
    },
}
