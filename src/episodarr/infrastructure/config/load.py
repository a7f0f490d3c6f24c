"""Layered application config: defaults < YAML < EPISODARR_* env < CLI."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv
from pydantic import ValidationError

from episodarr.domain.exceptions import ConfigLoadError
from episodarr.infrastructure.persistence.yaml_io import read_yaml_mapping

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

# Flat key (env var / CLI override) -> (section, key) in config.yaml.
FLAT_KEYS: dict[str, tuple[str, str]] = {
    "contents_path": ("stores", "contents"),
    "crawlers_path": ("stores", "crawlers"),
    "fetchers_path": ("stores", "fetchers"),
    "http_timeout_seconds": ("http", "timeout_seconds"),
    "http_follow_redirects": ("http", "follow_redirects"),
    "submission_timeout_seconds": ("submission", "timeout_seconds"),
    "submission_user_agent": ("submission", "user_agent"),
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
    "log_file": ("logging", "file"),
}
SECTIONS = frozenset(section for section, _ in FLAT_KEYS.values())
TOP_LEVEL_KEYS = ("app_name", "environment")


def _merge_into(target: dict[str, Any], layer: Mapping[str, Any]) -> None:
    """Merge one sectioned *layer* into *target*; sections merge key by key."""
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        else:
            target[key] = value


def _sectioned(layer: Mapping[str, Any]) -> dict[str, Any]:
    """Bring a layer that may mix flat and sectioned keys into sectioned form.

    Unknown keys are dropped so a stray YAML entry never reaches validation.
    """
    out: dict[str, Any] = {
        key: layer[key] for key in TOP_LEVEL_KEYS if key in layer
    }
    for section in SECTIONS:
        block = layer.get(section)
        if isinstance(block, Mapping):
            out[section] = dict(block)
    for flat_key, (section, key) in FLAT_KEYS.items():
        if flat_key in layer:
            out.setdefault(section, {})[key] = layer[flat_key]
    return out


def _env_layer(dotenv_path: Path | None) -> dict[str, Any]:
    if dotenv_path is not None:
        if not dotenv_path.is_file():
            raise ConfigLoadError(f"dotenv file not found: {dotenv_path}")
        load_dotenv(dotenv_path, override=False)
    try:
        return EnvOverrides().to_update_dict()
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid EPISODARR_* environment value: {e}") from e


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Build the validated ``AppConfig``.

    Never creates files or directories.

    Raises:
        ConfigLoadError: The config or dotenv file is missing or malformed,
            or the merged values do not validate.
    """
    merged = _sectioned(deepcopy(DEFAULT_CONFIG))

    if config_path is not None:
        _merge_into(merged, _sectioned(read_yaml_mapping(config_path, store="config")))

    _merge_into(merged, _sectioned(_env_layer(dotenv_path)))
    _merge_into(merged, _sectioned(cli_overrides or {}))

    try:
        return AppConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid configuration: {e}") from e
