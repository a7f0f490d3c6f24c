"""YAML read/write helpers shared by the stores."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml

from episodarr.domain.exceptions import ConfigLoadError

log = structlog.get_logger(__name__)


def read_yaml_mapping(path: Path, *, store: str) -> dict[str, Any]:
    """Read *path* as a YAML mapping.

    An empty file yields ``{}``. Anything unreadable or not a mapping raises
    ``ConfigLoadError``.
    """
    try:
        raw = path.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
    except (OSError, UnicodeDecodeError) as e:
        log.error(
            "store_load_failed",
            store=store,
            path=str(path),
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise ConfigLoadError(f"Cannot read {store} store {path}: {e}") from e
    except yaml.YAMLError as e:
        log.error(
            "store_load_failed",
            store=store,
            path=str(path),
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise ConfigLoadError(f"Invalid YAML in {store} store {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"{store} store {path} must be a mapping, got: {type(data).__name__}"
        )
    return data


def write_yaml(path: Path, data: dict[str, Any]) -> None:
    """Write *data* to *path*, keeping key order, via a temp file + rename."""
    text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    tmp = path.with_name(f".{path.name}.tmp")
    tmp.write_text(text, encoding="utf-8")
    tmp.replace(path)
