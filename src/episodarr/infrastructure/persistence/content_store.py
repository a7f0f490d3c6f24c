"""Content repository backed by a single YAML file."""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from episodarr.domain.entities import Content
from episodarr.domain.exceptions import ConfigLoadError, ContentStoreError

from .adapters import content_to_dict, to_domain_content
from .validation_schema import ContentFileModel
from .yaml_io import read_yaml_mapping, write_yaml

log = structlog.get_logger(__name__)


class YamlContentRepository:
    """Stores the ordered content list under the ``content`` key.

    The whole file is rewritten on every save; list order and field order
    are preserved.
    """

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> list[Content]:
        """Load all contents in file order."""
        data = read_yaml_mapping(self.path, store="contents")
        try:
            model = ContentFileModel.model_validate(data)
        except ValidationError as e:
            log.error(
                "store_validation_failed",
                store="contents",
                path=str(self.path),
                error_details=e.errors(),
            )
            raise ConfigLoadError(f"Invalid contents store {self.path}: {e}") from e

        contents = [to_domain_content(item) for item in model.content]
        log.debug("contents_loaded", path=str(self.path), count=len(contents))
        return contents

    def save(self, contents: list[Content]) -> None:
        """Replace the store with *contents*."""
        try:
            write_yaml(self.path, {"content": [content_to_dict(c) for c in contents]})
        except (OSError, yaml.YAMLError) as e:
            log.error("contents_save_failed", path=str(self.path), error=str(e))
            raise ContentStoreError(f"Cannot write contents store {self.path}: {e}") from e
        log.debug("contents_saved", path=str(self.path), count=len(contents))
