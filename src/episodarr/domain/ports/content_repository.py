"""Port for Content persistence."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from episodarr.domain.entities.content import Content


@runtime_checkable
class ContentRepository(Protocol):
    """Ordered store of tracked contents, rewritten as a whole."""

    def load(self) -> list[Content]: ...

    def save(self, contents: list[Content]) -> None: ...
