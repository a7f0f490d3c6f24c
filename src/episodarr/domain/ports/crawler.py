"""Port for locating a download link for a content candidate."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from episodarr.domain.entities.content import Content, WebFile


@runtime_checkable
class CrawlerPort(Protocol):
    """Synchronous discovery strategy.

    Implementations raise ``DiscoveryError`` subclasses when nothing usable
    is found; they never retry.
    """

    def find(self, content: Content) -> WebFile: ...

    def close(self) -> None: ...
