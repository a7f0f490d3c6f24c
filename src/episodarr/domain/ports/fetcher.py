"""Port for handing a located download link to a download service."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from episodarr.domain.entities.content import WebFile, WebResponse


@runtime_checkable
class FetcherPort(Protocol):
    """Synchronous submission strategy.

    A returned ``WebResponse`` with ``success=False`` means the service
    answered without its success marker. Transport and login problems raise
    ``SubmissionError`` subclasses.
    """

    def fetch(self, web_file: WebFile) -> WebResponse: ...

    def close(self) -> None: ...
