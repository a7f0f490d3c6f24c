"""Advance tracked contents: predict, discover, submit, persist."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from episodarr.domain.entities import Content, WebFile, WebResponse
from episodarr.domain.exceptions import (
    ContentStoreError,
    DiscoveryError,
    SubmissionError,
    SubmissionRejected,
)
from episodarr.domain.ports import ContentRepository, CrawlerPort, FetcherPort

log = structlog.get_logger(__name__)


@dataclass
class RunSummary:
    """Outcome of one pass over the content store."""

    advanced: list[tuple[Content, Content]] = field(default_factory=list)
    unchanged: list[Content] = field(default_factory=list)


class AdvanceContentsUseCase:
    """Moves every tracked content to its next available installment.

    Flow per content (store order):
        1. Predict candidates (next episode, then next season)
        2. Find the candidate via the crawler
        3. Submit the located link via the fetcher
        4. On success replace the content and rewrite the whole store
           immediately, then move on to the next content

    A failed candidate only aborts that candidate. A failed store write is
    logged and the run goes on; the advance stays in memory and is written
    by the next successful save.
    """

    def __init__(
        self,
        repository: ContentRepository,
        crawler: CrawlerPort,
        fetcher: FetcherPort,
    ):
        self.repository = repository
        self.crawler = crawler
        self.fetcher = fetcher

    def execute(self, contents: list[Content]) -> RunSummary:
        """Advance ``contents`` in place and return what changed."""
        summary = RunSummary()

        for index, current in enumerate(contents):
            advanced = self._advance(current)
            if advanced is None:
                log.info("content_unchanged", query=current.to_query())
                summary.unchanged.append(current)
                continue

            new_content, response = advanced
            contents[index] = new_content
            try:
                self.repository.save(contents)
            except ContentStoreError as e:
                log.error(
                    "content_save_failed",
                    query=new_content.to_query(),
                    error=str(e),
                )
            log.info(
                "content_advanced",
                previous=current.to_query(),
                current=new_content.to_query(),
                response=response.response,
            )
            summary.advanced.append((current, new_content))

        log.info(
            "run_completed",
            advanced=len(summary.advanced),
            unchanged=len(summary.unchanged),
        )
        return summary

    def _advance(self, content: Content) -> tuple[Content, WebResponse] | None:
        for candidate in content.predict_next():
            query = candidate.to_query()
            log.info("content_search_started", query=query)

            try:
                web_file = self.crawler.find(candidate)
            except DiscoveryError as e:
                log.error(
                    "content_not_found", query=query, reason=e.reason, error=str(e)
                )
                continue

            log.info("content_found", query=query, link=web_file.link)

            try:
                response = self._submit(web_file)
            except SubmissionRejected as e:
                log.error(
                    "download_not_successful",
                    query=query,
                    response=e.response.response,
                )
                continue
            except SubmissionError as e:
                log.error(
                    "download_failed", query=query, reason=e.reason, error=str(e)
                )
                continue

            return candidate, response

        return None

    def _submit(self, web_file: WebFile) -> WebResponse:
        response = self.fetcher.fetch(web_file)
        if not response.success:
            raise SubmissionRejected(response)
        return response
