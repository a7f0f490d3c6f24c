"""Episodarr error taxonomy."""

from __future__ import annotations

from episodarr.domain.entities.content import WebResponse


class EpisodarrError(Exception):
    """Base class for all episodarr errors."""


class ConfigLoadError(EpisodarrError):
    """Raised when a store or the app config cannot be loaded. Fatal for a run."""


class ContentStoreError(EpisodarrError):
    """Raised when the content store cannot be written."""


class DiscoveryError(EpisodarrError):
    """A crawler could not locate a download link for one candidate."""

    reason = "discovery-failed"


class DiscoveryFetchError(DiscoveryError):
    """Transport failure or non-2xx answer while crawling."""

    reason = "fetch-failed"


class FirstStageEmptyError(DiscoveryError):
    reason = "first-stage-empty"


class SecondStageEmptyError(DiscoveryError):
    reason = "second-stage-empty"


class SubmissionError(EpisodarrError):
    """A fetcher could not hand a link to the download service."""

    reason = "submission-failed"


class LoginFailedError(SubmissionError):
    reason = "login-failed"


class SubmitFailedError(SubmissionError):
    reason = "submit-failed"


class SubmissionRejected(EpisodarrError):
    """The download service answered, but not with its success marker."""

    reason = "not-successful"

    def __init__(self, response: WebResponse) -> None:
        super().__init__(f"Download service answered {response.response!r}")
        self.response = response
