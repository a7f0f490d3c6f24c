"""qBittorrent WebUI fetcher.

Logs in (when a username is configured) and posts the link to the
``add`` endpoint with a save path of ``save_path + content.title``. The
WebUI answers ``Ok.`` on success and e.g. ``Fails.`` otherwise.
"""

from __future__ import annotations

import httpx
import structlog

from episodarr.domain.entities import QBittorrentConfig, WebFile, WebResponse
from episodarr.domain.exceptions import LoginFailedError, SubmitFailedError

from .constants import DEFAULT_SUBMISSION_TIMEOUT, DEFAULT_USER_AGENT, SUCCESS_MARKER

log = structlog.get_logger(__name__)


class QBittorrentFetcher:
    """Fetcher for ``type: qbfetcher`` configurations."""

    name = "qbfetcher"

    def __init__(
        self,
        config: QBittorrentConfig,
        *,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_SUBMISSION_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.config = config
        self.base_url = config.url.rstrip("/")
        self._client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout
        self._user_agent = user_agent

    def _ensure_client(self) -> httpx.Client:
        # httpx.Client keeps the login cookie (SID) for the add request.
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout)
        return self._client

    def close(self) -> None:
        """Close the httpx client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    @property
    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self._user_agent, "Referer": self.base_url}

    def save_path_for(self, web_file: WebFile) -> str:
        return f"{self.config.save_path}{web_file.content.title}"

    def fetch(self, web_file: WebFile) -> WebResponse:
        """Queue *web_file* in qBittorrent.

        Returns a ``WebResponse`` whose ``success`` is true only for an exact
        ``Ok.`` answer.

        Raises:
            LoginFailedError: Login request failed or was refused.
            SubmitFailedError: The add request failed or answered non-2xx.
        """
        if self.config.username:
            self._login()

        url = f"{self.base_url}{self.config.add_url}"
        data = {"urls": web_file.link, "savepath": self.save_path_for(web_file)}
        log.debug("fetcher_add", url=url, savepath=data["savepath"])
        try:
            resp = self._ensure_client().post(url, data=data, headers=self._headers)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SubmitFailedError(
                f"add answered HTTP {e.response.status_code}: {url}"
            ) from e
        except httpx.HTTPError as e:
            raise SubmitFailedError(f"add request failed: {e}") from e

        body = resp.text
        return WebResponse(web_file=web_file, response=body, success=body == SUCCESS_MARKER)

    def _login(self) -> None:
        url = f"{self.base_url}{self.config.login_url}"
        data = {"username": self.config.username, "password": self.config.password}
        log.debug("fetcher_login", url=url, username=self.config.username)
        try:
            resp = self._ensure_client().post(url, data=data, headers=self._headers)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LoginFailedError(
                f"login answered HTTP {e.response.status_code}: {url}"
            ) from e
        except httpx.HTTPError as e:
            raise LoginFailedError(f"login request failed: {e}") from e

        if "ok" not in resp.text.lower():
            raise LoginFailedError(f"login refused: {resp.text!r}")
