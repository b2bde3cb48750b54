"""HTTP client for my.compscicenter.ru."""

from __future__ import annotations

import logging
from typing import Any

import httpx

BASE_URL = "https://my.compscicenter.ru"
ASSIGNMENTS_URL = f"{BASE_URL}/teaching/assignments"
SESSION_COOKIE = "cscsessionid"

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """Page could not be fetched."""


class SessionExpiredError(NetworkError):
    """Platform answered with its login page."""


class CscClient:
    """Cookie-authenticated page fetcher.

    Every distinct ``(url, params)`` pair is requested at most once per
    client; later calls return the cached page text.
    """

    def __init__(
        self,
        session_id: str,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            cookies={SESSION_COOKIE: session_id},
            follow_redirects=True,
            timeout=timeout,
            transport=transport,
        )
        self._pages: dict[tuple[str, tuple[tuple[str, str], ...]], str] = {}

    @staticmethod
    def _is_login_response(resp: httpx.Response) -> bool:
        return resp.url.path.startswith("/login")

    def _request(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            resp = self._client.get(url, params=params)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"GET {url} failed: {e}") from e

        if self._is_login_response(resp):
            raise SessionExpiredError(
                f"GET {url} redirected to login page: {SESSION_COOKIE} is not valid"
            )
        return resp

    def fetch(self, url: str, params: dict[str, Any] | None = None) -> str:
        """Return page text, requesting it only on first use."""
        key = (url, tuple(sorted((k, str(v)) for k, v in (params or {}).items())))
        cached = self._pages.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s %s", url, params or "")
            return cached

        logger.debug("Fetching %s %s", url, params or "")
        text = self._request(url, params).text
        self._pages[key] = text
        return text

    def fetch_assignment_page(self, assignment_id: str) -> str:
        """Return assignment listing HTML."""
        return self.fetch(ASSIGNMENTS_URL, {"assignment": assignment_id})

    def fetch_submission_page(self, url: str) -> str:
        """Return submission page HTML."""
        return self.fetch(url)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> CscClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
