from __future__ import annotations

import logging
from enum import Enum
from urllib.parse import urljoin

import httpx

from rank_tracker.config.settings import Settings
from rank_tracker.errors import FetchError

logger = logging.getLogger(__name__)


class SearchScope(str, Enum):
    nexearch = "nexearch"
    web = "web"
    view = "view"
    blog = "blog"


class NaverSearchClient:
    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._settings.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": self._settings.accept_language,
        }

    def _client(self, follow_redirects: bool) -> httpx.Client:
        timeout = httpx.Timeout(self._settings.http_timeout)
        return httpx.Client(
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=self._transport,
        )

    def fetch(self, keyword: str, scope: SearchScope | str = SearchScope.nexearch) -> str:
        scope = SearchScope(scope)
        params = {"where": scope.value, "query": keyword}
        try:
            with self._client(follow_redirects=True) as client:
                response = client.get(
                    self._settings.naver_search_url, params=params, headers=self._headers()
                )
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as exc:
            logger.error("SERP fetch failed: keyword=%s scope=%s status=%s",
                         keyword, scope.value, exc.response.status_code)
            raise FetchError(
                f"SERP returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("SERP fetch failed: keyword=%s scope=%s error=%s", keyword, scope.value, exc)
            raise FetchError(f"SERP unreachable: {exc}") from exc

    def resolve_redirect(self, url: str) -> str | None:
        """Follow a single ad-redirect hop and return its Location header, or None."""
        try:
            with self._client(follow_redirects=False) as client:
                response = client.get(url, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.debug("redirect resolution failed: url=%s error=%s", url, exc)
            return None
        if not response.is_redirect:
            logger.debug("no redirect: url=%s status=%s", url, response.status_code)
            return None
        location = response.headers.get("Location")
        if not location:
            return None
        return urljoin(str(response.url), location)
