"""
dev.to API client for fetching unpublished articles.

The client pages through /articles/me/unpublished until the API returns an
empty page. No total-count field is consulted and nothing is retried: any
transport error, non-success status or malformed body aborts the fetch and
discards the pages gathered so far.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Callable

import httpx

from .config import ApiConfig
from .errors import ApiStatusError, NetworkError, ResponseParseError
from .types import Article, parse_articles

logger = logging.getLogger(__name__)

UNPUBLISHED_PATH = "/articles/me/unpublished"


class DevToClient:
    """Synchronous client for the authenticated dev.to article endpoints.

    Attributes:
        api_key: The user's dev.to API key
        cfg: Endpoint, page size and timing settings
    """

    def __init__(
        self,
        api_key: str,
        cfg: ApiConfig | None = None,
        http_client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.api_key = api_key
        self.cfg = cfg or ApiConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self.cfg.timeout_seconds)
        self._sleep = sleep

    def __enter__(self) -> "DevToClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get_unpublished_articles(self) -> list[Article]:
        """Fetch every unpublished article, page by page.

        Starts at page 1 and stops at the first empty page. Waits
        `page_delay_seconds` between requests. When `max_pages` is set the
        loop also stops after that many non-empty pages.

        Returns:
            All articles across pages, in the order the API returned them

        Raises:
            NetworkError: On transport failures
            ApiStatusError: On a non-success HTTP status
            ResponseParseError: If a page is not a valid JSON array of articles
        """
        all_articles: list[Article] = []
        page = 1

        while True:
            articles = self._fetch_page(page)
            if not articles:
                break
            all_articles.extend(articles)
            logger.info("Page %d: fetched %d articles so far...", page, len(all_articles))
            if self.cfg.max_pages is not None and page >= self.cfg.max_pages:
                logger.warning(
                    "Stopped after %d pages (max_pages); results may be incomplete", page
                )
                break
            page += 1
            self._sleep(self.cfg.page_delay_seconds)

        logger.info("Done! Total %d articles fetched.", len(all_articles))
        return all_articles

    def _fetch_page(self, page: int) -> list[Article]:
        url = self.cfg.base_url.rstrip("/") + UNPUBLISHED_PATH
        params = {"page": page, "per_page": self.cfg.per_page}
        headers = {"api-key": self.api_key, "User-Agent": self.cfg.user_agent}
        logger.debug("GET %s page=%d per_page=%d", url, page, self.cfg.per_page)

        try:
            resp = self._client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            raise NetworkError(
                f"Failed to fetch articles from dev.to API: {type(exc).__name__}: {exc}"
            ) from exc

        if not resp.is_success:
            raise ApiStatusError(resp.status_code, resp.reason_phrase)

        try:
            data = json.loads(resp.text)
            # lone surrogates decode fine but cannot be written back as UTF-8
            json.dumps(data, ensure_ascii=False).encode("utf-8")
            return parse_articles(data)
        except (ValueError, RecursionError) as exc:
            raise ResponseParseError(f"Failed to parse JSON response: {exc}") from exc
