"""Article search against a NewsAPI-compatible ``/everything`` endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from newsapp.data import Article
from newsapp.errors import NetworkFailure, ParseFailure, UpstreamStatus

logger = logging.getLogger(__name__)

NEWSAPI_URL = "https://newsapi.org/v2/everything"
DEFAULT_PAGE_SIZE = 20


class NewsAPISearcher:
    """Search for news articles using the NewsAPI HTTP API.

    Each call to :meth:`search` issues exactly one GET request. There is no
    retry and no timeout; the request runs until the transport settles.

    Args:
        api_key: NewsAPI key, sent as the ``apiKey`` query parameter.
        base_url: Search endpoint URL.
        page_size: Number of articles requested per search.
        client: Optional shared ``httpx.AsyncClient``. When given it is reused
            and never closed by the searcher.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = NEWSAPI_URL,
        page_size: int = DEFAULT_PAGE_SIZE,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("NewsAPI key required. Pass api_key.")
        self._api_key = api_key
        self._base_url = base_url
        self._page_size = page_size
        self._client = client

    async def search(self, query: str) -> list[Article]:
        """Fetch articles for a query.

        Args:
            query: Search term; an empty string is sent as-is.

        Returns:
            Articles from the response's ``articles`` field, or an empty list
            when the field is absent.

        Raises:
            NetworkFailure: The request could not be completed.
            UpstreamStatus: The upstream answered with a non-2xx status.
            ParseFailure: The body was not a JSON object.
        """
        params: dict[str, str | int] = {
            "q": query,
            "pageSize": self._page_size,
            "apiKey": self._api_key,
        }
        logger.debug("Searching %s for %r", self._base_url, query)

        try:
            if self._client is not None:
                response = await self._client.get(self._base_url, params=params)
            else:
                async with httpx.AsyncClient(timeout=None) as client:
                    response = await client.get(self._base_url, params=params)
        except httpx.HTTPError as e:
            raise NetworkFailure(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise UpstreamStatus(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ParseFailure(f"Invalid JSON in response: {e}") from e
        if not isinstance(data, dict):
            raise ParseFailure(f"Expected a JSON object, got {type(data).__name__}")

        return _parse_articles(data)


def _parse_articles(data: dict[str, Any]) -> list[Article]:
    """Convert the ``articles`` array of a response body into Articles."""
    items = data.get("articles") or []
    if not isinstance(items, list):
        raise ParseFailure(f"Expected 'articles' to be a list, got {type(items).__name__}")
    articles: list[Article] = []
    for item in items:
        if not isinstance(item, dict):
            logger.warning("Skipping malformed article entry: %r", item)
            continue
        articles.append(Article.from_api(item))
    return articles
