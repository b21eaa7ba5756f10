"""Factory functions to create components from configuration."""

import os

import httpx

from newsapp.config.models import NewsAPIConfig, NewsAppConfig
from newsapp.search.newsapi import NewsAPISearcher
from newsapp.view import NewsView

API_KEY_ENV_VAR = "NEWS_API_KEY"


def resolve_api_key(config: NewsAPIConfig) -> str:
    """Return the configured API key, falling back to the NEWS_API_KEY env var.

    Raises:
        ValueError: If neither is set.
    """
    api_key = config.api_key or os.environ.get(API_KEY_ENV_VAR)
    if not api_key:
        msg = f"NewsAPI key required. Set api.api_key in the config or the {API_KEY_ENV_VAR} env var."
        raise ValueError(msg)
    return api_key


def create_searcher(
    config: NewsAPIConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> NewsAPISearcher:
    """Create an article searcher from config."""
    return NewsAPISearcher(
        api_key=resolve_api_key(config),
        base_url=config.base_url,
        page_size=config.page_size,
        client=client,
    )


def create_view(
    config: NewsAppConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> NewsView:
    """Create a news view with its searcher from root config."""
    searcher = create_searcher(config.api, client=client)
    return NewsView(searcher, default_query=config.view.default_query)
