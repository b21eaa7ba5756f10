"""Pydantic configuration models for the news view."""

from typing import Literal

from pydantic import BaseModel, Field

from newsapp.search.newsapi import DEFAULT_PAGE_SIZE, NEWSAPI_URL
from newsapp.view import DEFAULT_QUERY


class NewsAPIConfig(BaseModel):
    """Configuration for NewsAPISearcher."""

    api_key: str | None = None
    base_url: str = NEWSAPI_URL
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)

    model_config = {"frozen": True}


class ViewConfig(BaseModel):
    """Configuration for NewsView."""

    default_query: str = DEFAULT_QUERY

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """Logging level for the CLI."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


class NewsAppConfig(BaseModel):
    """Root configuration for the news view."""

    api: NewsAPIConfig = Field(default_factory=NewsAPIConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
