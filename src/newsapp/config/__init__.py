"""Configuration module for the news view."""

from newsapp.config.factory import create_searcher, create_view, resolve_api_key
from newsapp.config.loader import get_default_config_path, load_config
from newsapp.config.models import LoggingConfig, NewsAPIConfig, NewsAppConfig, ViewConfig

__all__ = [
    "LoggingConfig",
    "NewsAPIConfig",
    "NewsAppConfig",
    "ViewConfig",
    "create_searcher",
    "create_view",
    "get_default_config_path",
    "load_config",
    "resolve_api_key",
]
