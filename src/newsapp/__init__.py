"""newsapp: search a news API and render the results as article cards."""

from newsapp.config import NewsAppConfig, create_view, load_config
from newsapp.data import Article, SearchState
from newsapp.errors import FetchError, NetworkFailure, ParseFailure, UpstreamStatus
from newsapp.format import truncate
from newsapp.render import ArticleCard, ViewTree, article_key, filter_articles, render, render_text
from newsapp.search import ArticleSearcher, NewsAPISearcher
from newsapp.view import NewsView, SearchResult

__all__ = [
    # Models
    "Article",
    "SearchState",
    # Errors
    "FetchError",
    "NetworkFailure",
    "ParseFailure",
    "UpstreamStatus",
    # Searchers
    "ArticleSearcher",
    "NewsAPISearcher",
    # View
    "NewsView",
    "SearchResult",
    # Rendering
    "ArticleCard",
    "ViewTree",
    "article_key",
    "filter_articles",
    "render",
    "render_text",
    "truncate",
    # Config
    "NewsAppConfig",
    "create_view",
    "load_config",
]
