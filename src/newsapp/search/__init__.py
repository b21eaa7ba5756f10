from newsapp.search.base import ArticleSearcher
from newsapp.search.newsapi import NEWSAPI_URL, NewsAPISearcher

__all__ = ["NEWSAPI_URL", "ArticleSearcher", "NewsAPISearcher"]
