from newsapp.data.models import Article, SearchState

__all__ = ["Article", "SearchState"]
