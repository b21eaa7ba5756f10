from typing import Protocol

from newsapp.data import Article


class ArticleSearcher(Protocol):
    """Interface for searching news articles."""

    async def search(self, query: str) -> list[Article]:
        """Search for articles matching the given query.

        Args:
            query: Free-text search term, forwarded verbatim (may be empty).

        Returns:
            Articles in the order the upstream returned them.

        Raises:
            FetchError: On transport, status or parse failure.
        """
        ...
