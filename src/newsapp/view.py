"""The news view: owns a SearchState and drives fetches into it."""

import logging
from dataclasses import dataclass, field

from newsapp.data import Article, SearchState
from newsapp.errors import FetchError
from newsapp.render import ViewTree, render
from newsapp.search.base import ArticleSearcher

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "technology"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one call to :meth:`NewsView.search`.

    Args:
        articles: Articles fetched (empty on failure).
        error: The failure, if any.
        stale: True if a newer search started before this one settled, in
            which case the view's state was left untouched.
    """

    articles: list[Article] = field(default_factory=list)
    error: FetchError | None = None
    stale: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class NewsView:
    """Stateful news view.

    Holds the query field, the last results, a loading flag and an error
    slot. Each search bumps a generation counter; only the response of the
    latest search may write to the state, so an older request settling late
    cannot overwrite a newer one.

    Args:
        searcher: Upstream article searcher.
        default_query: Query fetched once on activation.
    """

    def __init__(self, searcher: ArticleSearcher, *, default_query: str = DEFAULT_QUERY) -> None:
        self._searcher = searcher
        self._default_query = default_query
        self._generation = 0
        self._activated = False
        self.state = SearchState(query=default_query)

    @property
    def generation(self) -> int:
        """Number of searches started so far."""
        return self._generation

    def set_query(self, text: str) -> None:
        """Update the query field without fetching."""
        self.state.query = text

    async def search(self, query: str) -> SearchResult:
        """Fetch articles for ``query`` into the state.

        Failures are caught here: results are cleared, ``last_error`` gets
        the message and the error is logged. ``is_loading`` is reset on every
        exit path of the current request.
        """
        self._generation += 1
        generation = self._generation
        self.state.is_loading = True
        self.state.last_error = None

        try:
            articles = await self._searcher.search(query)
        except FetchError as e:
            if generation != self._generation:
                logger.debug("Discarding stale failure for %r: %s", query, e)
                return SearchResult(error=e, stale=True)
            logger.error("Failed to fetch articles: %s", e)
            self.state.results = []
            self.state.last_error = str(e)
            return SearchResult(error=e)
        finally:
            if generation == self._generation:
                self.state.is_loading = False

        if generation != self._generation:
            logger.debug("Discarding stale response for %r (%d articles)", query, len(articles))
            return SearchResult(articles=articles, stale=True)

        logger.info("Fetched %d articles for %r", len(articles), query)
        self.state.results = articles
        return SearchResult(articles=articles)

    async def submit(self) -> SearchResult:
        """Search for whatever the query field currently holds."""
        return await self.search(self.state.query)

    async def activate(self) -> SearchResult:
        """Run the initial fetch for the default query.

        Raises:
            RuntimeError: If the view was already activated.
        """
        if self._activated:
            raise RuntimeError("NewsView already activated")
        self._activated = True
        return await self.search(self._default_query)

    def render(self) -> ViewTree:
        return render(self.state)
