"""Tests for NewsView."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from newsapp.data import Article
from newsapp.errors import NetworkFailure, ParseFailure, UpstreamStatus
from newsapp.render import Empty, Grid, Loading
from newsapp.view import NewsView


@pytest.fixture
def articles() -> list[Article]:
    return [
        Article(title="New AI chip", url="https://example.com/ai"),
        Article(title="Garden tips", description="no mention", url="https://example.com/garden"),
    ]


@pytest.fixture
def mock_searcher(articles: list[Article]) -> MagicMock:
    searcher = MagicMock()
    searcher.search = AsyncMock(return_value=articles)
    return searcher


class TestSearch:
    """Tests for NewsView.search."""

    async def test_success_replaces_results(
        self, mock_searcher: MagicMock, articles: list[Article]
    ) -> None:
        view = NewsView(mock_searcher)
        view.state.last_error = "old error"

        result = await view.search("ai")

        assert result.ok
        assert not result.stale
        assert view.state.results == articles
        assert view.state.last_error is None
        assert view.state.is_loading is False
        mock_searcher.search.assert_awaited_once_with("ai")

    @pytest.mark.parametrize(
        "error",
        [UpstreamStatus(500), NetworkFailure("connection reset"), ParseFailure("bad json")],
    )
    async def test_failure_clears_results_and_sets_error(
        self, mock_searcher: MagicMock, articles: list[Article], error: Exception
    ) -> None:
        view = NewsView(mock_searcher)
        await view.search("ai")
        assert view.state.results == articles

        mock_searcher.search.side_effect = error
        result = await view.search("ai")

        assert not result.ok
        assert result.error is error
        assert view.state.results == []
        assert view.state.last_error == str(error)
        assert view.state.is_loading is False

    async def test_failure_is_logged(
        self, mock_searcher: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_searcher.search.side_effect = UpstreamStatus(429)
        view = NewsView(mock_searcher)

        with caplog.at_level(logging.ERROR, logger="newsapp.view"):
            await view.search("ai")

        assert "HTTP 429" in caplog.text

    async def test_loading_flag_only_while_in_flight(self) -> None:
        release = asyncio.Event()
        seen_loading: list[bool] = []
        view: NewsView

        async def slow_search(query: str) -> list[Article]:
            seen_loading.append(view.state.is_loading)
            await release.wait()
            return []

        searcher = MagicMock()
        searcher.search = slow_search
        view = NewsView(searcher)
        assert view.state.is_loading is False

        task = asyncio.create_task(view.search("x"))
        await asyncio.sleep(0)
        assert view.state.is_loading is True
        assert isinstance(view.render().body, Loading)

        release.set()
        await task
        assert seen_loading == [True]
        assert view.state.is_loading is False

    async def test_unexpected_error_still_resets_loading(self, mock_searcher: MagicMock) -> None:
        mock_searcher.search.side_effect = RuntimeError("bug")
        view = NewsView(mock_searcher)

        with pytest.raises(RuntimeError):
            await view.search("x")
        assert view.state.is_loading is False

    async def test_stale_response_does_not_overwrite_newer(self) -> None:
        """A slow earlier request settling last must not win."""
        old_article = Article(title="old", url="https://example.com/old")
        new_article = Article(title="new", url="https://example.com/new")
        release_old = asyncio.Event()

        async def search(query: str) -> list[Article]:
            if query == "old":
                await release_old.wait()
                return [old_article]
            return [new_article]

        searcher = MagicMock()
        searcher.search = search
        view = NewsView(searcher)

        old_task = asyncio.create_task(view.search("old"))
        await asyncio.sleep(0)
        new_result = await view.search("new")
        release_old.set()
        old_result = await old_task

        assert not new_result.stale
        assert old_result.stale
        assert view.state.results == [new_article]
        assert view.state.is_loading is False

    async def test_stale_failure_is_ignored(self) -> None:
        release_old = asyncio.Event()
        new_article = Article(title="new")

        async def search(query: str) -> list[Article]:
            if query == "old":
                await release_old.wait()
                raise UpstreamStatus(500)
            return [new_article]

        searcher = MagicMock()
        searcher.search = search
        view = NewsView(searcher)

        old_task = asyncio.create_task(view.search("old"))
        await asyncio.sleep(0)
        await view.search("new")
        release_old.set()
        old_result = await old_task

        assert old_result.stale
        assert view.state.last_error is None
        assert view.state.results == [new_article]

    async def test_earlier_request_does_not_clear_loading_of_newer(self) -> None:
        releases = {"old": asyncio.Event(), "new": asyncio.Event()}

        async def search(query: str) -> list[Article]:
            await releases[query].wait()
            return []

        searcher = MagicMock()
        searcher.search = search
        view = NewsView(searcher)

        first = asyncio.create_task(view.search("old"))
        second = asyncio.create_task(view.search("new"))
        await asyncio.sleep(0)

        releases["old"].set()
        await first
        assert view.state.is_loading is True

        releases["new"].set()
        await second
        assert view.state.is_loading is False


class TestSubmitAndActivate:
    """Tests for submission and initial activation."""

    async def test_activate_uses_default_query(self, mock_searcher: MagicMock) -> None:
        view = NewsView(mock_searcher)
        view.set_query("something else")

        await view.activate()

        mock_searcher.search.assert_awaited_once_with("technology")
        assert view.state.query == "something else"

    async def test_activate_runs_once(self, mock_searcher: MagicMock) -> None:
        view = NewsView(mock_searcher, default_query="science")
        await view.activate()

        with pytest.raises(RuntimeError, match="already activated"):
            await view.activate()
        mock_searcher.search.assert_awaited_once_with("science")

    async def test_submit_uses_current_query(self, mock_searcher: MagicMock) -> None:
        view = NewsView(mock_searcher)
        view.set_query("ai")

        await view.submit()

        mock_searcher.search.assert_awaited_once_with("ai")

    async def test_submit_forwards_empty_query(self, mock_searcher: MagicMock) -> None:
        view = NewsView(mock_searcher)
        view.set_query("")

        await view.submit()

        mock_searcher.search.assert_awaited_once_with("")

    async def test_render_filters_by_current_query(self, mock_searcher: MagicMock) -> None:
        view = NewsView(mock_searcher)
        view.set_query("ai")
        await view.submit()

        body = view.render().body
        assert isinstance(body, Grid)
        assert [c.title for c in body.cards] == ["New AI chip"]

        view.set_query("nothing matches")
        body = view.render().body
        assert isinstance(body, Empty)
        assert body.message == 'No articles found for "nothing matches"'

    async def test_generation_counts_searches(self, mock_searcher: MagicMock) -> None:
        view = NewsView(mock_searcher)
        assert view.generation == 0

        await view.activate()
        await view.submit()
        assert view.generation == 2
