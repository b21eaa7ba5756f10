"""Pure rendering of a SearchState into a view tree.

Nothing here performs I/O or reads the clock: the same state always renders
to the same tree.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from newsapp.data import Article, SearchState
from newsapp.format import truncate

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/400x200?text=No+Image"
DESCRIPTION_LENGTH = 100


@dataclass(frozen=True)
class ArticleCard:
    """Display-ready fields of a single article."""

    key: str
    title: str
    meta: str
    description: str
    image_url: str
    href: str
    link_text: str


@dataclass(frozen=True)
class Loading:
    message: str = "Loading Articles"


@dataclass(frozen=True)
class Grid:
    cards: tuple[ArticleCard, ...]


@dataclass(frozen=True)
class Empty:
    message: str


@dataclass(frozen=True)
class ViewTree:
    """Everything the news view shows for one state.

    Args:
        error: Banner text, or None when there is no error to show.
        body: Loading indicator, card grid, or empty-state message.
    """

    error: str | None
    body: Loading | Grid | Empty


def matches(article: Article, query: str) -> bool:
    """Whether the article's title or description contains the query, ignoring case."""
    needle = query.casefold()
    return needle in (article.title or "").casefold() or needle in (
        article.description or ""
    ).casefold()


def filter_articles(articles: list[Article], query: str) -> list[Article]:
    return [a for a in articles if matches(a, query)]


def article_key(article: Article) -> str:
    """Identifier used to key a card.

    The URL when present. Otherwise a digest of title, publish time and
    description, so the key does not depend on the article's position.
    """
    if article.url:
        return article.url
    published = article.published_at.isoformat() if article.published_at else ""
    raw = "\x1f".join((article.title or "", published, article.description or ""))
    return "sha1:" + hashlib.sha1(raw.encode("utf-8")).hexdigest()[:16]


def render_card(article: Article) -> ArticleCard:
    source = article.source_name or "Unknown source"
    meta = source
    if article.published_at:
        meta = f"{source} • {article.published_at.date().isoformat()}"
    return ArticleCard(
        key=article_key(article),
        title=article.title or "No title available",
        meta=meta,
        description=truncate(article.description or "No description available", DESCRIPTION_LENGTH),
        image_url=article.image_url or PLACEHOLDER_IMAGE_URL,
        href=article.url or "#",
        link_text=f"Read more - {article.source_name or 'source'}",
    )


def render(state: SearchState) -> ViewTree:
    """Render the view for a state.

    While loading, the grid is hidden even if earlier results are held.
    """
    error = f"Error: {state.last_error}" if state.last_error else None
    if state.is_loading:
        return ViewTree(error=error, body=Loading())

    visible = filter_articles(state.results, state.query)
    if visible:
        return ViewTree(error=error, body=Grid(cards=tuple(render_card(a) for a in visible)))
    return ViewTree(error=error, body=Empty(message=f'No articles found for "{state.query}"'))


def render_text(tree: ViewTree) -> str:
    """Format a view tree as plain text for a terminal."""
    lines: list[str] = []
    if tree.error:
        lines.append(tree.error)

    body = tree.body
    if isinstance(body, Grid):
        for i, card in enumerate(body.cards, 1):
            lines.append(f"{i}. {card.title}")
            lines.append(f"   {card.meta}")
            lines.append(f"   {card.description}")
            lines.append(f"   {card.link_text}: {card.href}")
    else:
        lines.append(body.message)
    return "\n".join(lines)
