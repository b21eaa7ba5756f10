"""Core data models for the news view."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Article:
    """One search result as returned by the upstream news API.

    Every field is optional; the upstream is free to omit any of them.
    """

    title: str | None = None
    description: str | None = None
    url: str | None = None
    image_url: str | None = None
    source_name: str | None = None
    published_at: datetime | None = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Article":
        """Build an Article from one entry of the upstream ``articles`` array."""
        source = item.get("source")
        source_name = _str_or_none(source.get("name")) if isinstance(source, dict) else None
        return cls(
            title=_str_or_none(item.get("title")),
            description=_str_or_none(item.get("description")),
            url=_str_or_none(item.get("url")),
            image_url=_str_or_none(item.get("urlToImage")),
            source_name=source_name,
            published_at=_parse_timestamp(item.get("publishedAt")),
        )


@dataclass
class SearchState:
    """State held by a single news view."""

    query: str = "technology"
    results: list[Article] = field(default_factory=list)
    is_loading: bool = False
    last_error: str | None = None


def _str_or_none(value: Any) -> str | None:
    """Keep string fields; anything else the upstream sends counts as absent."""
    return value if isinstance(value, str) else None


def _parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None when absent or malformed."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
