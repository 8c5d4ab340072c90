"""Data models for the extraction pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Protocol, runtime_checkable

from shot_search.scraper import markup
from shot_search.scraper.patterns import HOST


@runtime_checkable
class PlaidItem(Protocol):
    """Anything listable in a feed: an identifier, a title and a link."""

    @property
    def id(self) -> int: ...

    @property
    def title(self) -> str: ...

    @property
    def url(self) -> str: ...


@dataclass(frozen=True)
class ParsedId:
    """An identifier recovered by a best-effort heuristic.

    ``recovered`` is ``False`` when the heuristic did not match and ``value``
    holds the sentinel instead of a real identifier.
    """

    value: int
    recovered: bool


@dataclass(frozen=True)
class Block:
    """One search-result element plus the base URL its relative links hang off."""

    element: markup.Element
    base_url: str = HOST

    @property
    def element_id(self) -> str:
        return str(self.element.get("id") or "")


@dataclass(frozen=True)
class User:
    """The author of a shot."""

    id: int
    name: str
    username: str
    url: str
    avatar_url: str
    is_pro: bool = False

    @property
    def high_quality_avatar_url(self) -> str | None:
        """Largest avatar variant, or ``None`` when there is no avatar."""
        if not self.avatar_url:
            return None
        return self.avatar_url.replace("/normal/", "/original/")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Shot:
    """A single search result."""

    id: int
    title: str
    description: str
    image_url: str
    views_count: int
    likes_count: int
    comments_count: int
    created_at: datetime | None
    url: str
    is_animated: bool
    author: User

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation; ``created_at`` becomes an ISO-8601 string."""
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data
