from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict


def as_utc(dt: datetime) -> datetime:
    """Read naive datetimes as UTC."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class FeedEndpoint:
    """One feed URL tagged with the category it is fetched under."""
    url: str
    category: str


@dataclass(frozen=True)
class Article:
    """
    Stable public model representing one aggregated article.

    WARNING: Do not change fields lightly. `to_dict` is the wire contract
    consumed by the presentation layer.
    """
    id: str
    title: str
    description: str
    category: str
    image: str
    author: str
    published_at: datetime
    url: str
    source: str
    is_hero: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "image": self.image,
            "author": self.author,
            "publishedAt": as_utc(self.published_at).isoformat(),
            "url": self.url,
            "source": self.source,
        }
        if self.is_hero:
            data["isHero"] = True
        return data
