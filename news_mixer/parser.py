from __future__ import annotations

import calendar
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup
from dateutil.parser import parse as parse_date

from .images import entry_html, resolve_image
from .models import Article, FeedEndpoint

UNKNOWN_AUTHOR = "Unknown"
UNKNOWN_SOURCE = "Unknown Source"


def _to_datetime(entry: Dict[str, Any]) -> Optional[datetime]:
    """
    Return the entry date as an aware UTC datetime, or None.

    feedparser's published/updated/created_parsed struct_times are already UTC,
    so they go through calendar.timegm rather than mktime. When none is set the
    raw date strings are handed to dateutil; a naive result is read as UTC.
    """
    for key in ("published_parsed", "updated_parsed", "created_parsed"):
        val = entry.get(key)
        if isinstance(val, time.struct_time):
            # feedparser normalizes *_parsed to UTC
            return datetime.fromtimestamp(calendar.timegm(val), tz=timezone.utc)
    # Fallback: raw strings feedparser could not normalize
    for key in ("published", "updated", "created"):
        s = entry.get(key)
        if isinstance(s, str) and s:
            try:
                dt = parse_date(s)
            except (ValueError, OverflowError):
                continue
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)
            return dt.astimezone(timezone.utc)
    return None


def _get_id(entry: Dict[str, Any], link: str) -> str:
    for k in ("id", "guid"):
        v = entry.get(k)
        if isinstance(v, str) and v.strip():
            return v.strip()
    if link:
        return link
    # Only stable for the lifetime of one response
    return uuid.uuid4().hex


def _snippet(html: str) -> str:
    if not html:
        return ""
    text = BeautifulSoup(html, "html.parser").get_text(" ", strip=True)
    return " ".join(text.split())


def _get_author(entry: Dict[str, Any]) -> str:
    author = entry.get("author")
    if isinstance(author, str) and author.strip():
        return author.strip()
    detail = entry.get("author_detail") or {}
    name = detail.get("name") if isinstance(detail, dict) else None
    if isinstance(name, str) and name.strip():
        return name.strip()
    return UNKNOWN_AUTHOR


def to_article(
    entry: Dict[str, Any],
    endpoint: FeedEndpoint,
    feed_title: Optional[str],
    fetched_at: datetime,
) -> Article:
    """
    Map a raw feed entry (from feedparser) to an Article.

    Raises ValueError when the entry has no title or link.
    """
    title = " ".join((entry.get("title") or "").split())
    link = (entry.get("link") or entry.get("feedburner_origlink") or "").strip()
    if not title or not link:
        raise ValueError("Entry lacks required fields for Article: title/link")

    html = entry_html(entry)
    description = _snippet(html) or html

    source = (feed_title or "").strip() or UNKNOWN_SOURCE

    return Article(
        id=_get_id(entry, link),
        title=title,
        description=description,
        category=endpoint.category,
        image=resolve_image(entry),
        author=_get_author(entry),
        published_at=_to_datetime(entry) or fetched_at,
        url=link,
        source=source,
    )
