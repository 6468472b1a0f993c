"""Shared fixtures: article factory and RSS document builder."""

import itertools
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import pytest

from news_mixer.models import Article


@pytest.fixture
def now():
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_article(now):
    """Build Articles with unique ids/urls; only the fields a test cares about need passing."""
    counter = itertools.count(1)

    def _make(title="Headline", source="Source A", published_at=None, category="Technology"):
        n = next(counter)
        return Article(
            id=f"id-{n}",
            title=title,
            description="",
            category=category,
            image="https://img.example.com/default.jpg",
            author="Unknown",
            published_at=published_at or now,
            url=f"https://news.example.com/{n}",
            source=source,
        )

    return _make


@pytest.fixture
def rss_document():
    """Render a minimal RSS 2.0 document. Items are dicts with title/link/age_hours/extra."""

    def _render(title, items):
        parts = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/" '
            'xmlns:dc="http://purl.org/dc/elements/1.1/">',
            "<channel>",
        ]
        if title:
            parts.append(f"<title>{title}</title>")
        for item in items:
            parts.append("<item>")
            if item.get("title"):
                parts.append(f"<title>{item['title']}</title>")
            if item.get("link"):
                parts.append(f"<link>{item['link']}</link>")
            if item.get("age_hours") is not None:
                published = datetime.now(timezone.utc) - timedelta(hours=item["age_hours"])
                parts.append(f"<pubDate>{format_datetime(published, usegmt=True)}</pubDate>")
            parts.append(item.get("extra", ""))
            parts.append("</item>")
        parts.append("</channel></rss>")
        return "\n".join(parts)

    return _render
