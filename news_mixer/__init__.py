"""
news_mixer

Aggregates news from many RSS/Atom feeds into one fresh, deduplicated,
source-balanced list.

Core ideas:
- Input: a category name (or "Top Stories" for every configured feed)
- Process: resolve feeds → fetch concurrently (per-feed failures isolated)
  → keep the last N hours → fuzzy-title dedup → round-robin across sources
- Output: List[Article]

Example
-------
from news_mixer import NewsAggregator

aggregator = NewsAggregator(window_hours=12, dedup_threshold=0.3)
articles = aggregator.fetch_news(categories="Technology,World News")

for a in articles:
    print(a.published_at, a.source, a.title)
"""
from .models import Article, FeedEndpoint
from .core import NewsAggregator, fetch_news
from .fetcher import FeedFetcher
from .sources import FeedRegistry, TOP_STORIES

__all__ = [
    "Article",
    "FeedEndpoint",
    "FeedFetcher",
    "FeedRegistry",
    "NewsAggregator",
    "TOP_STORIES",
    "fetch_news",
]
