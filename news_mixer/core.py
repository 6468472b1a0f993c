from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .config import Settings, get_settings
from .dedup import DEFAULT_THRESHOLD, FUZZY, deduplicate
from .exceptions import PipelineError
from .fetcher import DEFAULT_HEADERS, FeedFetcher
from .freshness import filter_window
from .interleave import interleave
from .models import Article
from .sources import TOP_STORIES, FeedRegistry, load_registry

logger = logging.getLogger(__name__)


@dataclass
class AggregateOptions:
    window_hours: float = 24
    dedup_threshold: float = DEFAULT_THRESHOLD
    dedup_mode: str = FUZZY
    mark_hero: bool = True
    limit: Optional[int] = None


class NewsAggregator:
    """
    High-level API: resolve categories, fetch their feeds and return one mixed list.

    Pipeline: resolve → fetch (concurrent, per-feed isolated) → freshness window
    → deduplicate → interleave by source
    """

    def __init__(
        self,
        registry: Optional[FeedRegistry] = None,
        fetcher: Optional[FeedFetcher] = None,
        *,
        window_hours: float = 24,
        dedup_threshold: float = DEFAULT_THRESHOLD,
        dedup_mode: str = FUZZY,
        mark_hero: bool = True,
        limit: Optional[int] = None,
    ) -> None:
        self.registry = registry or FeedRegistry()
        self.fetcher = fetcher or FeedFetcher()
        self.options = AggregateOptions(
            window_hours=window_hours,
            dedup_threshold=dedup_threshold,
            dedup_mode=dedup_mode,
            mark_hero=mark_hero,
            limit=limit,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "NewsAggregator":
        s = settings or get_settings()
        headers = dict(DEFAULT_HEADERS, **{"User-Agent": s.user_agent})
        return cls(
            registry=load_registry(s.feeds_file or None),
            fetcher=FeedFetcher(
                headers=headers,
                timeout=s.feed_timeout or None,
                max_workers=s.max_workers or None,
            ),
            window_hours=s.window_hours,
            dedup_threshold=s.dedup_threshold,
            dedup_mode=s.dedup_mode,
            mark_hero=s.mark_hero,
            limit=s.limit or None,
        )

    def fetch_news(
        self,
        category: str = TOP_STORIES,
        categories: Union[str, Iterable[str], None] = None,
    ) -> List[Article]:
        """
        Return fresh, deduplicated, source-interleaved articles.

        Individual feed failures only shrink the result. Anything else raises
        PipelineError with a generic message; the cause is logged and chained.
        """
        try:
            return self._run(category, categories)
        except Exception as e:
            logger.exception("News pipeline failed for category=%r categories=%r", category, categories)
            raise PipelineError("Failed to fetch news") from e

    def _run(
        self,
        category: str,
        categories: Union[str, Iterable[str], None],
    ) -> List[Article]:
        opts = self.options

        endpoints = self.registry.resolve(category, categories)
        if not endpoints:
            logger.info("No feeds resolved for category=%r categories=%r", category, categories)
            return []

        articles = self.fetcher.fetch_all(endpoints)

        fresh = filter_window(articles, hours=opts.window_hours)
        unique = deduplicate(fresh, threshold=opts.dedup_threshold, mode=opts.dedup_mode)
        mixed = interleave(unique, mark_hero=opts.mark_hero)

        if opts.limit and opts.limit > 0:
            mixed = mixed[: opts.limit]

        logger.info(
            "Aggregated %d articles (%d fetched, %d fresh, %d unique) from %d feeds",
            len(mixed), len(articles), len(fresh), len(unique), len(endpoints),
        )
        return mixed


def fetch_news(
    category: str = TOP_STORIES,
    categories: Union[str, Iterable[str], None] = None,
) -> List[Article]:
    """Run the pipeline once with settings taken from the environment."""
    return NewsAggregator.from_settings().fetch_news(category, categories)
