from __future__ import annotations

import concurrent.futures as _fut
import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Mapping, Optional

import feedparser
import httpx

from .exceptions import FeedFetchError
from .models import Article, FeedEndpoint
from .parser import to_article

logger = logging.getLogger(__name__)

# Several publishers block non-browser clients
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": BROWSER_USER_AGENT,
    "Accept": "application/rss+xml, application/xml, text/xml; q=0.1",
}


class FeedFetcher:
    """
    Fetch many feed endpoints concurrently and map their entries to Articles.

    Each endpoint is isolated: a network, HTTP, timeout or parse failure yields
    an empty list for that endpoint and never affects the others.

    `timeout` is per request in seconds (None disables it). `max_workers`
    bounds the thread pool; None or 0 runs one worker per endpoint.
    `transport` is handed to httpx, which lets tests serve fake feeds.
    """

    def __init__(
        self,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        max_workers: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.headers = dict(DEFAULT_HEADERS if headers is None else headers)
        self.timeout = timeout or None
        self.max_workers = max_workers or None
        self.transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            headers=self.headers,
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    def fetch_feed(self, endpoint: FeedEndpoint, client: httpx.Client) -> List[Article]:
        """
        Fetch and map a single endpoint.

        Raises FeedFetchError on network/HTTP issues or when the document is not a feed.
        """
        try:
            response = client.get(endpoint.url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise FeedFetchError(endpoint.url, f"Failed to fetch feed: {endpoint.url} ({e})") from e

        feed = feedparser.parse(response.content, response_headers=dict(response.headers))
        if feed.bozo and not feed.entries:
            exc = getattr(feed, "bozo_exception", None)
            msg = f"Invalid RSS/Atom feed: {endpoint.url}"
            if exc:
                msg += f" ({exc})"
            raise FeedFetchError(endpoint.url, msg)

        feed_title = feed.feed.get("title")
        fetched_at = datetime.now(timezone.utc)

        articles: List[Article] = []
        for entry in feed.entries:
            try:
                articles.append(to_article(entry, endpoint, feed_title, fetched_at))
            except ValueError as e:
                logger.debug("Skipping entry from %s: %s", endpoint.url, e)
        logger.debug("Fetched %d articles from %s", len(articles), endpoint.url)
        return articles

    def _fetch_isolated(self, endpoint: FeedEndpoint, client: httpx.Client) -> List[Article]:
        try:
            return self.fetch_feed(endpoint, client)
        except FeedFetchError as e:
            logger.warning("Skipped %s: %s", endpoint.url, e)
        except Exception:
            logger.exception("Unexpected failure fetching %s", endpoint.url)
        return []

    def fetch_all(self, endpoints: Iterable[FeedEndpoint]) -> List[Article]:
        """
        Fetch every endpoint in parallel and concatenate results in endpoint order.

        Waits for all tasks. If the caller is interrupted, pending tasks are cancelled.
        """
        endpoints = list(endpoints)
        if not endpoints:
            return []

        workers = min(self.max_workers or len(endpoints), len(endpoints))
        with self._client() as client:
            ex = _fut.ThreadPoolExecutor(max_workers=workers, thread_name_prefix="feed")
            try:
                futures = [ex.submit(self._fetch_isolated, ep, client) for ep in endpoints]
                results = [fu.result() for fu in futures]
            except BaseException:
                ex.shutdown(wait=False, cancel_futures=True)
                raise
            ex.shutdown(wait=True)

        articles = [a for batch in results for a in batch]
        failed = sum(1 for batch in results if not batch)
        logger.info(
            "Fetched %d articles from %d feeds (%d empty or failed)",
            len(articles), len(endpoints), failed,
        )
        return articles
