from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

import yaml

from .exceptions import ConfigurationError
from .models import FeedEndpoint

logger = logging.getLogger(__name__)

TOP_STORIES = "Top Stories"

DEFAULT_FEEDS: Dict[str, List[str]] = {
    "Nigeria": [
        "https://www.vanguardngr.com/feed/",
        "https://punchng.com/feed/",
        "https://www.premiumtimesng.com/feed",
        "https://guardian.ng/feed/",
    ],
    "Technology": [
        "https://hnrss.org/frontpage",
        "https://www.theverge.com/rss/index.xml",
        "https://techcrunch.com/feed/",
    ],
    "World News": [
        "http://feeds.bbci.co.uk/news/world/rss.xml",
        "https://www.aljazeera.com/xml/rss/all.xml",
        "https://rss.nytimes.com/services/xml/rss/nyt/World.xml",
    ],
    "Finance & Markets": [
        "https://search.cnbc.com/rs/search/view.xml?partnerId=2000&keywords=finance",
        "https://www.ft.com/?format=rss",
    ],
    "Science & Nature": [
        "https://www.quantamagazine.org/feed/",
        "https://feeds.npr.org/1007/rss.xml",
    ],
}


def split_categories(categories: Union[str, Iterable[str], None]) -> List[str]:
    if categories is None:
        return []
    if isinstance(categories, str):
        categories = categories.split(",")
    return [c.strip() for c in categories if c and c.strip()]


class FeedRegistry:
    """
    Static category -> feed URLs mapping.

    Resolution rules:
    - an explicit `categories` list wins over `category`
    - "Top Stories" with no explicit list expands to every configured feed
    - unknown category names resolve to nothing (logged, never an error)
    """

    def __init__(self, feeds: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        source = DEFAULT_FEEDS if feeds is None else feeds
        self._feeds: Dict[str, List[str]] = {cat: list(urls) for cat, urls in source.items()}

    def categories(self) -> List[str]:
        return list(self._feeds)

    def urls_for(self, category: str) -> List[str]:
        return list(self._feeds.get(category, []))

    def resolve(
        self,
        category: str = TOP_STORIES,
        categories: Union[str, Iterable[str], None] = None,
    ) -> List[FeedEndpoint]:
        category = (category or "").strip() or TOP_STORIES
        names = split_categories(categories)

        if category == TOP_STORIES and not names:
            return [
                FeedEndpoint(url=url, category=cat)
                for cat, urls in self._feeds.items()
                for url in urls
            ]

        if not names:
            names = [category]

        endpoints: List[FeedEndpoint] = []
        for name in names:
            urls = self._feeds.get(name)
            if not urls:
                logger.warning("No feeds configured for category %r", name)
                continue
            endpoints.extend(FeedEndpoint(url=url, category=name) for url in urls)
        return endpoints


def load_registry(path: Union[str, Path, None] = None) -> FeedRegistry:
    """
    Build a registry from a YAML mapping of category -> list of URLs.

    Returns the built-in registry when no path is given.
    Raises ConfigurationError when the file is missing or malformed.
    """
    if not path:
        return FeedRegistry()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot load feed registry: {path} ({e})") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Feed registry must be a mapping of category to URLs: {path}")

    feeds: Dict[str, List[str]] = {}
    for cat, urls in data.items():
        if not isinstance(urls, list) or not all(isinstance(u, str) and u.strip() for u in urls):
            raise ConfigurationError(f"Category {cat!r} must list feed URLs: {path}")
        feeds[str(cat)] = [u.strip() for u in urls]

    logger.info("Loaded %d categories from %s", len(feeds), path)
    return FeedRegistry(feeds)
