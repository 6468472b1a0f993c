"""CLI entry point for one-off aggregation runs."""

import argparse
import json
import logging
import sys

from .config import get_settings
from .core import NewsAggregator
from .dedup import DEDUP_MODES
from .exceptions import NewsMixerError
from .logging_setup import setup_logging
from .sources import TOP_STORIES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="news-mixer",
        description="Fetch RSS feeds and print a fresh, deduplicated, source-balanced list",
    )
    parser.add_argument("--category", default=TOP_STORIES, help="Single category (default: %(default)s)")
    parser.add_argument("--categories", default=None, help="Comma-separated categories, overrides --category")
    parser.add_argument("--hours", type=float, default=None, help="Freshness window in hours")
    parser.add_argument("--threshold", type=float, default=None, help="Fuzzy dedup tolerance in [0, 1]")
    parser.add_argument("--mode", choices=DEDUP_MODES, default=None, help="Dedup mode")
    parser.add_argument("--limit", type=int, default=None, help="Max articles to print")
    parser.add_argument("--feeds", default=None, help="YAML file mapping categories to feed URLs")
    parser.add_argument("--format", choices=["json", "text"], default="json")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        overrides = {
            "window_hours": args.hours,
            "dedup_threshold": args.threshold,
            "dedup_mode": args.mode,
            "limit": args.limit,
            "feeds_file": args.feeds,
        }
        settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})
        setup_logging(settings)

        aggregator = NewsAggregator.from_settings(settings)
        articles = aggregator.fetch_news(category=args.category, categories=args.categories)
    except NewsMixerError as e:
        logger.error(str(e))
        return 1

    if args.format == "text":
        for a in articles:
            marker = "*" if a.is_hero else " "
            print(f"{marker} {a.published_at:%Y-%m-%d %H:%M} | {a.source} | {a.title}")
            print(f"    {a.url}")
    else:
        json.dump([a.to_dict() for a in articles], sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")

    logger.info("Printed %d articles", len(articles))
    return 0


if __name__ == "__main__":
    sys.exit(main())
