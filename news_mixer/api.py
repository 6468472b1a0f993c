"""HTTP entry point: serves the aggregated news list as JSON."""

from __future__ import annotations

import logging
from typing import Annotated, Optional

from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse

from .config import get_settings
from .core import NewsAggregator
from .exceptions import NewsMixerError
from .logging_setup import setup_logging
from .sources import TOP_STORIES

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Failed to fetch news"


def create_app(aggregator: Optional[NewsAggregator] = None) -> FastAPI:
    """Build the API. Pass an aggregator to bypass environment settings (tests)."""
    app = FastAPI(
        title="News Mixer",
        description="Fresh, deduplicated, source-balanced news from RSS feeds",
        version="1.0.0",
    )

    def get_aggregator() -> NewsAggregator:
        if aggregator is not None:
            return aggregator
        return NewsAggregator.from_settings()

    @app.exception_handler(NewsMixerError)
    async def news_mixer_error_handler(request, exc: NewsMixerError):
        # Internal detail stays in the logs
        logger.error("Request %s failed: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": ERROR_MESSAGE})

    @app.get("/news")
    def get_news(
        category: Annotated[str, Query(description="Single category name")] = TOP_STORIES,
        categories: Annotated[
            Optional[str], Query(description="Comma-separated categories, overrides category")
        ] = None,
        service: NewsAggregator = Depends(get_aggregator),
    ):
        """List mixed articles; the first one carries isHero."""
        articles = service.fetch_news(category=category, categories=categories or None)
        return [a.to_dict() for a in articles]

    @app.get("/categories")
    def list_categories(service: NewsAggregator = Depends(get_aggregator)):
        return [TOP_STORIES] + service.registry.categories()

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
