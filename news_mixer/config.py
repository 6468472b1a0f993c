from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError
from .fetcher import BROWSER_USER_AGENT

load_dotenv()


def _to_int(v: Optional[str], default: int) -> int:
    if v is None or not v.strip():
        return default
    return int(v.strip())


def _to_float(v: Optional[str], default: float) -> float:
    if v is None or not v.strip():
        return default
    return float(v.strip())


class Settings(BaseModel):
    window_hours: float = Field(default=24, gt=0)
    dedup_threshold: float = Field(default=0.4, ge=0, le=1)
    dedup_mode: str = Field(default="fuzzy", pattern="^(fuzzy|exact)$")
    mark_hero: bool = Field(default=True)
    limit: int = Field(default=0, ge=0)

    # 0 disables the per-request timeout / the worker cap
    feed_timeout: float = Field(default=10.0, ge=0)
    max_workers: int = Field(default=0, ge=0)
    feeds_file: str = Field(default="")
    user_agent: str = Field(default=BROWSER_USER_AGENT)

    log_level: str = Field(default="INFO")
    log_file: str = Field(default="")

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is not None:
        return _settings

    try:
        _settings = Settings(
            window_hours=_to_float(os.getenv("NEWS_WINDOW_HOURS"), 24),
            dedup_threshold=_to_float(os.getenv("NEWS_DEDUP_THRESHOLD"), 0.4),
            dedup_mode=os.getenv("NEWS_DEDUP_MODE", "fuzzy").strip().lower(),
            limit=_to_int(os.getenv("NEWS_LIMIT"), 0),
            feed_timeout=_to_float(os.getenv("NEWS_FEED_TIMEOUT"), 10.0),
            max_workers=_to_int(os.getenv("NEWS_MAX_WORKERS"), 0),
            feeds_file=os.getenv("NEWS_FEEDS_FILE", ""),
            user_agent=os.getenv("NEWS_USER_AGENT") or BROWSER_USER_AGENT,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", ""),
            host=os.getenv("NEWS_API_HOST", "127.0.0.1"),
            port=_to_int(os.getenv("NEWS_API_PORT"), 8000),
        )
    except (ValueError, ValidationError) as e:
        raise ConfigurationError(f"Invalid news_mixer settings: {e}") from e
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
