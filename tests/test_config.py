"""Tests for environment-driven settings."""

import pytest

from news_mixer.config import get_settings, reset_settings
from news_mixer.exceptions import ConfigurationError
from news_mixer.fetcher import BROWSER_USER_AGENT


ENV_VARS = [
    "NEWS_WINDOW_HOURS", "NEWS_DEDUP_THRESHOLD", "NEWS_DEDUP_MODE", "NEWS_LIMIT",
    "NEWS_FEED_TIMEOUT", "NEWS_MAX_WORKERS", "NEWS_FEEDS_FILE", "NEWS_USER_AGENT",
    "LOG_LEVEL", "LOG_FILE", "NEWS_API_HOST", "NEWS_API_PORT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


class TestGetSettings:

    def test_defaults(self):
        s = get_settings()

        assert s.window_hours == 24
        assert s.dedup_threshold == 0.4
        assert s.dedup_mode == "fuzzy"
        assert s.feed_timeout == 10.0
        assert s.max_workers == 0
        assert s.feeds_file == ""
        assert s.user_agent == BROWSER_USER_AGENT
        assert s.port == 8000

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NEWS_WINDOW_HOURS", "6")
        monkeypatch.setenv("NEWS_DEDUP_THRESHOLD", "0.25")
        monkeypatch.setenv("NEWS_DEDUP_MODE", "Exact")
        monkeypatch.setenv("NEWS_MAX_WORKERS", "8")
        monkeypatch.setenv("NEWS_API_PORT", "9000")

        s = get_settings()

        assert s.window_hours == 6
        assert s.dedup_threshold == 0.25
        assert s.dedup_mode == "exact"
        assert s.max_workers == 8
        assert s.port == 9000

    def test_cached_until_reset(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("NEWS_WINDOW_HOURS", "2")

        assert get_settings() is first

        reset_settings()
        assert get_settings().window_hours == 2

    @pytest.mark.parametrize("name,value", [
        ("NEWS_DEDUP_THRESHOLD", "1.5"),
        ("NEWS_DEDUP_MODE", "semantic"),
        ("NEWS_WINDOW_HOURS", "soon"),
        ("NEWS_MAX_WORKERS", "-1"),
    ])
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ConfigurationError):
            get_settings()
