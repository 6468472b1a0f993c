"""Tests for the command-line entry point."""

import json

import pytest
from unittest.mock import patch

from news_mixer.cli import main
from news_mixer.config import reset_settings
from news_mixer.exceptions import PipelineError


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def aggregator_cls():
    with patch("news_mixer.cli.NewsAggregator") as cls:
        yield cls


class TestMain:

    def test_prints_json(self, aggregator_cls, make_article, capsys):
        article = make_article("Chip maker unveils new processor", source="Tech Daily")
        aggregator_cls.from_settings.return_value.fetch_news.return_value = [article]

        code = main(["--categories", "Technology,World News"])

        assert code == 0
        body = json.loads(capsys.readouterr().out)
        assert body == [article.to_dict()]
        aggregator_cls.from_settings.return_value.fetch_news.assert_called_once_with(
            category="Top Stories", categories="Technology,World News",
        )

    def test_overrides_reach_settings(self, aggregator_cls):
        aggregator_cls.from_settings.return_value.fetch_news.return_value = []

        main(["--hours", "6", "--threshold", "0.2", "--mode", "exact", "--limit", "3"])

        settings = aggregator_cls.from_settings.call_args.args[0]
        assert settings.window_hours == 6
        assert settings.dedup_threshold == 0.2
        assert settings.dedup_mode == "exact"
        assert settings.limit == 3

    def test_text_format(self, aggregator_cls, make_article, capsys):
        article = make_article("Chip maker unveils new processor", source="Tech Daily")
        aggregator_cls.from_settings.return_value.fetch_news.return_value = [article]

        main(["--format", "text"])

        out = capsys.readouterr().out
        assert "Tech Daily | Chip maker unveils new processor" in out
        assert article.url in out

    def test_pipeline_error_exit_code(self, aggregator_cls, capsys):
        aggregator_cls.from_settings.return_value.fetch_news.side_effect = PipelineError("Failed to fetch news")

        assert main([]) == 1
        assert capsys.readouterr().out == ""
