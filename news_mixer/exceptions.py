class NewsMixerError(Exception):
    """Base class for news_mixer errors."""


class FeedFetchError(NewsMixerError):
    """Raised when a single feed endpoint cannot be fetched or parsed."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class ConfigurationError(NewsMixerError):
    """Raised when the feed registry or settings are malformed."""


class PipelineError(NewsMixerError):
    """Raised when aggregation fails outside the per-feed isolation boundary."""
