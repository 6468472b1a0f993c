from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from .models import Article, as_utc


def filter_window(
    articles: Iterable[Article],
    hours: float = 24,
    now: Optional[datetime] = None,
) -> List[Article]:
    """
    Keep articles published strictly after `now - hours`.

    An article published exactly at the cutoff is dropped. Order is preserved.
    Naive datetimes are read as UTC.
    """
    cutoff = as_utc(now or datetime.now(timezone.utc)) - timedelta(hours=hours)
    return [a for a in articles if as_utc(a.published_at) > cutoff]
