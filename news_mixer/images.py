from __future__ import annotations

import re
from typing import Any, Dict, Optional

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1504711434969-e33886168f5c"
    "?q=80&w=2070&auto=format&fit=crop"
)

_IMG_SRC = re.compile(r'<img[^>]+src="([^">]+)"', re.IGNORECASE)


def _enclosure_url(entry: Dict[str, Any]) -> Optional[str]:
    for enc in entry.get("enclosures") or []:
        href = enc.get("href") or enc.get("url")
        if isinstance(href, str) and href.strip():
            return href.strip()
    for link in entry.get("links") or []:
        if link.get("rel") == "enclosure":
            href = link.get("href")
            if isinstance(href, str) and href.strip():
                return href.strip()
    return None


def _media_content_url(entry: Dict[str, Any]) -> Optional[str]:
    for media in entry.get("media_content") or []:
        url = media.get("url")
        if isinstance(url, str) and url.strip():
            return url.strip()
    return None


def entry_html(entry: Dict[str, Any]) -> str:
    """Return the richest HTML body of an entry: full content, then summary."""
    for content in entry.get("content") or []:
        value = content.get("value")
        if isinstance(value, str) and value.strip():
            return value
    summary = entry.get("summary") or entry.get("description") or ""
    return summary if isinstance(summary, str) else ""


def resolve_image(entry: Dict[str, Any]) -> str:
    """
    Pick a representative image URL for a feed entry.

    Priority: enclosure -> media:content -> first <img src> in the HTML body
    -> DEFAULT_IMAGE_URL. Never raises.
    """
    try:
        url = _enclosure_url(entry) or _media_content_url(entry)
        if url:
            return url
        match = _IMG_SRC.search(entry_html(entry))
        if match:
            return match.group(1)
    except (AttributeError, TypeError):
        pass
    return DEFAULT_IMAGE_URL
