from __future__ import annotations

from difflib import SequenceMatcher
from typing import Iterable, List, Set

from .models import Article

FUZZY = "fuzzy"
EXACT = "exact"
DEDUP_MODES = (FUZZY, EXACT)

DEFAULT_THRESHOLD = 0.4


def _normalize_title(title: str) -> str:
    return " ".join(title.lower().split())


def title_similarity(a: str, b: str) -> float:
    """Case-insensitive similarity ratio in [0, 1]; 1.0 means identical."""
    return SequenceMatcher(None, _normalize_title(a), _normalize_title(b)).ratio()


def _dedupe_fuzzy(items: Iterable[Article], threshold: float) -> List[Article]:
    kept: List[Article] = []
    kept_titles: List[str] = []
    for it in items:
        title = _normalize_title(it.title)
        is_dup = False
        for other in kept_titles:
            if title == other:
                is_dup = True
                break
            if threshold > 0 and 1.0 - SequenceMatcher(None, title, other).ratio() <= threshold:
                is_dup = True
                break
        if is_dup:
            continue
        kept.append(it)
        kept_titles.append(title)
    return kept


def _dedupe_exact(items: Iterable[Article]) -> List[Article]:
    seen: Set[str] = set()
    out: List[Article] = []
    for it in items:
        key = f"{it.title.lower().strip()}_{it.source}"
        if key in seen:
            continue
        seen.add(key)
        out.append(it)
    return out


def deduplicate(
    items: Iterable[Article],
    threshold: float = DEFAULT_THRESHOLD,
    mode: str = FUZZY,
) -> List[Article]:
    """
    Remove near-duplicate articles, keeping the first occurrence in input order.

    fuzzy: an article is dropped when `1 - similarity <= threshold` against the
    title of any article already kept. 0 flags only identical (case-normalized)
    titles; larger values tolerate more wording differences.

    exact: drops repeats of the `lowercased title + source` key. Cheaper, for
    large batches.
    """
    if mode == EXACT:
        return _dedupe_exact(items)
    if mode != FUZZY:
        raise ValueError(f"Unknown dedup mode: {mode!r} (expected one of {DEDUP_MODES})")
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Dedup threshold must be within [0, 1], got {threshold}")
    return _dedupe_fuzzy(items, threshold)
