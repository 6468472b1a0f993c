from __future__ import annotations

import dataclasses
from typing import Dict, Iterable, List

from .models import Article, as_utc


def group_by_source(items: Iterable[Article]) -> Dict[str, List[Article]]:
    """Group articles by source, keeping first-seen source order."""
    groups: Dict[str, List[Article]] = {}
    for it in items:
        groups.setdefault(it.source, []).append(it)
    return groups


def interleave(items: Iterable[Article], *, mark_hero: bool = False) -> List[Article]:
    """
    Fair merge across sources.

    Each source group is sorted newest first, then one article is taken from
    every group per round, in group discovery order, until all are exhausted.
    The result is ordered by rank within source, not by global timestamp.
    """
    groups = group_by_source(items)
    for group in groups.values():
        group.sort(key=lambda a: as_utc(a.published_at), reverse=True)

    mixed: List[Article] = []
    rank = 0
    has_more = True
    while has_more:
        has_more = False
        for group in groups.values():
            if rank < len(group):
                mixed.append(group[rank])
                has_more = True
        rank += 1

    if mark_hero and mixed:
        mixed[0] = dataclasses.replace(mixed[0], is_hero=True)
    return mixed
