# isinfo/core/search.py
"""
Module list filter

Python twin of the inline script in the HTML report. The page applies
the same rule on every keystroke: an item stays visible when its text
contains the query, case-insensitively. Each call starts from scratch,
so the result depends on the current query only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Sequence, Set, Tuple


@dataclass(frozen=True)
class FilterResult:
    """Visible item indices per list, and whether the no-results line shows"""
    visible: Tuple[FrozenSet[int], ...]
    no_results: bool


def visible_items(items: Sequence[str], query: str) -> Set[int]:
    """Indices of items whose text contains the query (case-insensitive)"""
    needle = (query or "").lower()
    return {i for i, text in enumerate(items) if needle in text.lower()}


def filter_lists(lists: Sequence[Sequence[str]], query: str) -> FilterResult:
    """Apply visible_items to every list and compute the no-results flag"""
    visible = tuple(frozenset(visible_items(items, query)) for items in lists)
    return FilterResult(visible=visible, no_results=not any(visible))
