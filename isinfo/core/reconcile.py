# isinfo/core/reconcile.py
"""
Set reconciliation

Pure functions over the reference catalogs. Inputs may come in any order;
outputs are sorted (case-sensitive) for stable display.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Union


def inactive_modules(known: Iterable[str], active: Iterable[str]) -> List[str]:
    """Known modules the host did not report as active"""
    return sorted(set(known) - set(active))


def parse_disabled(raw: Union[str, Iterable[str], None]) -> FrozenSet[str]:
    """
    Parse the comma-separated disabled-function directive.

    Tokens are trimmed and empty tokens dropped, so "" and " , " both
    yield an empty set.
    """
    if raw is None:
        return frozenset()
    tokens = raw.split(",") if isinstance(raw, str) else raw
    return frozenset(t.strip() for t in tokens if t and t.strip())


def really_disabled(dangerous: Iterable[str], configured: Union[str, Iterable[str], None]) -> List[str]:
    """Dangerous functions that the configuration actually disables"""
    return sorted(set(dangerous) & parse_disabled(configured))


__all__ = [
    "inactive_modules",
    "parse_disabled",
    "really_disabled",
]
