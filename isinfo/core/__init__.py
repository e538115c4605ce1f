"""
isinfo core: snapshot model, environment reader, set reconciliation,
report assembly and the list filter.
"""

from .snapshot import AddonStatus, EnvironmentSnapshot, FACT_KEYS
from .reconcile import inactive_modules, parse_disabled, really_disabled
from .reader import EnvironmentReader
from .report import EnvironmentReport, build_report
from .search import FilterResult, visible_items, filter_lists

__all__ = [
    "AddonStatus",
    "EnvironmentSnapshot",
    "FACT_KEYS",
    "inactive_modules",
    "parse_disabled",
    "really_disabled",
    "EnvironmentReader",
    "EnvironmentReport",
    "build_report",
    "FilterResult",
    "visible_items",
    "filter_lists",
]
