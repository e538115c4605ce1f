# isinfo/core/report.py
"""
Report assembly

Combines a snapshot with the reference catalogs into the typed struct the
renderers consume. Keeps environment reading and rendering apart: any
renderer can be driven by a fixture snapshot instead of a live host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple

from .reconcile import inactive_modules, really_disabled
from .snapshot import AddonStatus, EnvironmentSnapshot, FACT_KEYS

if TYPE_CHECKING:
    from isinfo.config.loader import IsinfoConfig


@dataclass(frozen=True)
class EnvironmentReport:
    """Everything one page shows, in display order"""
    active_modules: Tuple[str, ...]
    inactive_modules: Tuple[str, ...]
    disabled_functions: Tuple[str, ...]
    facts: Mapping[str, str]
    addons: Tuple[AddonStatus, ...]

    def fact(self, key: str) -> str:
        return self.facts[key]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "facts": {key: self.facts[key] for key in FACT_KEYS},
            "addons": [a.to_dict() for a in self.addons],
            "modules": {
                "active": list(self.active_modules),
                "inactive": list(self.inactive_modules),
            },
            "disabled_functions": list(self.disabled_functions),
        }


def build_report(snapshot: EnvironmentSnapshot, config: Optional["IsinfoConfig"] = None) -> EnvironmentReport:
    """
    Reconcile a snapshot against the catalogs.

    Args:
        snapshot: What the host reported
        config: Supplies the catalogs (defaults when None)
    """
    if config is None:
        from isinfo.config.loader import IsinfoConfig
        config = IsinfoConfig.default()

    catalog = config.catalog
    return EnvironmentReport(
        active_modules=tuple(sorted(snapshot.active_modules)),
        inactive_modules=tuple(inactive_modules(catalog.all_known_modules, snapshot.active_modules)),
        disabled_functions=tuple(really_disabled(catalog.dangerous_functions, snapshot.fact("disabled_functions"))),
        facts=snapshot.facts,
        addons=snapshot.addons,
    )
