# isinfo/core/snapshot.py
"""
Environment data model

Transient, read-only values: computed once per report, rendered, discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Tuple

from isinfo.catalog import NO_VERSION, STATUS_ACTIVE, STATUS_INACTIVE, UNKNOWN


# Scalar facts in display order
FACT_KEYS: Tuple[str, ...] = (
    "runtime_version",
    "server_software",
    "os",
    "memory_limit",
    "upload_max_size",
    "post_max_size",
    "max_execution_time",
    "max_input_vars",
    "display_errors",
    "allow_url_fetch",
    "config_file",
    "engine_version",
    "disabled_functions",
)


@dataclass(frozen=True)
class AddonStatus:
    """Presence and version of one optional add-on"""
    name: str
    loaded: bool
    version: str = NO_VERSION
    icon: str = "fa-puzzle-piece"

    @property
    def status_label(self) -> str:
        return STATUS_ACTIVE if self.loaded else STATUS_INACTIVE

    @property
    def has_version(self) -> bool:
        return self.version != NO_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "loaded": self.loaded,
            "version": self.version,
        }


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """
    What the host reported at one point in time.

    Missing facts are filled with the UNKNOWN placeholder so consumers can
    index any key in FACT_KEYS.
    """
    active_modules: FrozenSet[str]
    facts: Mapping[str, str] = field(default_factory=dict)
    addons: Tuple[AddonStatus, ...] = ()

    def __post_init__(self) -> None:
        complete = {key: UNKNOWN for key in FACT_KEYS}
        complete.update({k: str(v) for k, v in self.facts.items()})
        object.__setattr__(self, "active_modules", frozenset(self.active_modules))
        object.__setattr__(self, "facts", MappingProxyType(complete))
        object.__setattr__(self, "addons", tuple(self.addons))

    def fact(self, key: str) -> str:
        return self.facts.get(key, UNKNOWN)
