# isinfo/config/addons.py
"""
Add-on configuration

Add-ons are optional loaders/extensions whose presence and version are
reported on their own status cards, apart from ordinary modules.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class AddonConfig:
    """One add-on to probe"""

    name: str                           # display name
    module: str                         # import name probed for presence
    distribution: Optional[str] = None  # metadata name for the version
    icon: str = "fa-puzzle-piece"       # Font Awesome class

    @property
    def dist_name(self) -> str:
        return self.distribution or self.module

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "module": self.module,
            "distribution": self.distribution,
            "icon": self.icon,
        }


DEFAULT_ADDONS: Tuple[AddonConfig, ...] = (
    AddonConfig(name="PyArmor", module="pyarmor", distribution="pyarmor", icon="fa-shield-halved"),
    AddonConfig(name="Cython", module="Cython", distribution="Cython", icon="fa-lock"),
    AddonConfig(name="Redis (Python client)", module="redis", distribution="redis", icon="fa-database"),
)
