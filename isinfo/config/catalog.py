# isinfo/config/catalog.py
"""
Catalog configuration

Lets a deployment replace or extend the built-in reference catalogs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from isinfo.catalog import KNOWN_MODULES, DANGEROUS_FUNCTIONS


@dataclass(frozen=True)
class CatalogConfig:
    """Reference lists the live environment is compared against"""

    known_modules: Tuple[str, ...] = KNOWN_MODULES
    extra_known_modules: Tuple[str, ...] = ()
    dangerous_functions: Tuple[str, ...] = DANGEROUS_FUNCTIONS

    @property
    def all_known_modules(self) -> Tuple[str, ...]:
        """Known modules plus extras, de-duplicated and sorted"""
        return tuple(sorted(set(self.known_modules) | set(self.extra_known_modules)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "known_modules": list(self.known_modules),
            "extra_known_modules": list(self.extra_known_modules),
            "dangerous_functions": list(self.dangerous_functions),
        }
