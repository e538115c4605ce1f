# isinfo/core/reader.py
"""
Environment Reader

Queries the running interpreter for:
- active capability modules (every top-level importable module)
- configuration scalars (directives, process limits, versions, paths)
- presence and version of the configured add-ons

Reading never fails: each probe is isolated, and a probe that raises
degrades only its own field to the UNKNOWN placeholder.
"""

from __future__ import annotations

import importlib.metadata
import importlib.util
import logging
import os
import platform
import pkgutil
import sys
from typing import TYPE_CHECKING, Callable, Dict, FrozenSet, List, Optional, Tuple

from isinfo.catalog import NO_VERSION, STATUS_ACTIVE, STATUS_INACTIVE, UNKNOWN
from isinfo.config.addons import AddonConfig
from isinfo.config.directives import parse_flag
from .snapshot import AddonStatus, EnvironmentSnapshot

if TYPE_CHECKING:
    from isinfo.config.loader import IsinfoConfig

try:
    import resource
except ImportError:  # not available on Windows
    resource = None


logger = logging.getLogger(__name__)


def _probe(name: str, fn: Callable[[], Optional[str]]) -> str:
    """Run one probe; any failure or empty answer becomes UNKNOWN"""
    try:
        value = fn()
    except Exception as e:
        logger.debug("Probe %s failed: %s", name, e)
        return UNKNOWN
    if value is None or value == "":
        return UNKNOWN
    return str(value)


def format_size(n_bytes: int) -> str:
    """Bytes in shorthand notation: 536870912 -> '512M'"""
    for suffix, factor in (("G", 1024 ** 3), ("M", 1024 ** 2), ("K", 1024)):
        if n_bytes >= factor and n_bytes % factor == 0:
            return f"{n_bytes // factor}{suffix}"
    return str(n_bytes)


def flag_label(value: Optional[bool]) -> str:
    """None (an unreadable flag) is UNKNOWN, not off"""
    if value is None:
        return UNKNOWN
    return STATUS_ACTIVE if value else STATUS_INACTIVE


def _raw_disabled(value) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value or "")


# ---------------------------------------------------------------------
# Host probes (module level so tests can monkeypatch them)
# ---------------------------------------------------------------------

def _module_search_path() -> List[str]:
    """sys.path without the working directory ('' or its absolute form)"""
    cwd = os.path.realpath(os.getcwd())
    return [
        entry for entry in sys.path
        if entry and os.path.realpath(entry) != cwd
    ]


def list_active_modules() -> FrozenSet[str]:
    """
    Top-level module names the interpreter can import, as it reports them.

    Stray files in the directory the server was started from are not
    capabilities of the interpreter, so that directory is not scanned.
    """
    names = set(sys.builtin_module_names)
    names.update(info.name for info in pkgutil.iter_modules(_module_search_path()))
    return frozenset(n for n in names if not n.startswith("__"))


def memory_limit_from_rlimit() -> Optional[str]:
    if resource is None:
        return None
    soft, _hard = resource.getrlimit(resource.RLIMIT_AS)
    if soft == resource.RLIM_INFINITY:
        return "-1"
    return format_size(soft)


def cpu_limit_from_rlimit() -> Optional[str]:
    if resource is None:
        return None
    soft, _hard = resource.getrlimit(resource.RLIMIT_CPU)
    if soft == resource.RLIM_INFINITY:
        return "0"
    return str(soft)


def os_description() -> str:
    """uname fields joined by spaces (system node release version machine)"""
    u = platform.uname()
    return " ".join(part for part in (u.system, u.node, u.release, u.version, u.machine) if part)


def engine_description() -> str:
    version = ".".join(str(p) for p in sys.implementation.version[:3])
    return f"{platform.python_implementation()} {version} ({platform.python_compiler()})"


def addon_status(addon: AddonConfig) -> AddonStatus:
    """Whether an add-on is importable, and its distribution version"""
    try:
        loaded = bool(addon.module) and importlib.util.find_spec(addon.module) is not None
    except (ImportError, ValueError) as e:
        logger.debug("Add-on %s not importable: %s", addon.name, e)
        loaded = False

    if not loaded:
        return AddonStatus(name=addon.name, loaded=False, version=NO_VERSION, icon=addon.icon)

    version = _probe(f"addon:{addon.name}", lambda: importlib.metadata.version(addon.dist_name))
    return AddonStatus(name=addon.name, loaded=True, version=version, icon=addon.icon)


# ---------------------------------------------------------------------
# Reader
# ---------------------------------------------------------------------

class EnvironmentReader:
    """
    Reads one EnvironmentSnapshot from the live process.

    Directives set in configuration win over values read from the
    process (memory and CPU limits).
    """

    def __init__(self, config: Optional["IsinfoConfig"] = None):
        if config is None:
            from isinfo.config.loader import IsinfoConfig
            config = IsinfoConfig.default()
        self.config = config

    def read(self) -> EnvironmentSnapshot:
        active = self.read_active_modules()
        facts = self.read_facts()
        addons = self.read_addons()
        logger.debug(
            "Environment read: %d active modules, %d add-ons loaded",
            len(active), sum(1 for a in addons if a.loaded),
        )
        return EnvironmentSnapshot(active_modules=active, facts=facts, addons=addons)

    def read_active_modules(self) -> FrozenSet[str]:
        try:
            return list_active_modules()
        except Exception as e:
            logger.warning("Could not enumerate modules: %s", e)
            return frozenset()

    def read_facts(self) -> Dict[str, str]:
        d = self.config.directives
        source = self.config.source

        return {
            "runtime_version": _probe("runtime_version", platform.python_version),
            "server_software": _probe("server_software", lambda: os.environ.get("SERVER_SOFTWARE")),
            "os": _probe("os", os_description),
            "memory_limit": _probe(
                "memory_limit",
                lambda: d.memory_limit if d.memory_limit is not None else memory_limit_from_rlimit(),
            ),
            "upload_max_size": _probe("upload_max_size", lambda: d.upload_max_size),
            "post_max_size": _probe("post_max_size", lambda: d.post_max_size),
            "max_execution_time": _probe(
                "max_execution_time",
                lambda: d.max_execution_time if d.max_execution_time is not None else cpu_limit_from_rlimit(),
            ),
            "max_input_vars": _probe("max_input_vars", lambda: d.max_input_vars),
            "display_errors": flag_label(parse_flag(d.display_errors)),
            "allow_url_fetch": flag_label(parse_flag(d.allow_url_fetch)),
            "config_file": _probe("config_file", lambda: str(source) if source else None),
            "engine_version": _probe("engine_version", engine_description),
            # Raw value; an empty directive is a legitimate answer, not unknown
            "disabled_functions": _raw_disabled(d.disabled_functions),
        }

    def read_addons(self) -> Tuple[AddonStatus, ...]:
        return tuple(addon_status(addon) for addon in self.config.addons)


__all__ = [
    "EnvironmentReader",
    "list_active_modules",
    "addon_status",
    "format_size",
    "flag_label",
]
