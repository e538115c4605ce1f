# isinfo/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
- Configuration objects are frozen dataclasses
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from isinfo.errors import IsinfoError
from .addons import AddonConfig, DEFAULT_ADDONS
from .catalog import CatalogConfig
from .directives import DirectivesConfig
from .ui import ServerConfig, UIConfig


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ISINFO_CONFIG"


def default_search_paths() -> List[Path]:
    """Implicit configuration locations, in priority order"""
    return [
        Path.cwd() / "isinfo.yml",
        Path.home() / ".isinfo" / "config.yml",
    ]


@dataclass(frozen=True)
class IsinfoConfig:
    """
    Unified isinfo configuration.

    All fields have code defaults - YAML is optional.
    `source` is the YAML file the values were read from, if any.
    """

    directives: DirectivesConfig = field(default_factory=DirectivesConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    addons: Tuple[AddonConfig, ...] = DEFAULT_ADDONS
    ui: UIConfig = field(default_factory=UIConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    source: Optional[Path] = None

    @classmethod
    def default(cls) -> "IsinfoConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "IsinfoConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $ISINFO_CONFIG
                2. ./isinfo.yml
                3. ~/.isinfo/config.yml

        Returns:
            IsinfoConfig instance (always has code defaults as fallback)

        Raises:
            IsinfoError: only when an explicit path (argument or
            environment variable) is missing or unreadable. Problems with
            implicitly discovered files are logged and defaults are used.
        """
        explicit = config_path or os.environ.get(CONFIG_ENV_VAR) or None

        if explicit:
            path = Path(explicit).expanduser()
            if not path.is_file():
                raise IsinfoError.config_not_found(path)
            return cls.from_mapping(_load_yaml(path), source=path)

        for path in default_search_paths():
            if not path.is_file():
                continue
            try:
                return cls.from_mapping(_load_yaml(path), source=path)
            except IsinfoError as e:
                logger.warning("Ignoring configuration %s: %s", path, e.message)
                return cls.default()

        return cls.default()

    @classmethod
    def from_mapping(cls, data: Optional[Dict[str, Any]], source: Optional[Path] = None) -> "IsinfoConfig":
        """Merge a parsed YAML mapping into the code defaults"""
        config = cls.default()
        if data is None:
            return replace(config, source=source)
        if not isinstance(data, dict):
            raise IsinfoError.config_invalid(source, "top level must be a mapping")

        changes: Dict[str, Any] = {"source": source}

        if "directives" in data:
            raw = _section(data, "directives", source)
            if isinstance(raw.get("disabled_functions"), list):
                raw = {**raw, "disabled_functions": ", ".join(str(f) for f in raw["disabled_functions"])}
            changes["directives"] = _merge_dataclass(config.directives, raw)

        if "catalog" in data:
            raw = _section(data, "catalog", source)
            tupled = {
                k: tuple(str(v) for v in _list(raw, k, source))
                for k in ("known_modules", "extra_known_modules", "dangerous_functions")
                if k in raw
            }
            changes["catalog"] = _merge_dataclass(config.catalog, tupled)

        if "addons" in data:
            changes["addons"] = tuple(
                _addon_from_dict(item, source) for item in _list(data, "addons", source)
            )

        if "ui" in data:
            raw = _section(data, "ui", source)
            if "stylesheets" in raw:
                raw = {**raw, "stylesheets": tuple(str(s) for s in _list(raw, "stylesheets", source))}
            changes["ui"] = _merge_dataclass(config.ui, raw)

        if "server" in data:
            changes["server"] = _merge_dataclass(config.server, _section(data, "server", source))

        unknown = set(data) - {"directives", "catalog", "addons", "ui", "server"}
        if unknown:
            logger.debug("Unknown configuration sections ignored: %s", ", ".join(sorted(unknown)))

        return replace(config, **changes)

    def validate(self):
        """
        Validate configuration for misleading settings.

        Returns:
            List of ConfigIssue (warn/error level)
        """
        from .validator import validate_config
        return validate_config(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "directives": self.directives.to_dict(),
            "catalog": self.catalog.to_dict(),
            "addons": [a.to_dict() for a in self.addons],
            "ui": self.ui.to_dict(),
            "server": self.server.to_dict(),
            "source": str(self.source) if self.source else None,
        }


def _load_yaml(path: Path) -> Optional[Dict[str, Any]]:
    """Parse a YAML file, raising IsinfoError on syntax errors"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise IsinfoError.config_invalid(path, "YAML syntax error", cause=e) from e
    except OSError as e:
        raise IsinfoError.config_invalid(path, str(e), cause=e) from e


def _section(data: Dict[str, Any], key: str, source: Optional[Path]) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise IsinfoError.config_invalid(source, f"'{key}' must be a mapping")
    return value


def _list(data: Dict[str, Any], key: str, source: Optional[Path]) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise IsinfoError.config_invalid(source, f"'{key}' must be a list")
    return value


def _merge_dataclass(default_instance, yaml_data: Dict[str, Any]):
    """Merge YAML data into a frozen dataclass instance, ignoring unknown keys"""
    names = {f.name for f in fields(default_instance)}
    known = {k: v for k, v in yaml_data.items() if k in names}
    ignored = set(yaml_data) - names
    if ignored:
        logger.debug(
            "Unknown keys ignored in %s: %s",
            type(default_instance).__name__,
            ", ".join(sorted(ignored)),
        )
    return replace(default_instance, **known)


def _addon_from_dict(item: Any, source: Optional[Path]) -> AddonConfig:
    if isinstance(item, str):
        return AddonConfig(name=item, module=item)
    if not isinstance(item, dict):
        raise IsinfoError.config_invalid(source, "each add-on must be a mapping or a module name")
    module = str(item.get("module") or "")
    return AddonConfig(
        name=str(item.get("name") or module),
        module=module,
        distribution=item.get("distribution"),
        icon=str(item.get("icon") or "fa-puzzle-piece"),
    )


def load_config(config_path: Optional[Path] = None) -> IsinfoConfig:
    """
    Load isinfo configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        IsinfoConfig instance (always has code defaults)
    """
    return IsinfoConfig.from_yaml(config_path)


__all__ = [
    "CONFIG_ENV_VAR",
    "IsinfoConfig",
    "load_config",
    "default_search_paths",
]
