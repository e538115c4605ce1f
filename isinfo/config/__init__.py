"""
isinfo Configuration

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .directives import DirectivesConfig, parse_flag
from .addons import AddonConfig, DEFAULT_ADDONS
from .catalog import CatalogConfig
from .ui import UIConfig, ServerConfig, DEFAULT_STYLESHEETS
from .loader import CONFIG_ENV_VAR, IsinfoConfig, load_config
from .validator import validate_config, ConfigIssue

__all__ = [
    "DirectivesConfig",
    "parse_flag",
    "AddonConfig",
    "DEFAULT_ADDONS",
    "CatalogConfig",
    "UIConfig",
    "ServerConfig",
    "DEFAULT_STYLESHEETS",
    "CONFIG_ENV_VAR",
    "IsinfoConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
