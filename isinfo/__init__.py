"""
isinfo - Runtime environment report

Introspects the running interpreter (loaded modules, configuration
directives, disabled dangerous functions, optional add-ons) and renders
the result as a searchable HTML page.

Basic usage:

    >>> from isinfo import load_config, EnvironmentReader, build_report
    >>> from isinfo.renderers.html import HtmlRenderer
    >>> config = load_config()
    >>> snapshot = EnvironmentReader(config).read()
    >>> html = HtmlRenderer(config.ui).render(build_report(snapshot, config))

Web app:

    >>> from isinfo.web import create_app
    >>> app = create_app()
"""

__version__ = "0.1.0"

from .config import IsinfoConfig, load_config
from .core import (
    AddonStatus,
    EnvironmentSnapshot,
    EnvironmentReport,
    EnvironmentReader,
    build_report,
    inactive_modules,
    really_disabled,
    visible_items,
    filter_lists,
)
from .errors import IsinfoError

__all__ = [
    "__version__",
    "IsinfoConfig",
    "load_config",
    "AddonStatus",
    "EnvironmentSnapshot",
    "EnvironmentReport",
    "EnvironmentReader",
    "build_report",
    "inactive_modules",
    "really_disabled",
    "visible_items",
    "filter_lists",
    "IsinfoError",
]
