"""
Renderers for environment reports

Renderers convert an EnvironmentReport into display formats:
- Html: the searchable report page
- Text: Plain text output (terminal)
- Json: JSON output (for CI/tools)
"""

from .html import HtmlRenderer
from .text import TextRenderer
from .json import JsonRenderer

__all__ = [
    "HtmlRenderer",
    "TextRenderer",
    "JsonRenderer",
]
