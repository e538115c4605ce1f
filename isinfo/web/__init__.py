"""
Web surface: the report page, its JSON twin and a health probe.
"""

from .app import create_app

__all__ = ["create_app"]
