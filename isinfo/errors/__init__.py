"""
isinfo errors

One exception type (IsinfoError) plus a finite set of error codes.
"""

from . import codes
from .exceptions import IsinfoError

__all__ = [
    "codes",
    "IsinfoError",
]
