# isinfo/config/directives.py
"""
Host directives

Configuration scalars describing the limits and flags of the deployment.
A directive left as None is read from the live process instead
(see isinfo.core.reader).
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class DirectivesConfig:
    """
    Host limits and flags shown in the "general information" table.

    Sizes accept the shorthand notation (e.g. "128M", "2G", "-1").
    """

    memory_limit: Optional[str] = None          # None: soft RLIMIT_AS
    upload_max_size: str = "2M"
    post_max_size: str = "8M"
    max_execution_time: Optional[int] = None    # None: soft RLIMIT_CPU
    max_input_vars: int = 1000
    display_errors: Union[bool, str] = False    # see parse_flag
    allow_url_fetch: Union[bool, str] = True
    disabled_functions: Union[str, list] = ""   # comma-separated (a YAML list is joined)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return asdict(self)


_TRUE_WORDS = frozenset({"1", "on", "true", "yes"})
_FALSE_WORDS = frozenset({"0", "off", "false", "no", ""})


def parse_flag(value: Any) -> Optional[bool]:
    """
    Read an on/off directive the way ini files spell it.

    "1", "on", "true", "yes" are on; "0", "off", "false", "no" and the
    empty string are off (case-insensitive). Returns None for anything
    else, so a typo is never shown as enabled.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    return None
