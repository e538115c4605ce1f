# isinfo/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading settings.
Returns structured issues with level (warn/error), path, message, hint.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Literal

from isinfo.core.reconcile import parse_disabled
from .directives import parse_flag

if TYPE_CHECKING:
    from .loader import IsinfoConfig


# "-1" (unlimited), plain bytes, or a K/M/G shorthand
SIZE_PATTERN = re.compile(r"^(-1|\d+[KMGkmg]?)$")


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "directives.post_max_size"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        level_icon = "⚠️" if self.level == "warn" else "❌"
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"{level_icon} [{self.path}] {self.message}{hint_str}"


def validate_config(config: "IsinfoConfig") -> List[ConfigIssue]:
    """
    Validate configuration for misleading settings.

    Returns:
        List of issues (warn/error level)
    """
    issues: List[ConfigIssue] = []
    directives = config.directives

    # Size directives must use the shorthand notation
    for name in ("memory_limit", "upload_max_size", "post_max_size"):
        value = getattr(directives, name)
        if value is None:
            continue
        if not SIZE_PATTERN.match(str(value).strip()):
            issues.append(ConfigIssue(
                level="error",
                path=f"directives.{name}",
                message=f"'{value}' is not a valid size",
                hint="Use bytes or a K/M/G suffix, e.g. '128M'; '-1' means unlimited",
            ))

    # Numeric limits
    if directives.max_execution_time is not None and not _is_non_negative_int(directives.max_execution_time):
        issues.append(ConfigIssue(
            level="error",
            path="directives.max_execution_time",
            message=f"'{directives.max_execution_time}' must be a non-negative integer (seconds)",
            hint="Use 0 for unlimited",
        ))
    if not _is_non_negative_int(directives.max_input_vars):
        issues.append(ConfigIssue(
            level="error",
            path="directives.max_input_vars",
            message=f"'{directives.max_input_vars}' must be a non-negative integer",
        ))

    # On/off flags
    for name in ("display_errors", "allow_url_fetch"):
        value = getattr(directives, name)
        if parse_flag(value) is None:
            issues.append(ConfigIssue(
                level="error",
                path=f"directives.{name}",
                message=f"'{value}' is not an on/off value",
                hint="Use true/false, on/off, yes/no or 1/0",
            ))

    # Upload larger than the whole request body can never succeed
    upload = _size_in_bytes(directives.upload_max_size)
    post = _size_in_bytes(directives.post_max_size)
    if upload is not None and post is not None and post >= 0 and upload > post:
        issues.append(ConfigIssue(
            level="warn",
            path="directives.upload_max_size",
            message=f"upload_max_size ({directives.upload_max_size}) exceeds post_max_size ({directives.post_max_size})",
            hint="Uploads are capped by post_max_size",
        ))

    # Disabled functions outside the dangerous catalog are never reported
    dangerous = set(config.catalog.dangerous_functions)
    for name in sorted(parse_disabled(directives.disabled_functions) - dangerous):
        issues.append(ConfigIssue(
            level="warn",
            path="directives.disabled_functions",
            message=f"'{name}' is not in the dangerous function catalog and will not be reported",
            hint="Add it to catalog.dangerous_functions to report it",
        ))

    # Add-ons
    for idx, addon in enumerate(config.addons):
        if not addon.module:
            issues.append(ConfigIssue(
                level="error",
                path=f"addons[{idx}].module",
                message=f"add-on '{addon.name}' has no module to probe",
            ))
    for name, count in Counter(a.name for a in config.addons).items():
        if count > 1:
            issues.append(ConfigIssue(
                level="warn",
                path="addons",
                message=f"add-on '{name}' is listed {count} times",
            ))

    if config.ui.dir not in ("rtl", "ltr", "auto"):
        issues.append(ConfigIssue(
            level="warn",
            path="ui.dir",
            message=f"'{config.ui.dir}' is not a valid text direction",
            hint="Use 'rtl', 'ltr' or 'auto'",
        ))

    return issues


def _is_non_negative_int(value) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return int(str(value)) >= 0
    except ValueError:
        return False


def _size_in_bytes(value) -> "int | None":
    """'8M' -> 8388608; None when the value is not a valid size"""
    if value is None:
        return None
    text = str(value).strip()
    if not SIZE_PATTERN.match(text):
        return None
    if text == "-1":
        return -1
    multiplier = {"k": 1024, "m": 1024 ** 2, "g": 1024 ** 3}.get(text[-1].lower())
    if multiplier:
        return int(text[:-1]) * multiplier
    return int(text)
