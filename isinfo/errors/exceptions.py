from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes collapse to UNKNOWN.
    """
    c = str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class IsinfoError(Exception):
    """
    The one public exception type of isinfo.

    Raised only outside the request path (configuration loading, CLI
    output). Report generation itself never raises; it degrades to
    placeholder values instead.
    """
    message: str
    error_code: str = codes.UNKNOWN
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_config(self) -> bool:
        return self.error_code in codes.CONFIG_CODES

    # -------- factories --------

    @classmethod
    def config_not_found(cls, path: Any) -> "IsinfoError":
        return cls(
            message=f"Configuration file not found: {path}",
            error_code=codes.CONFIG_NOT_FOUND,
            details={"path": str(path)},
        )

    @classmethod
    def config_invalid(cls, path: Any, reason: str, cause: Optional[BaseException] = None) -> "IsinfoError":
        return cls(
            message=f"Invalid configuration file {path}: {reason}",
            error_code=codes.CONFIG_INVALID,
            details={"path": str(path), "reason": reason},
            cause=cause,
        )
