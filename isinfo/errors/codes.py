from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"

# configuration
CONFIG_NOT_FOUND: Final[str] = "CONFIG_NOT_FOUND"
CONFIG_INVALID: Final[str] = "CONFIG_INVALID"

# output
OUTPUT_WRITE_FAILED: Final[str] = "OUTPUT_WRITE_FAILED"


CONFIG_CODES: Final[set[str]] = {
    CONFIG_NOT_FOUND,
    CONFIG_INVALID,
}

KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    OUTPUT_WRITE_FAILED,
} | CONFIG_CODES
