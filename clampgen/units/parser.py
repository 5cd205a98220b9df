"""
Unit parsing for size values such as ``"16px"``, ``"1.5rem"`` or ``"16"``.

parse_unit never raises: a value without a numeric prefix comes back with an
empty numeric part, and callers decide what that means.
"""

from __future__ import annotations

import re
from enum import Enum

from clampgen.schemas.result import ClampError, Err, Ok, Result

_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_PREFIX = re.compile(r"^[+-]?\d+")


class SizeUnit(str, Enum):
    """Units the rem converter understands."""

    PX = "px"
    REM = "rem"
    UNITLESS = ""


def parse_unit(value: str) -> tuple[str, str]:
    """
    Split a size value into its numeric part and unit suffix.

    Examples:
        "16px"   -> ("16", "px")
        "1.5rem" -> ("1.5", "rem")
        "16"     -> ("16", "")
        "abc"    -> ("", "abc")
    """
    text = value.strip()
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return "", text.lower()
    return match.group(0), text[match.end() :].strip().lower()


def parse_root(value: str) -> Result[int]:
    """Parse the pixels-per-rem root as a radix-10 integer from its leading digits."""
    match = _INTEGER_PREFIX.match(value.strip())
    if match is None:
        return Err(ClampError.UNPARSEABLE_NUMBER, field="root", detail=f"{value!r} is not an integer")
    root = int(match.group(0), 10)
    if root <= 0:
        return Err(ClampError.INVALID_ROOT, field="root", detail=f"root must be positive, got {root}")
    return Ok(root)
