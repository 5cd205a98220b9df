"""
Conversion of size values to rem.

px and unitless values are divided by the root (pixels per rem); rem values
pass through unchanged. All functions are pure.
"""

from __future__ import annotations

import math

from clampgen.schemas.result import ClampError, Err, Ok, Result

from .parser import SizeUnit, parse_unit


def convert_to_rem(value: str, root: int, field: str = "") -> Result[float]:
    """
    Convert a size value to rem.

    Args:
        value: Size value, e.g. "16px" or "1.5rem".
        root: Pixels per rem.
        field: Name reported in the error, if any.

    Returns:
        Ok(rem) or Err with UNPARSEABLE_NUMBER / UNSUPPORTED_UNIT / INVALID_ROOT.
    """
    number, unit = parse_unit(value)
    try:
        amount = float(number)
    except ValueError:
        return Err(ClampError.UNPARSEABLE_NUMBER, field=field, detail=f"{value!r} has no numeric part")
    if not math.isfinite(amount):
        return Err(ClampError.UNPARSEABLE_NUMBER, field=field, detail=f"{value!r} is not finite")

    try:
        size_unit = SizeUnit(unit)
    except ValueError:
        return Err(ClampError.UNSUPPORTED_UNIT, field=field, detail=f"unit {unit!r} is not supported")

    if size_unit is SizeUnit.REM:
        return Ok(amount)
    if root <= 0:
        return Err(ClampError.INVALID_ROOT, field=field, detail=f"root must be positive, got {root}")
    return Ok(amount / root)


def to_rem(value: str, root: int) -> float:
    """Convert a size value to rem, returning nan when it cannot be converted."""
    result = convert_to_rem(value, root)
    if isinstance(result, Err):
        return math.nan
    return result.value
