"""
Number rendering for CSS output.

Numbers print the way a browser's number-to-string does: integral values
without a trailing ".0", negative zero as "0", otherwise the shortest digits
that round-trip. Values are positional between 1e-6 and 1e21, exponential
outside that range with no zero-padded exponent ("1.5e-7", "1e+21").
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

DECIMAL_PLACES: int = 4

_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)
# wide enough to hold any finite double to DECIMAL_PLACES
_CONTEXT = Context(prec=400)


def round_places(value: float) -> float:
    """Round to DECIMAL_PLACES, ties away from zero on the exact binary value."""
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP, context=_CONTEXT))


def format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
