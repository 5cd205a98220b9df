"""
Clamp formula builder: linear interpolation rendered as CSS clamp().
"""

from .clamp import ClampFormula, build_clamp, compute_clamp
from .formatting import DECIMAL_PLACES, format_number, round_places

__all__ = [
    "ClampFormula",
    "build_clamp",
    "compute_clamp",
    "DECIMAL_PLACES",
    "format_number",
    "round_places",
]
