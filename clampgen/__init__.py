"""
clampgen: fluid CSS clamp() generator.

Computes clamp(min, preferred, max) expressions that scale a size linearly
between two viewport widths or heights.
"""

from .builder import ClampFormula, build_clamp, compute_clamp
from .schemas import Axis, ClampConfig, ClampError, Err, HeightConfig, Ok, WidthConfig
from .units import parse_unit, to_rem

__all__ = [
    # types
    "Axis",
    "ClampConfig",
    "WidthConfig",
    "HeightConfig",
    "ClampFormula",
    "ClampError",
    "Ok",
    "Err",
    # operations
    "parse_unit",
    "to_rem",
    "build_clamp",
    "compute_clamp",
]
