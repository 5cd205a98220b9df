"""
Data types shared across clampgen: per-axis configs and step results.
"""

from .config import Axis, ClampConfig, HeightConfig, WidthConfig, config_type, has_same_keys
from .result import ClampError, Err, Ok, Result

__all__ = [
    # config
    "Axis",
    "ClampConfig",
    "WidthConfig",
    "HeightConfig",
    "config_type",
    "has_same_keys",
    # results
    "ClampError",
    "Ok",
    "Err",
    "Result",
]
