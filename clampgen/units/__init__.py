from .conversion import convert_to_rem, to_rem
from .parser import SizeUnit, parse_root, parse_unit

__all__ = [
    # types
    "SizeUnit",
    # parsing
    "parse_unit",
    "parse_root",
    # conversion
    "convert_to_rem",
    "to_rem",
]
