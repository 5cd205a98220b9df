"""
Clamp formula builder.

Given a root size and two (dimension, size) endpoint pairs, derives the line

    size = slope * dimension + intercept

in rem and renders it as a CSS clamp() whose preferred term uses a viewport
unit (vw for width, vh for height):

    clamp(<min>rem,<intercept>rem+<slope * 100><vw|vh>,<max>rem)

Width and height share one implementation; the config's axis only changes
which fields are read and the viewport unit emitted.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from clampgen.schemas.config import Axis, ClampConfig
from clampgen.schemas.result import ClampError, Err, Ok, Result
from clampgen.units.conversion import convert_to_rem
from clampgen.units.parser import parse_root

from .formatting import format_number, round_places

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClampFormula:
    """
    A computed clamp(): bounds in rem plus the preferred linear term.

    intercept is in rem; slope is rem per rem of viewport dimension, so the
    viewport-unit coefficient is slope * 100.
    """

    min_size: float
    intercept: float
    slope: float
    max_size: float
    axis: Axis

    @property
    def viewport_coefficient(self) -> float:
        return round_places(self.slope * 100)

    def render(self) -> str:
        preferred = (
            f"{format_number(self.intercept)}rem+"
            f"{format_number(self.viewport_coefficient)}{self.axis.viewport_unit}"
        )
        return f"clamp({format_number(self.min_size)}rem,{preferred},{format_number(self.max_size)}rem)"


def compute_clamp(config: ClampConfig) -> Result[ClampFormula]:
    """
    Compute the clamp formula for a config.

    Returns:
        Ok(ClampFormula), or Err describing the first problem found:
        EMPTY_FIELD, UNPARSEABLE_NUMBER, INVALID_ROOT, UNSUPPORTED_UNIT,
        or DEGENERATE_RANGE when both dimension endpoints are equal.
    """
    for name, value in zip(config.WIRE_NAMES.values(), config.values()):
        if not value:
            return Err(ClampError.EMPTY_FIELD, field=name)

    root_result = parse_root(config.root)
    if isinstance(root_result, Err):
        return root_result
    root = root_result.value

    dimension_names = list(config.WIRE_NAMES.values())[1:3]
    converted: list[float] = []
    for name, value in (
        ("minFontSize", config.min_font_size),
        ("maxFontSize", config.max_font_size),
        (dimension_names[0], config.min_dimension),
        (dimension_names[1], config.max_dimension),
    ):
        result = convert_to_rem(value, root, field=name)
        if isinstance(result, Err):
            return result
        converted.append(result.value)
    min_size, max_size, min_dimension, max_dimension = converted

    if max_dimension == min_dimension:
        return Err(
            ClampError.DEGENERATE_RANGE,
            field=dimension_names[1],
            detail=f"{dimension_names[0]} and {dimension_names[1]} are both {format_number(min_dimension)}rem",
        )

    slope = (max_size - min_size) / (max_dimension - min_dimension)
    intercept = round_places(-min_dimension * slope + min_size)
    coefficient = round_places(slope * 100)
    if not all(math.isfinite(v) for v in (slope, intercept, coefficient)):
        return Err(ClampError.UNPARSEABLE_NUMBER, detail="interpolation overflowed")

    return Ok(
        ClampFormula(
            min_size=min_size,
            intercept=intercept,
            slope=slope,
            max_size=max_size,
            axis=config.axis,
        )
    )


def build_clamp(config: ClampConfig, axis: Optional[Axis] = None) -> str:
    """
    Render the clamp() expression for a config, or "" if it is not computable.

    An empty result means "not computable yet" (incomplete or unparseable
    input, or equal dimension endpoints); callers keep their previous output.

    Raises:
        ValueError: If axis is given and does not match the config's axis.
    """
    if axis is not None and Axis(axis) is not config.axis:
        raise ValueError(f"{type(config).__name__} is a {config.axis.value} config, not {Axis(axis).value}")

    result = compute_clamp(config)
    if isinstance(result, Err):
        logger.debug("clamp not computable: %s", result)
        return ""
    return result.value.render()
