"""Tests for the clamp formula builder: build_clamp and compute_clamp."""

import re

import pytest

from clampgen.builder.clamp import ClampFormula, build_clamp, compute_clamp
from clampgen.schemas.config import Axis, HeightConfig, WidthConfig
from clampgen.schemas.result import ClampError, Err, Ok

_CLAMP_SHAPE = re.compile(r"^clamp\([^,]+,[^,]+,[^,]+\)$")


def _width(**overrides):
    fields = dict(
        root="16",
        min_width="500px",
        max_width="900px",
        min_font_size="16px",
        max_font_size="48px",
    )
    fields.update(overrides)
    return WidthConfig(**fields)


def _height(**overrides):
    fields = dict(
        root="16",
        min_height="500px",
        max_height="900px",
        min_font_size="16px",
        max_font_size="48px",
    )
    fields.update(overrides)
    return HeightConfig(**fields)


# ── Known outputs ─────────────────────────────────────────────────────────────


class TestKnownOutputs:
    def test_width_scenario(self):
        assert build_clamp(_width(), Axis.WIDTH) == "clamp(1rem,-1.5rem+8vw,3rem)"

    def test_height_scenario_differs_only_in_unit(self):
        width = build_clamp(_width())
        height = build_clamp(_height(), Axis.HEIGHT)
        assert height == "clamp(1rem,-1.5rem+8vh,3rem)"
        assert height == width.replace("vw", "vh")

    def test_axis_defaults_to_config_axis(self):
        assert build_clamp(_width()) == build_clamp(_width(), Axis.WIDTH)

    def test_axis_accepts_plain_string(self):
        assert build_clamp(_height(), "height") == "clamp(1rem,-1.5rem+8vh,3rem)"

    def test_rem_inputs(self):
        config = _width(
            min_width="20rem", max_width="60rem", min_font_size="1rem", max_font_size="2rem"
        )
        assert build_clamp(config) == "clamp(1rem,0.5rem+2.5vw,2rem)"

    def test_mixed_units(self):
        config = _width(min_font_size="1rem", max_width="56.25rem")
        assert build_clamp(config) == "clamp(1rem,-1.5rem+8vw,3rem)"

    def test_fractional_bounds(self):
        config = _width(min_font_size="18px")
        assert build_clamp(config).startswith("clamp(1.125rem,")

    def test_values_rounded_to_four_places(self):
        config = _height(min_height="340px", max_height="800px")
        assert build_clamp(config) == "clamp(1rem,-0.4783rem+6.9565vh,3rem)"

    def test_zero_intercept_renders_as_zero(self):
        config = _width(min_width="320px", max_width="640px", min_font_size="8px", max_font_size="16px")
        assert build_clamp(config) == "clamp(0.5rem,0rem+2.5vw,1rem)"


# ── Formula properties ────────────────────────────────────────────────────────


class TestFormulaProperties:
    @pytest.mark.parametrize(
        "min_width, max_width, min_font, max_font",
        [
            ("320px", "1280px", "14px", "18px"),
            ("500px", "900px", "16px", "48px"),
            ("20rem", "80rem", "1rem", "1rem"),
            ("375", "1440", "12", "64"),
        ],
    )
    def test_non_negative_slope_and_three_terms(self, min_width, max_width, min_font, max_font):
        config = _width(
            min_width=min_width, max_width=max_width, min_font_size=min_font, max_font_size=max_font
        )
        result = compute_clamp(config)
        assert isinstance(result, Ok)
        assert result.value.slope >= 0
        assert _CLAMP_SHAPE.match(result.value.render())

    def test_idempotent(self):
        config = _height(min_height="340px", max_height="800px")
        assert build_clamp(config) == build_clamp(config)

    def test_preferred_term_hits_endpoints(self):
        result = compute_clamp(_width(min_width="400px", max_width="1200px"))
        formula = result.value
        assert formula.slope * 25 + formula.intercept == pytest.approx(1.0, abs=1e-4)
        assert formula.slope * 75 + formula.intercept == pytest.approx(3.0, abs=1e-4)

    def test_shrinking_size_gives_negative_slope(self):
        result = compute_clamp(_width(min_font_size="48px", max_font_size="16px"))
        assert isinstance(result, Ok)
        assert result.value.slope < 0

    def test_formula_fields(self):
        formula = compute_clamp(_width()).value
        assert isinstance(formula, ClampFormula)
        assert (formula.min_size, formula.intercept, formula.max_size) == (1.0, -1.5, 3.0)
        assert formula.slope == pytest.approx(0.08)
        assert formula.axis is Axis.WIDTH
        assert formula.viewport_coefficient == 8.0


# ── Guards ────────────────────────────────────────────────────────────────────


class TestGuards:
    @pytest.mark.parametrize(
        "field, wire", [
            ("root", "root"),
            ("min_width", "minWidth"),
            ("max_width", "maxWidth"),
            ("min_font_size", "minFontSize"),
            ("max_font_size", "maxFontSize"),
        ],
    )
    def test_empty_field(self, field, wire):
        config = _width(**{field: ""})
        assert build_clamp(config) == ""
        result = compute_clamp(config)
        assert isinstance(result, Err)
        assert result.error is ClampError.EMPTY_FIELD
        assert result.field == wire

    def test_unparseable_dimension(self):
        config = _width(min_width="abc")
        assert build_clamp(config) == ""
        result = compute_clamp(config)
        assert result.error is ClampError.UNPARSEABLE_NUMBER
        assert result.field == "minWidth"

    def test_unparseable_height_names_height_field(self):
        result = compute_clamp(_height(max_height="tall"))
        assert result.error is ClampError.UNPARSEABLE_NUMBER
        assert result.field == "maxHeight"

    def test_unparseable_root(self):
        assert build_clamp(_width(root="abc")) == ""

    def test_zero_root(self):
        result = compute_clamp(_width(root="0"))
        assert result.error is ClampError.INVALID_ROOT

    def test_unsupported_unit(self):
        result = compute_clamp(_width(max_font_size="3em"))
        assert result.error is ClampError.UNSUPPORTED_UNIT
        assert build_clamp(_width(max_font_size="3em")) == ""

    def test_mismatched_axis_raises(self):
        with pytest.raises(ValueError, match="width config"):
            build_clamp(_width(), Axis.HEIGHT)


# ── Degenerate range ──────────────────────────────────────────────────────────


class TestDegenerateRange:
    def test_equal_dimensions_return_empty(self):
        config = _width(min_width="600px", max_width="600px")
        assert build_clamp(config) == ""

    def test_equal_after_conversion(self):
        config = _width(min_width="37.5rem", max_width="600px")
        result = compute_clamp(config)
        assert isinstance(result, Err)
        assert result.error is ClampError.DEGENERATE_RANGE
        assert result.field == "maxWidth"

    def test_height_axis(self):
        result = compute_clamp(_height(min_height="800px", max_height="800px"))
        assert result.error is ClampError.DEGENERATE_RANGE


# ── Overflow ──────────────────────────────────────────────────────────────────


class TestOverflow:
    def test_viewport_coefficient_overflow(self):
        """A slope near the float maximum is finite, but slope * 100 is not."""
        config = _width(min_width="0rem", max_width="1rem", min_font_size="0rem", max_font_size="1e307rem")
        result = compute_clamp(config)
        assert isinstance(result, Err)
        assert result.error is ClampError.UNPARSEABLE_NUMBER
        assert build_clamp(config) == ""

    def test_large_but_finite_values_render(self):
        config = _width(min_width="0rem", max_width="1rem", min_font_size="0rem", max_font_size="1e300rem")
        assert "inf" not in build_clamp(config)
        assert build_clamp(config).startswith("clamp(0rem,")
