"""
Clamp configuration records.

A ClampConfig is either a WidthConfig or a HeightConfig; which one is in use
is the axis. Both hold five strings exactly as a form or a persisted record
supplies them. Nothing is parsed here; the builder does that per computation.

Wire names (the camelCase keys used in stored and URL-encoded configs) map
one-to-one onto the Python field names.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import ClassVar, Mapping, Union


class Axis(str, Enum):
    """Viewport dimension driving the interpolation."""

    WIDTH = "width"
    HEIGHT = "height"

    @property
    def viewport_unit(self) -> str:
        return "vw" if self is Axis.WIDTH else "vh"


class _AxisConfig:
    """
    Mixin holding the behaviour shared by WidthConfig and HeightConfig.

    Not a config on its own: each of the two dataclasses supplies the fields,
    AXIS, WIRE_NAMES and the min_dimension / max_dimension properties.
    """

    AXIS: ClassVar[Axis]
    # python field name -> wire name, in declaration order
    WIRE_NAMES: ClassVar[dict[str, str]]

    def __post_init__(self) -> None:
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise ValueError(f"{f.name} must be a string, got {type(value).__name__}")

    @property
    def axis(self) -> Axis:
        return self.AXIS

    def values(self) -> tuple[str, ...]:
        return tuple(getattr(self, name) for name in self.WIRE_NAMES)

    def to_mapping(self) -> dict[str, str]:
        """Return the config keyed by wire names."""
        return {wire: getattr(self, name) for name, wire in self.WIRE_NAMES.items()}

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]):
        """
        Build a config from a mapping keyed by wire names.

        Raises:
            ValueError: If keys are missing or unexpected, or a value is not a string.
        """
        expected = set(cls.WIRE_NAMES.values())
        if set(data) != expected:
            missing = sorted(expected - set(data))
            extra = sorted(set(data) - expected)
            raise ValueError(f"{cls.__name__} keys mismatch: missing={missing}, unexpected={extra}")
        return cls(**{name: data[wire] for name, wire in cls.WIRE_NAMES.items()})

    @classmethod
    def field_name(cls, key: str) -> str:
        """Resolve a Python or wire field name to the Python field name."""
        if key in cls.WIRE_NAMES:
            return key
        for name, wire in cls.WIRE_NAMES.items():
            if wire == key:
                return name
        raise ValueError(f"{key!r} is not a field of {cls.__name__}")

    def with_field(self, key: str, value: str):
        """Return a copy with one field replaced; key may be a Python or wire name."""
        return replace(self, **{self.field_name(key): value})  # type: ignore[type-var]


@dataclass(frozen=True)
class WidthConfig(_AxisConfig):
    """Interpolation across viewport width."""

    AXIS: ClassVar[Axis] = Axis.WIDTH
    WIRE_NAMES: ClassVar[dict[str, str]] = {
        "root": "root",
        "min_width": "minWidth",
        "max_width": "maxWidth",
        "min_font_size": "minFontSize",
        "max_font_size": "maxFontSize",
    }

    root: str
    min_width: str
    max_width: str
    min_font_size: str
    max_font_size: str

    @property
    def min_dimension(self) -> str:
        return self.min_width

    @property
    def max_dimension(self) -> str:
        return self.max_width


@dataclass(frozen=True)
class HeightConfig(_AxisConfig):
    """Interpolation across viewport height."""

    AXIS: ClassVar[Axis] = Axis.HEIGHT
    WIRE_NAMES: ClassVar[dict[str, str]] = {
        "root": "root",
        "min_height": "minHeight",
        "max_height": "maxHeight",
        "min_font_size": "minFontSize",
        "max_font_size": "maxFontSize",
    }

    root: str
    min_height: str
    max_height: str
    min_font_size: str
    max_font_size: str

    @property
    def min_dimension(self) -> str:
        return self.min_height

    @property
    def max_dimension(self) -> str:
        return self.max_height


ClampConfig = Union[WidthConfig, HeightConfig]

_CONFIG_TYPES: dict[Axis, type] = {
    Axis.WIDTH: WidthConfig,
    Axis.HEIGHT: HeightConfig,
}


def config_type(axis: Axis) -> type:
    """Return the config class for an axis."""
    return _CONFIG_TYPES[Axis(axis)]


def has_same_keys(data: Mapping[str, object], axis: Axis) -> bool:
    """True if data carries exactly the wire keys of the axis's config."""
    return set(data) == set(config_type(axis).WIRE_NAMES.values())
