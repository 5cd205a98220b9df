"""
Preset registry: default clamp configs per axis, loaded from YAML.

The registry is a module-level singleton; call get_presets() to obtain it.
Presets are loaded and validated once at import time and never written to
afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from clampgen.schemas.config import Axis, ClampConfig, config_type

_DATA_DIR = Path(__file__).parent / "data"


@dataclass(frozen=True)
class Preset:
    """A default config together with a human-readable description."""

    axis: Axis
    description: str
    config: ClampConfig

    def __post_init__(self) -> None:
        if self.config.axis is not self.axis:
            raise ValueError(f"preset for {self.axis.value} holds a {self.config.axis.value} config")


class PresetRegistry:
    """
    Read-only registry of default configs keyed by axis.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_presets() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self.presets: MappingProxyType[Axis, Preset]

        self._load_presets()
        self._validate_coverage()

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Preset data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse preset data file {path}: {exc}") from exc

    def _load_presets(self) -> None:
        data = self._load_yaml("defaults.yaml")
        result: dict[Axis, Preset] = {}
        for entry in data["entries"]:
            axis = Axis(entry["axis"])
            if axis in result:
                raise ValueError(f"Duplicate preset for axis {axis.value!r}")
            config = config_type(axis).from_mapping(
                {key: str(value) for key, value in entry["config"].items()}
            )
            result[axis] = Preset(
                axis=axis,
                description=entry.get("description", "").strip(),
                config=config,
            )
        self.presets = MappingProxyType(result)

    def _validate_coverage(self) -> None:
        missing = [axis.value for axis in Axis if axis not in self.presets]
        if missing:
            raise ValueError(f"No preset defined for axis: {', '.join(missing)}")

    def default(self, axis: Axis) -> ClampConfig:
        """Return the default config for an axis."""
        return self.presets[Axis(axis)].config


_presets: PresetRegistry = PresetRegistry()


def get_presets() -> PresetRegistry:
    """Return the module-level preset registry."""
    return _presets
