"""
Session state for an interactive clamp generator.

A session owns one config per axis and the axis currently being edited.
Field edits go to the active axis's config only; the other config is kept
so switching axes back and forth loses nothing.

Persistence follows the browser tool this mirrors: a ``config`` URL
parameter takes precedence over the stored config, and only the width config
is saved and put in the URL.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from clampgen.builder.clamp import build_clamp
from clampgen.persistence.codec import ConfigDecodeError, config_query, decode_url_config
from clampgen.persistence.store import KeyValueStore, load_config, save_config
from clampgen.presets.registry import get_presets
from clampgen.schemas.config import Axis, ClampConfig, HeightConfig, WidthConfig

logger = logging.getLogger(__name__)


def _default_width() -> WidthConfig:
    return get_presets().default(Axis.WIDTH)  # type: ignore[return-value]


def _default_height() -> HeightConfig:
    return get_presets().default(Axis.HEIGHT)  # type: ignore[return-value]


@dataclass(frozen=True)
class SessionState:
    """Immutable session snapshot; every operation returns a new state."""

    width_config: WidthConfig = field(default_factory=_default_width)
    height_config: HeightConfig = field(default_factory=_default_height)
    axis: Axis = Axis.WIDTH

    def __post_init__(self) -> None:
        if not isinstance(self.width_config, WidthConfig):
            raise ValueError(f"width_config must be a WidthConfig, got {type(self.width_config).__name__}")
        if not isinstance(self.height_config, HeightConfig):
            raise ValueError(f"height_config must be a HeightConfig, got {type(self.height_config).__name__}")
        object.__setattr__(self, "axis", Axis(self.axis))

    @property
    def active_config(self) -> ClampConfig:
        return self.width_config if self.axis is Axis.WIDTH else self.height_config

    def set_axis(self, axis: Axis) -> SessionState:
        return replace(self, axis=Axis(axis))

    def with_config(self, config: ClampConfig) -> SessionState:
        """Replace the config for the config's own axis."""
        if isinstance(config, WidthConfig):
            return replace(self, width_config=config)
        return replace(self, height_config=config)

    def update(self, key: str, value: str) -> SessionState:
        """
        Set one field of the active config.

        Args:
            key: Python field name ("min_width") or wire name ("minWidth").
            value: New raw string value.

        Raises:
            ValueError: If key is not a field of the active axis's config.
        """
        return self.with_config(self.active_config.with_field(key, value))

    def clamp(self) -> str:
        """clamp() for the active config, "" while it is not computable."""
        return build_clamp(self.active_config)

    def restore(self, store: KeyValueStore, url_param: Optional[str] = None) -> SessionState:
        """
        Load the width config from a URL parameter, else from the store.

        Undecodable input is logged and skipped; the current config is kept.
        """
        if url_param:
            try:
                return self.with_config(decode_url_config(url_param, Axis.WIDTH))
            except ConfigDecodeError as exc:
                logger.warning("Ignoring config URL parameter: %s", exc)
                return self

        stored = load_config(store, Axis.WIDTH)
        if stored is None:
            return self
        return self.with_config(stored)

    def persist(self, store: KeyValueStore) -> str:
        """Save the width config and return the query string that reproduces it."""
        save_config(store, self.width_config)
        return config_query(self.width_config)
