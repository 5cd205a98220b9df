"""
Key/value storage for configs.

The session reads and writes through a KeyValueStore handed to it; any
string store works (browser storage bridge, file, dict). InMemoryStore is the
implementation used by default and in tests.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from clampgen.schemas.config import Axis, ClampConfig

from .codec import ConfigDecodeError, config_from_json, config_to_json

logger = logging.getLogger(__name__)

STORAGE_KEY: str = "clampFontSizeConfig"


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Dict-backed KeyValueStore."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data


def save_config(store: KeyValueStore, config: ClampConfig, key: str = STORAGE_KEY) -> None:
    """Write a config to the store as JSON."""
    store.set(key, config_to_json(config))


def load_config(store: KeyValueStore, axis: Axis, key: str = STORAGE_KEY) -> Optional[ClampConfig]:
    """
    Read a config for an axis from the store.

    Returns None when nothing is stored or the stored value does not decode to
    a config of that axis; a stale or foreign record is discarded, not fatal.
    """
    raw = store.get(key)
    if raw is None:
        return None
    try:
        return config_from_json(raw, axis)
    except ConfigDecodeError as exc:
        logger.warning("Ignoring stored config under %r: %s", key, exc)
        return None
