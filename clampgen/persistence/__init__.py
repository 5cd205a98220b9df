"""
Config persistence: key/value stores plus JSON and URL encodings.

None of this is used by the formula builder; the session wires it in.
"""

from .codec import (
    URL_PARAM,
    ConfigDecodeError,
    config_from_json,
    config_query,
    config_to_json,
    decode_url_config,
    encode_url_config,
)
from .store import STORAGE_KEY, InMemoryStore, KeyValueStore, load_config, save_config

__all__ = [
    # constants
    "STORAGE_KEY",
    "URL_PARAM",
    # errors
    "ConfigDecodeError",
    # codecs
    "config_to_json",
    "config_from_json",
    "encode_url_config",
    "decode_url_config",
    "config_query",
    # stores
    "KeyValueStore",
    "InMemoryStore",
    "save_config",
    "load_config",
]
