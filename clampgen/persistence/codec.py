"""
Serialisation of configs for storage and URLs.

Stored form: a JSON object keyed by wire names.
URL form: the JSON, UTF-8 encoded, base64 encoded, then percent-quoted, as
carried in a ``?config=`` query parameter.

Both round trips preserve the five strings exactly.
"""

from __future__ import annotations

import base64
import binascii
import json
from urllib.parse import quote, unquote

from clampgen.schemas.config import Axis, ClampConfig, config_type, has_same_keys

URL_PARAM: str = "config"


class ConfigDecodeError(ValueError):
    """A serialised config could not be turned back into a config."""


def config_to_json(config: ClampConfig) -> str:
    return json.dumps(config.to_mapping(), separators=(",", ":"))


def config_from_json(text: str, axis: Axis) -> ClampConfig:
    """
    Decode a JSON config for the given axis.

    Raises:
        ConfigDecodeError: If text is not JSON, not an object with exactly the
            axis's keys, or has non-string values.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigDecodeError(f"config is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigDecodeError(f"config must be a JSON object, got {type(data).__name__}")
    if not has_same_keys(data, axis):
        raise ConfigDecodeError(f"config keys {sorted(data)} do not match a {Axis(axis).value} config")
    try:
        return config_type(axis).from_mapping(data)
    except ValueError as exc:
        raise ConfigDecodeError(str(exc)) from exc


def encode_url_config(config: ClampConfig) -> str:
    """Encode a config as the value of the ``config`` query parameter."""
    raw = config_to_json(config).encode("utf-8")
    return quote(base64.b64encode(raw).decode("ascii"), safe="")


def decode_url_config(param: str, axis: Axis) -> ClampConfig:
    """
    Decode a ``config`` query parameter value.

    Raises:
        ConfigDecodeError: If the value is not base64 of a JSON config for axis.
    """
    try:
        raw = base64.b64decode(unquote(param), validate=True)
        text = raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ConfigDecodeError(f"config parameter is not base64 encoded JSON: {exc}") from exc
    return config_from_json(text, axis)


def config_query(config: ClampConfig) -> str:
    """Return the query string (``?config=...``) that reproduces config."""
    return f"?{URL_PARAM}={encode_url_config(config)}"
