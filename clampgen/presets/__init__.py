from .registry import Preset, PresetRegistry, get_presets

__all__ = [
    "Preset",
    "PresetRegistry",
    "get_presets",
]
