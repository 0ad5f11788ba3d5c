"""Configuration schema and loading."""

from .schema import LightshowConfig, HueConfig
from .loader import load_config, DEFAULT_CONFIG_PATH

__all__ = [
    "LightshowConfig",
    "HueConfig",
    "load_config",
    "DEFAULT_CONFIG_PATH",
]
