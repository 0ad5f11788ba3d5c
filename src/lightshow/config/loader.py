"""Configuration file loading."""

from pathlib import Path

import yaml

from ..exceptions import ConfigError
from .schema import HueConfig, LightshowConfig

DEFAULT_CONFIG_PATH = Path("config.yaml")


def load_config(config_path: Path = DEFAULT_CONFIG_PATH) -> LightshowConfig:
    """
    Load configuration from YAML file.

    Raises:
        ConfigError: If the file is missing, unreadable or has no hue credentials
    """
    if not config_path.exists():
        raise ConfigError(f"Config not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}")

    hue_data = data.get("hue") or {}
    if not isinstance(hue_data, dict):
        raise ConfigError(f"Expected 'hue' to be a mapping in {config_path}")
    if not hue_data.get("username"):
        raise ConfigError(f"Missing 'hue.username' in {config_path}")

    try:
        timeout = float(hue_data.get("timeout", 5.0))
    except (TypeError, ValueError):
        raise ConfigError(
            f"Invalid 'hue.timeout' in {config_path}: {hue_data.get('timeout')!r}"
        ) from None

    hue = HueConfig(
        username=str(hue_data["username"]),
        bridge_ip=hue_data.get("bridge_ip") or None,
        timeout=timeout,
    )

    return LightshowConfig(hue=hue)
