"""Configuration dataclasses."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class HueConfig:
    """Philips Hue bridge configuration."""
    username: str
    bridge_ip: Optional[str] = None  # None to discover on the network
    timeout: float = 5.0  # Seconds per HTTP request


@dataclass
class LightshowConfig:
    """Main application configuration."""
    hue: HueConfig
