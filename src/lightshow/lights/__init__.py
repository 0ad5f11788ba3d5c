"""Hue light control modules."""

from .bridge import HueBridge, MockBridge, LightState, discover_bridge_ip
from .color import HSL, hex_to_hsl

__all__ = [
    "HueBridge",
    "MockBridge",
    "LightState",
    "discover_bridge_ip",
    "HSL",
    "hex_to_hsl",
]
