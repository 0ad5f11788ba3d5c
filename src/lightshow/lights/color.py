"""
Color conversion for the Hue bridge.

Converts script hex colors into the hue/saturation/lightness triple the
bridge light-state API expects.
"""

import colorsys
import string
from typing import NamedTuple

from ..exceptions import ColorConversionError

# Hue v1 light-state ranges
HUE_MAX = 65535
SAT_MAX = 254
BRI_MAX = 254


class HSL(NamedTuple):
    """
    HSL color scaled to Hue bridge ranges.

    - hue: Color wheel position (0-65535, 0=red)
    - saturation: Color intensity (0-254)
    - lightness: Sent as brightness (0-254)
    """
    hue: int
    saturation: int
    lightness: int


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert hex color string to bridge HSL.

    Args:
        hex_color: Hex string like "FF6B00" or "#ff6b00"

    Returns:
        HSL color tuple

    Raises:
        ColorConversionError: If hex format is invalid
    """
    hex_str = hex_color.lstrip("#")

    if len(hex_str) != 6:
        raise ColorConversionError(hex_color)

    if any(c not in string.hexdigits for c in hex_str):
        raise ColorConversionError(hex_color, "not a hex number")

    r = int(hex_str[0:2], 16) / 255.0
    g = int(hex_str[2:4], 16) / 255.0
    b = int(hex_str[4:6], 16) / 255.0

    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return HSL(
        hue=round(h * HUE_MAX),
        saturation=round(s * SAT_MAX),
        lightness=round(l * BRI_MAX),
    )
