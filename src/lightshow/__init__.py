"""
lightshow: a scripting language for Hue light shows.

Scripts bind actions and sequences to variables and trigger them in
file order against a Hue bridge.
"""

from .exceptions import LightshowError
from .runtime import load_script, run_script
from .script import Script, parse_script, structure

__version__ = "0.1.0"

__all__ = [
    "LightshowError",
    "Script",
    "load_script",
    "parse_script",
    "run_script",
    "structure",
]
