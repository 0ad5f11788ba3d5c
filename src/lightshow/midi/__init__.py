"""MIDI control-surface support."""

from .pads import PadDispatcher

__all__ = [
    "PadDispatcher",
]
