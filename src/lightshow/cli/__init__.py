"""
CLI entry points for lightshow.

Contains the main executable script:
- run: execute a .lshow file against a Hue bridge
"""

from .run import main

__all__ = [
    "main",
]
