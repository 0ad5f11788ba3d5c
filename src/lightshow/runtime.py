"""Loading and running script files."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

from .script import ActionExecutor, Entity, Script, parse_script, structure
from .script.executor import Bridge

# Conventional script file extension
SCRIPT_SUFFIX = ".lshow"


def load_script(path: Path) -> list[Entity]:
    """Read a UTF-8 script file and parse it completely."""
    return parse_script(path.read_text(encoding="utf-8"))


def run_script(
    path: Path,
    bridge: Bridge,
    sleep: Callable[[float], None] = time.sleep,
) -> Script:
    """
    Parse a script file, then structure it against a bridge.

    Nothing runs unless the whole file parses.
    """
    entities = load_script(path)
    return structure(entities, ActionExecutor(bridge, sleep=sleep))
