"""
Action executor.

Interprets actions against a bridge, one blocking call at a time.
"""

from __future__ import annotations

import time
from typing import Callable, Iterable, Protocol

from ..lights.bridge import LightState
from ..lights.color import hex_to_hsl
from .types import Action, Assigned, AssignedAction, AssignedSequence, Blink, Color, Wait


class Bridge(Protocol):
    """Anything that can apply a state to all lights."""

    def all(self, state: LightState) -> None: ...


class ActionExecutor:
    """
    Runs actions and sequences against a bridge.

    Waits and blink pauses block the calling thread through sleep, which
    can be replaced (tests pass a recorder instead of time.sleep).
    """

    def __init__(
        self,
        bridge: Bridge,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.bridge = bridge
        self.sleep = sleep

    def execute(self, entity: Assigned) -> None:
        """Run the action or sequence bound by an assignment."""
        if isinstance(entity, AssignedAction):
            self.run(entity.action)
        elif isinstance(entity, AssignedSequence):
            self.run_sequence(entity.sequence)
        else:
            raise TypeError(f"Cannot execute {type(entity).__name__}")

    def run_sequence(self, actions: Iterable[Action]) -> None:
        """Run actions left to right; the first failure stops the rest."""
        for action in actions:
            self.run(action)

    def run(self, action: Action) -> None:
        """
        Run one action.

        Raises:
            ColorConversionError: If a blink or color hex is malformed
            BridgeCommunicationError: If a bridge call fails
        """
        if isinstance(action, Wait):
            self.sleep(action.duration)
        elif isinstance(action, Blink):
            self._blink(action)
        elif isinstance(action, Color):
            color = hex_to_hsl(action.color)
            self.bridge.all(LightState.from_hsl(color))
        else:
            raise TypeError(f"Unknown action {action!r}")

    def _blink(self, action: Blink) -> None:
        color = hex_to_hsl(action.color)
        current = LightState.from_hsl(color)
        off = LightState.from_hsl(color, on=False)
        on = LightState.from_hsl(color, on=True)

        for _ in range(action.count):
            self.bridge.all(current)
            self.bridge.all(off)
            self.sleep(action.pause)
            self.bridge.all(on)
