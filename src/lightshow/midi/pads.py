"""
Control-surface pad dispatch.

Maps a pressed pad to the variable bound with `bind PAD name;` and runs it.
Listening to a MIDI port is left to the caller; this only handles the
messages it is given.
"""

import threading

import mido

from ..exceptions import UndefinedVariableError
from ..script.executor import ActionExecutor
from ..script.types import Pad, Script


class PadDispatcher:
    """
    Runs bound variables when pads are pressed.

    One dispatcher lives for the whole process and may be called from a
    MIDI callback thread; presses are executed one at a time.
    """

    def __init__(self, script: Script, executor: ActionExecutor):
        if not script.midi_enabled():
            raise ValueError("Script does not enable the 'midi' directive")
        self.script = script
        self.executor = executor
        self._lock = threading.Lock()

    def press(self, pad: Pad) -> bool:
        """
        Run the variable bound to a pad.

        Returns:
            False if the pad is unbound, True once the variable has run

        Raises:
            UndefinedVariableError: If the pad is bound to an unknown variable
        """
        name = self.script.target_for_pad(pad)
        if name is None:
            return False

        if name not in self.script.variables:
            raise UndefinedVariableError(name)

        with self._lock:
            self.executor.execute(self.script.variables[name])
        return True

    def handle_message(self, message: mido.Message) -> bool:
        """Press the pad for a note_on message; other messages are ignored."""
        # note_on with velocity 0 is a note_off
        if message.type != "note_on" or message.velocity == 0:
            return False
        return self.press(message.note)
