import pytest

from lightshow.exceptions import BridgeCommunicationError
from lightshow.lights.bridge import LightState
from lightshow.script import ActionExecutor


class RecordingBridge:
    """Records bridge calls and sleeps in one ordered event list."""

    def __init__(self, fail_on_call: int | None = None):
        self.events: list[tuple[str, object]] = []
        self.fail_on_call = fail_on_call

    def all(self, state: LightState) -> None:
        if self.fail_on_call is not None and len(self.calls) + 1 == self.fail_on_call:
            raise BridgeCommunicationError("link down")
        self.events.append(("all", state))

    def sleep(self, seconds: float) -> None:
        self.events.append(("sleep", seconds))

    @property
    def calls(self) -> list[LightState]:
        return [state for kind, state in self.events if kind == "all"]


@pytest.fixture
def bridge() -> RecordingBridge:
    return RecordingBridge()


@pytest.fixture
def executor(bridge: RecordingBridge) -> ActionExecutor:
    return ActionExecutor(bridge, sleep=bridge.sleep)
