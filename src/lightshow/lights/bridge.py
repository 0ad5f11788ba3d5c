"""Hue bridge client for light-state updates."""

from dataclasses import dataclass
from typing import Optional

import requests

# Suppress SSL warnings for Hue bridge (uses self-signed cert)
import urllib3
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

from ..config.schema import HueConfig
from ..exceptions import BridgeCommunicationError
from .color import HSL

DISCOVERY_URL = "https://discovery.meethue.com/"

# Group 0 always contains every light the bridge knows
ALL_LIGHTS_GROUP = 0


@dataclass(frozen=True)
class LightState:
    """One state applied to every light."""
    hue: int  # 0-65535
    sat: int  # 0-254
    bri: int  # 0-254
    on: Optional[bool] = None  # None keeps the current power state

    @classmethod
    def from_hsl(cls, color: HSL, on: Optional[bool] = None) -> "LightState":
        return cls(hue=color.hue, sat=color.saturation, bri=color.lightness, on=on)

    def to_payload(self) -> dict:
        """Body for a Hue v1 light-state request."""
        payload: dict = {}
        if self.on is not None:
            payload["on"] = self.on
        payload["hue"] = self.hue
        payload["sat"] = self.sat
        payload["bri"] = self.bri
        return payload


def discover_bridge_ip(timeout: float = 5.0) -> str:
    """
    Find a bridge through the meethue.com discovery API.

    Returns:
        IP address of the first bridge found

    Raises:
        BridgeCommunicationError: If no bridge could be found
    """
    try:
        response = requests.get(DISCOVERY_URL, timeout=timeout)
        response.raise_for_status()
        bridges = response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        raise BridgeCommunicationError(f"bridge discovery failed: {e}") from e

    for bridge in bridges:
        ip = bridge.get("internalipaddress")
        if ip:
            return ip
    raise BridgeCommunicationError("no bridge found on the network")


class HueBridge:
    """
    Blocking client for a Hue bridge.

    Every call completes (or raises) before the next one starts; nothing
    is batched or retried.
    """

    def __init__(self, bridge_ip: str, username: str, timeout: float = 5.0):
        self.bridge_ip = bridge_ip
        self.username = username
        self.timeout = timeout
        self._session = requests.Session()
        # Hue bridge uses self-signed cert
        self._session.verify = False

    @property
    def base_url(self) -> str:
        return f"https://{self.bridge_ip}/api/{self.username}"

    @classmethod
    def connect(cls, config: HueConfig) -> "HueBridge":
        """
        Open a session with the configured bridge.

        Discovers the bridge when no IP is configured and checks the
        username is accepted.

        Raises:
            BridgeCommunicationError: If the bridge is unreachable or rejects the username
        """
        bridge_ip = config.bridge_ip or discover_bridge_ip(config.timeout)
        bridge = cls(bridge_ip, config.username, config.timeout)
        # /lights rejects unknown usernames, /config does not
        bridge._check(bridge._request("GET", "/lights"))
        print(f"[HUE] Connected to bridge at {bridge_ip}")
        return bridge

    def all(self, state: LightState) -> None:
        """
        Apply one state to every light.

        Raises:
            BridgeCommunicationError: If the bridge call fails
        """
        result = self._request(
            "PUT",
            f"/groups/{ALL_LIGHTS_GROUP}/action",
            json=state.to_payload(),
        )
        self._check(result)

    def _request(self, method: str, path: str, **kwargs):
        try:
            response = self._session.request(
                method,
                self.base_url + path,
                timeout=self.timeout,
                **kwargs,
            )
            response.raise_for_status()
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise BridgeCommunicationError(f"{method} {path}: {e}") from e

    @staticmethod
    def _check(result) -> None:
        """Raise for Hue error entries in a response body."""
        # Errors come back as [{"error": {"type": ..., "description": ...}}]
        if isinstance(result, list):
            for item in result:
                if isinstance(item, dict) and "error" in item:
                    error = item["error"]
                    raise BridgeCommunicationError(
                        f"{error.get('description', 'unknown error')} "
                        f"(type {error.get('type')})"
                    )


class MockBridge:
    """Mock bridge for running scripts without actual Hue hardware."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.calls: list[LightState] = []

    def all(self, state: LightState) -> None:
        """Record the state."""
        self.calls.append(state)
        if not self.quiet:
            power = {None: "--", True: "on", False: "off"}[state.on]
            print(
                f"[MOCK] all lights: power={power} "
                f"hue={state.hue} sat={state.sat} bri={state.bri}"
            )
