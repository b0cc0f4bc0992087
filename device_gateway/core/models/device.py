"""Canonical device model.

Defines the Device entity shared by every backend, together with the
DeviceKind and HardwarePlatform enumerations that drive protocol
selection and smart-home schema mapping.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class DeviceKind(str, Enum):
    """Kind of controllable thing.

    Values are the literal names stored in the device catalog.
    """

    LIGHT = "LIGHT"
    SWITCH = "SWITCH"
    GARAGE = "GARAGE"
    SPRINKLER = "SPRINKLER"
    ROUTER = "ROUTER"
    IRRIGATION_HOST = "SQLSPRINKLER_HOST"
    TV = "TV"


class HardwarePlatform(str, Enum):
    """Hardware a device runs on.

    Determines how the device is reached and the smart-home model string.
    """

    RELAY_BOARD = "ARDUINO"
    SINGLE_BOARD_COMPUTER = "PI"
    TV_CONTROLLER = "LG"
    OTHER = "OTHER"


# All-off state reported for a TV that does not answer the liveness check
TV_OFF_STATE: dict[str, Any] = {"on": False, "muted": False, "currentVolume": 0}


class Device(BaseModel):
    """Canonical device assembled from whichever backend supplied it.

    Attributes:
        id: Unique identifier (``<hostId>-<zoneIndex>`` for irrigation zones)
        address: Network address for directly reachable hardware
        kind: Device kind
        hardware: Hardware platform
        state: bool for on/off devices, dict for TV state
        last_seen: Timestamp of the last self-reported update
        sw_version: Software version (zone number for irrigation zones)
        owner_id: Identifier of the owning user
        name: Display name
        nicknames: Alternative names, in order
        attributes: Opaque backend payload (TV volume/mute state)

    Examples:
        >>> Device(
        ...     id="rtr1",
        ...     address="192.168.1.1",
        ...     kind=DeviceKind.ROUTER,
        ...     name="Basement Router",
        ...     nicknames=["Basement Router"],
        ... )
    """

    id: str = Field(default="", description="Unique device identifier")

    address: str = Field(default="", description="Network address (host or host:port)")

    kind: DeviceKind = Field(default=DeviceKind.SWITCH, description="Device kind")

    hardware: HardwarePlatform = Field(
        default=HardwarePlatform.OTHER,
        description="Hardware platform",
    )

    state: bool | dict[str, Any] = Field(
        default=False,
        description="On/off state, or structured state for TVs",
    )

    last_seen: str = Field(default="", description="Last time the device reported in")

    sw_version: str = Field(default="0", description="Software version")

    owner_id: str = Field(default="", description="Owning user identifier")

    name: str = Field(default="", description="Display name")

    nicknames: list[str] = Field(
        default_factory=lambda: [""],
        description="Alternative names",
    )

    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Backend-specific attributes (TV volume state)",
    )

    @classmethod
    def default(cls) -> Device:
        """Zero-value device returned when resolution finds nothing."""
        return cls()

    @property
    def display_name(self) -> str:
        """Name shown to users, falling back to the id."""
        return self.name if self.name else self.id
