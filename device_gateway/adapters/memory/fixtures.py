"""Default fixtures for the in-memory catalog.

A small household used for development when no catalog seed file is
configured.
"""

from __future__ import annotations

from device_gateway.core.models import Device, DeviceKind, HardwarePlatform

DEMO_OWNER = "demo-user"

DEFAULT_DEVICES: list[Device] = [
    Device(
        id="rtr1",
        address="192.168.1.1",
        kind=DeviceKind.ROUTER,
        hardware=HardwarePlatform.OTHER,
        sw_version="64",
        owner_id=DEMO_OWNER,
        name="Basement Router",
        nicknames=["Basement Router"],
    ),
    Device(
        id="porch-light",
        address="192.168.1.40",
        kind=DeviceKind.LIGHT,
        hardware=HardwarePlatform.RELAY_BOARD,
        sw_version="12",
        owner_id=DEMO_OWNER,
        name="Porch Light",
        nicknames=["Porch Light"],
    ),
    Device(
        id="garage-door",
        address="192.168.1.41",
        kind=DeviceKind.GARAGE,
        hardware=HardwarePlatform.RELAY_BOARD,
        sw_version="7",
        owner_id=DEMO_OWNER,
        name="Garage Door",
        nicknames=["Garage Door"],
    ),
    Device(
        id="0f8fad5b-d9cb-469f-a165-70867728950e",
        address="192.168.1.60",
        kind=DeviceKind.IRRIGATION_HOST,
        hardware=HardwarePlatform.SINGLE_BOARD_COMPUTER,
        sw_version="3",
        owner_id=DEMO_OWNER,
        name="Sprinklers",
        nicknames=["Sprinklers"],
    ),
]
