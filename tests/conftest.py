"""Pytest configuration and shared fixtures for device gateway tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from device_gateway.adapters.memory import InMemoryCatalog
from device_gateway.core.models import (
    Device,
    DeviceKind,
    HardwarePlatform,
    TVVolumeState,
    Zone,
)
from device_gateway.services.resolver import DeviceResolver
from device_gateway.services.router import CommandRouter

HOST_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"
OWNER_ID = "user-1"


@pytest.fixture
def router_device() -> Device:
    """Fixture providing the basement router record."""
    return Device(
        id="rtr1",
        address="192.168.1.1",
        kind=DeviceKind.ROUTER,
        hardware=HardwarePlatform.OTHER,
        last_seen="2024-05-01 10:00:00",
        sw_version="64",
        owner_id=OWNER_ID,
        name="Basement Router",
        nicknames=["Basement Router"],
    )


@pytest.fixture
def light_device() -> Device:
    """Fixture providing a relay-board light."""
    return Device(
        id="porch-light",
        address="192.168.1.40",
        kind=DeviceKind.LIGHT,
        hardware=HardwarePlatform.RELAY_BOARD,
        sw_version="12",
        owner_id=OWNER_ID,
        name="Porch Light",
        nicknames=["Porch Light"],
    )


@pytest.fixture
def host_device() -> Device:
    """Fixture providing an irrigation host."""
    return Device(
        id=HOST_ID,
        address="192.168.1.60",
        kind=DeviceKind.IRRIGATION_HOST,
        hardware=HardwarePlatform.SINGLE_BOARD_COMPUTER,
        sw_version="3",
        owner_id=OWNER_ID,
        name="Sprinklers",
        nicknames=["Sprinklers"],
    )


@pytest.fixture
def tv_device() -> Device:
    """Fixture providing a TV."""
    return Device(
        id="living-room-tv",
        address="192.168.1.80",
        kind=DeviceKind.TV,
        hardware=HardwarePlatform.TV_CONTROLLER,
        owner_id=OWNER_ID,
        name="Living Room TV",
        nicknames=["TV"],
        state={"on": True, "muted": False, "currentVolume": 20},
    )


@pytest.fixture
def sample_zones() -> list[Zone]:
    """Fixture providing the zones reported by the irrigation host."""
    return [
        Zone(name="Front lawn", gpio=17, time=10, enabled=True, auto_off=True,
             system_order=0, state=False, id=1),
        Zone(name="Back lawn", gpio=27, time=15, enabled=True, auto_off=True,
             system_order=1, state=True, id=2),
        Zone(name="Garden beds", gpio=22, time=5, enabled=False, auto_off=True,
             system_order=2, state=False, id=3),
    ]


@pytest.fixture
def catalog(router_device, light_device, host_device, tv_device) -> InMemoryCatalog:
    """Fixture providing a catalog holding all sample devices."""
    return InMemoryCatalog([router_device, light_device, host_device, tv_device])


@pytest.fixture
def mock_irrigation(sample_zones):
    """Mock irrigation host client."""
    gateway = MagicMock()
    gateway.list_zones = AsyncMock(return_value=sample_zones)
    gateway.get_system_state = AsyncMock(return_value=True)
    gateway.set_system = AsyncMock(return_value=None)
    gateway.set_zone = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def mock_tv():
    """Mock TV adapter reporting an online TV."""
    tv = MagicMock()
    tv.is_online = AsyncMock(return_value=True)
    tv.get_volume = AsyncMock(
        return_value=TVVolumeState(
            muted=False,
            returnValue=True,
            scenario="mastervolume_tv_speaker",
            volume=30,
            volumeMax=100,
        )
    )
    tv.set_volume = AsyncMock(return_value=None)
    tv.set_mute = AsyncMock(return_value=None)
    tv.set_power = AsyncMock(return_value=None)
    return tv


@pytest.fixture
def mock_relay():
    """Mock relay board client."""
    relay = MagicMock()
    relay.send = AsyncMock(return_value=None)
    return relay


@pytest.fixture
def resolver(catalog, mock_irrigation, mock_tv) -> DeviceResolver:
    """Resolver wired to the sample catalog and mock backends."""
    return DeviceResolver(catalog, mock_irrigation, mock_tv)


@pytest.fixture
def command_router(catalog, mock_irrigation, mock_tv, mock_relay) -> CommandRouter:
    """Command router wired to the sample catalog and mock backends."""
    return CommandRouter(catalog, mock_irrigation, mock_tv, mock_relay)
