"""Tests for irrigation host expansion."""

import pytest

from device_gateway.core.interfaces import TransportError
from device_gateway.core.models import DeviceKind, HardwarePlatform
from device_gateway.services.expansion import expand_host, zone_to_device


def test_zone_to_device(host_device, sample_zones):
    device = zone_to_device(host_device, sample_zones[1])

    assert device.id == f"{host_device.id}-2"
    assert device.address == host_device.address
    assert device.kind == DeviceKind.SPRINKLER
    assert device.hardware == HardwarePlatform.SINGLE_BOARD_COMPUTER
    assert device.state is True
    assert device.sw_version == "2"
    assert device.owner_id == host_device.owner_id
    assert device.name == "Back lawn"
    assert device.nicknames == ["Back lawn", "Zone 2"]


@pytest.mark.asyncio
async def test_expand_host_keeps_host_order(host_device, mock_irrigation):
    devices = await expand_host(mock_irrigation, host_device)

    assert [d.name for d in devices] == ["Front lawn", "Back lawn", "Garden beds"]
    mock_irrigation.list_zones.assert_awaited_once_with("192.168.1.60")


@pytest.mark.asyncio
async def test_expand_host_propagates_transport_error(host_device, mock_irrigation):
    mock_irrigation.list_zones.side_effect = TransportError("refused", "irrigation")

    with pytest.raises(TransportError):
        await expand_host(mock_irrigation, host_device)
