"""Irrigation host expansion.

An irrigation host is a single catalog record, but each of its zones is
exposed as a device of its own. These helpers turn the zones reported by
the host into canonical devices.
"""

from __future__ import annotations

import logging

from device_gateway.core.identifiers import make_zone_id
from device_gateway.core.interfaces import IrrigationGateway
from device_gateway.core.models import Device, DeviceKind, HardwarePlatform, Zone

logger = logging.getLogger(__name__)


def zone_to_device(host: Device, zone: Zone) -> Device:
    """Convert an irrigation zone into a canonical device.

    Args:
        host: Irrigation host the zone belongs to
        zone: Zone as reported by the host

    Returns:
        Sprinkler device with a composite id, addressed through the host
    """
    return Device(
        id=make_zone_id(host.id, zone.id),
        address=host.address,
        kind=DeviceKind.SPRINKLER,
        hardware=HardwarePlatform.SINGLE_BOARD_COMPUTER,
        state=zone.state,
        sw_version=str(zone.id),
        owner_id=host.owner_id,
        name=zone.name,
        nicknames=[zone.name, f"Zone {zone.system_order + 1}"],
    )


async def expand_host(gateway: IrrigationGateway, host: Device) -> list[Device]:
    """List the zones of an irrigation host as devices.

    Args:
        gateway: Irrigation host client
        host: Irrigation host device

    Returns:
        One device per zone, in the order the host reports them

    Raises:
        TransportError: If the host cannot be reached
    """
    zones = await gateway.list_zones(host.address)
    logger.debug(f"Host {host.id} reported {len(zones)} zones")
    return [zone_to_device(host, zone) for zone in zones]
