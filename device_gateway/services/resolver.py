"""Device resolution.

Turns identifiers into canonical devices: plain identifiers are looked
up in the device catalog and refreshed from stateful backends, composite
zone identifiers are resolved through their irrigation host.
"""

from __future__ import annotations

import logging

from device_gateway.core.identifiers import split_zone_id
from device_gateway.core.interfaces import (
    CatalogStore,
    IrrigationGateway,
    PersistenceError,
    TransportError,
    TVAdapter,
)
from device_gateway.core.models import TV_OFF_STATE, Device, DeviceKind
from device_gateway.services.expansion import expand_host, zone_to_device

logger = logging.getLogger(__name__)


class DeviceResolver:
    """Resolve identifiers into canonical devices.

    Example:
        >>> resolver = DeviceResolver(catalog, irrigation, tv)
        >>> device = await resolver.resolve("rtr1")
        >>> devices = await resolver.resolve_all("user-1")
    """

    def __init__(
        self,
        catalog: CatalogStore,
        irrigation: IrrigationGateway,
        tv: TVAdapter,
    ) -> None:
        """Initialize resolver.

        Args:
            catalog: Device catalog
            irrigation: Irrigation host client
            tv: TV controller
        """
        self.catalog = catalog
        self.irrigation = irrigation
        self.tv = tv

    async def resolve(self, identifier: str) -> Device:
        """Resolve an identifier, falling back to the default device.

        Unknown identifiers and backend failures both yield
        ``Device.default()``.

        Args:
            identifier: Plain device id or composite zone id

        Returns:
            Canonical device
        """
        try:
            device = await self.lookup(identifier)
        except TransportError as e:
            logger.warning(f"Backend failure resolving {identifier}: {e}")
            return Device.default()

        if device is None:
            logger.info(f"No device found for {identifier}")
            return Device.default()
        return device

    async def lookup(self, identifier: str) -> Device | None:
        """Resolve an identifier.

        Args:
            identifier: Plain device id or composite zone id

        Returns:
            Canonical device, or None if nothing matches

        Raises:
            TransportError: If a backend cannot be reached
        """
        zone_ref = split_zone_id(identifier)
        if zone_ref is not None:
            host_id, zone_number = zone_ref
            return await self._lookup_zone(host_id, zone_number)
        return await self._lookup_record(identifier)

    async def resolve_all(self, owner_id: str) -> list[Device]:
        """Resolve every device owned by a user.

        Each irrigation host is immediately followed by its zones, in the
        order the host reports them.

        Args:
            owner_id: Owner identifier

        Returns:
            Devices in catalog order with zones expanded

        Raises:
            TransportError: If any backend call fails; no partial list is returned
        """
        device_ids = await self.catalog.fetch_by_owner(owner_id)
        devices: list[Device] = []

        for device_id in device_ids:
            device = await self._lookup_record(device_id)
            # Unknown ids are skipped rather than listed as default devices
            if device is None:
                logger.warning(f"Owner {owner_id} lists unknown device {device_id}")
                continue

            devices.append(device)
            if device.kind == DeviceKind.IRRIGATION_HOST:
                devices.extend(await expand_host(self.irrigation, device))

        logger.info(f"Resolved {len(devices)} devices for owner {owner_id}")
        return devices

    async def _lookup_zone(self, host_id: str, zone_number: int) -> Device | None:
        """Resolve one zone of an irrigation host."""
        host = await self._lookup_record(host_id)
        if host is None or host.kind != DeviceKind.IRRIGATION_HOST:
            logger.info(f"Zone host {host_id} is not a known irrigation host")
            return None

        zones = await self.irrigation.list_zones(host.address)
        for zone in zones:
            if zone.id == zone_number:
                return zone_to_device(host, zone)

        logger.info(f"Host {host_id} has no zone {zone_number}")
        return None

    async def _lookup_record(self, device_id: str) -> Device | None:
        """Fetch a catalog record and refresh live state where applicable."""
        device = await self.catalog.fetch_by_id(device_id)
        if device is None:
            return None

        if device.kind == DeviceKind.IRRIGATION_HOST:
            await self._refresh_irrigation_host(device)
        elif device.kind == DeviceKind.TV:
            await self._refresh_tv(device)

        return device

    async def _refresh_irrigation_host(self, device: Device) -> None:
        """Poll the host's enabled flag and persist it."""
        device.state = await self.irrigation.get_system_state(device.address)
        try:
            await self.catalog.upsert(device)
        except PersistenceError as e:
            logger.warning(f"Could not persist state of host {device.id}: {e}")

    async def _refresh_tv(self, device: Device) -> None:
        """Merge live volume and mute state into a TV device."""
        if not await self.tv.is_online(device.address):
            logger.debug(f"TV {device.id} is offline")
            device.state = dict(TV_OFF_STATE)
            return

        volume = await self.tv.get_volume()
        device.attributes = {**device.attributes, **volume.model_dump()}
        device.state = volume.to_state()
