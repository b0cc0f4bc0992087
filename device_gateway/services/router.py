"""Command routing.

Dispatches a requested state change to the protocol that fits the
device kind, then persists the new state in the device catalog.

Protocols by kind:
- SPRINKLER: irrigation host ``PUT /zone``
- SQLSPRINKLER_HOST: irrigation host ``PUT /system/state``
- TV: TV controller (volume, mute or power)
- LIGHT, SWITCH, GARAGE, ROUTER: relay board control GET
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from device_gateway.core.identifiers import is_zone_id, zone_index_from_version
from device_gateway.core.interfaces import (
    CatalogStore,
    DeserializationError,
    IrrigationGateway,
    PersistenceError,
    RelayClient,
    TransportError,
    TVAdapter,
)
from device_gateway.core.models import (
    TV_OFF_STATE,
    CommandResult,
    Device,
    DeviceKind,
    DeviceUpdate,
    HardwarePlatform,
    TVCommand,
)

logger = logging.getLogger(__name__)

# Control URL per hardware platform; platforms without one cannot be switched
CONTROL_URL_TEMPLATES: dict[HardwarePlatform, str] = {
    HardwarePlatform.RELAY_BOARD: "http://{address}/{endpoint}",
}


State = bool | dict[str, Any]
Strategy = Callable[[Device, Any], Awaitable[State]]


def control_url(device: Device, endpoint: str) -> str | None:
    """Build the control URL of a relay-driven device.

    Args:
        device: Target device
        endpoint: ``on`` or ``off``

    Returns:
        URL without query string, or None if the hardware has no control URL
    """
    template = CONTROL_URL_TEMPLATES.get(device.hardware)
    if template is None:
        return None
    return template.format(address=device.address, endpoint=endpoint)


def parse_bool_state(requested_state: Any) -> bool:
    """Validate an on/off request.

    Raises:
        DeserializationError: If the request is not a bool
    """
    if not isinstance(requested_state, bool):
        raise DeserializationError(f"Expected on/off state, got {requested_state!r}")
    return requested_state


def parse_tv_command(requested_state: Any) -> TVCommand:
    """Validate a TV request; a bare bool means power.

    Raises:
        DeserializationError: If the request is neither a bool nor a TV payload
    """
    if isinstance(requested_state, bool):
        return TVCommand(power=requested_state)
    if not isinstance(requested_state, dict):
        raise DeserializationError(f"Expected TV payload, got {requested_state!r}")
    try:
        command = TVCommand.model_validate(requested_state)
    except ValidationError as e:
        raise DeserializationError(f"Invalid TV payload: {e}") from e
    if command.volume_level is None and command.mute is None and command.power is None:
        raise DeserializationError("TV payload sets no field")
    return command


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


class CommandRouter:
    """Route state changes to device backends.

    Example:
        >>> router = CommandRouter(catalog, irrigation, tv, relay)
        >>> result = await router.apply(device, True)
        >>> result.status
        'ok'
    """

    def __init__(
        self,
        catalog: CatalogStore,
        irrigation: IrrigationGateway,
        tv: TVAdapter,
        relay: RelayClient,
    ) -> None:
        """Initialize router.

        Args:
            catalog: Device catalog
            irrigation: Irrigation host client
            tv: TV controller
            relay: Relay board client
        """
        self.catalog = catalog
        self.irrigation = irrigation
        self.tv = tv
        self.relay = relay
        self._strategies: dict[DeviceKind, Strategy] = {
            DeviceKind.SPRINKLER: self._apply_zone,
            DeviceKind.IRRIGATION_HOST: self._apply_irrigation_host,
            DeviceKind.TV: self._apply_tv,
            DeviceKind.LIGHT: self._apply_relay,
            DeviceKind.SWITCH: self._apply_relay,
            DeviceKind.GARAGE: self._apply_relay,
            DeviceKind.ROUTER: self._apply_relay,
        }

    async def apply(self, device: Device, requested_state: Any) -> CommandResult:
        """Apply a requested state to a device.

        Args:
            device: Resolved target device
            requested_state: bool, or TV payload for TVs

        Returns:
            CommandResult; backend failures yield success=False

        Raises:
            DeserializationError: If the request does not fit the device kind
        """
        strategy = self._strategies[device.kind]
        logger.info(f"Routing {device.kind.value} command to {device.id}")

        try:
            new_state = await strategy(device, requested_state)
        except TransportError as e:
            logger.error(f"Command to {device.id} failed: {e}")
            return CommandResult.error_result(device.id, str(e))

        result = CommandResult.success_result(device.id)
        # Composite zone ids are derived from their host and have no catalog record
        if not is_zone_id(device.id):
            warning = await self._persist(device, new_state)
            if warning:
                result.warnings.append(warning)
        return result

    async def record_update(self, update: DeviceUpdate) -> bool:
        """Store the state a device reports about itself.

        Args:
            update: Self-reported state

        Returns:
            True if the catalog record was updated, False if the device is
            unknown or the write failed
        """
        device = await self.catalog.fetch_by_id(update.id)
        if device is None:
            logger.warning(f"Update from unknown device {update.id}")
            return False

        device.state = update.state
        device.address = update.address
        device.sw_version = update.sw_version
        device.last_seen = _timestamp()
        try:
            return await self.catalog.upsert(device)
        except PersistenceError as e:
            logger.error(f"Could not record update from {update.id}: {e}")
            return False

    async def _apply_zone(self, device: Device, requested_state: Any) -> State:
        state = parse_bool_state(requested_state)
        index = zone_index_from_version(device.sw_version)
        await self.irrigation.set_zone(device.address, state, index)
        return state

    async def _apply_irrigation_host(self, device: Device, requested_state: Any) -> State:
        state = parse_bool_state(requested_state)
        await self.irrigation.set_system(device.address, state)
        return state

    async def _apply_tv(self, device: Device, requested_state: Any) -> State:
        command = parse_tv_command(requested_state)
        state = dict(device.state) if isinstance(device.state, dict) else dict(TV_OFF_STATE)

        if command.volume_level is not None:
            await self.tv.set_volume(command.volume_level)
            state["currentVolume"] = command.volume_level
        elif command.mute is not None:
            await self.tv.set_mute(command.mute)
            state["muted"] = command.mute
        else:
            await self.tv.set_power(bool(command.power))
            state["on"] = bool(command.power)
        return state

    async def _apply_relay(self, device: Device, requested_state: Any) -> State:
        state = parse_bool_state(requested_state)
        endpoint = "on" if state else "off"
        url = control_url(device, endpoint)
        if url is None:
            raise TransportError(
                f"No control URL for hardware {device.hardware.value}", backend="relay"
            )
        await self.relay.send(url, device.id)
        return state

    async def _persist(self, device: Device, state: State) -> str | None:
        """Write the new state back; returns a warning instead of raising."""
        device.state = state
        device.last_seen = _timestamp()
        try:
            written = await self.catalog.upsert(device)
        except PersistenceError as e:
            logger.warning(f"Command applied but state of {device.id} not persisted: {e}")
            return f"State not persisted: {e}"

        if not written:
            logger.warning(f"Command applied but catalog wrote no record for {device.id}")
            return "State not persisted"
        return None
