"""Irrigation host HTTP client.

Talks to the API an irrigation host serves on port 3030:

- ``GET /zone/info``: list zones
- ``PUT /zone``: open or close one zone
- ``GET /system/state`` / ``PUT /system/state``: system enabled flag
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from device_gateway.core.interfaces import TransportError
from device_gateway.core.models import SystemState, Zone, ZoneToggle

logger = logging.getLogger(__name__)

_zone_list = TypeAdapter(list[Zone])


class IrrigationClient:
    """Client for irrigation host APIs.

    Example:
        >>> client = IrrigationClient(port=3030, timeout=10.0)
        >>> zones = await client.list_zones("192.168.1.60")
        >>> await client.set_zone("192.168.1.60", True, 0)
    """

    name = "irrigation"

    def __init__(
        self,
        port: int = 3030,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize irrigation client.

        Args:
            port: Port the host API listens on
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.port = port
        self.timeout = timeout
        self._transport = transport

    def _url(self, address: str, path: str) -> str:
        return f"http://{address}:{self.port}{path}"

    async def _request(
        self,
        method: str,
        address: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request to a host and check the status.

        Raises:
            TransportError: On timeout, connection failure or non-2xx status
        """
        url = self._url(address, path)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.request(method, url, json=payload)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise TransportError(f"Timeout calling {url} (>{self.timeout}s)", self.name) from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {type(e).__name__}: {e}", self.name) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    async def list_zones(self, address: str) -> list[Zone]:
        """List the zones of a host.

        Args:
            address: Host address

        Returns:
            Zones in the order the host reports them

        Raises:
            TransportError: If the host is unreachable or answers garbage
        """
        response = await self._request("GET", address, "/zone/info")
        try:
            return _zone_list.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise TransportError(f"Invalid zone list from {address}: {e}", self.name) from e

    async def get_system_state(self, address: str) -> bool:
        """Get whether the irrigation system is enabled.

        Raises:
            TransportError: If the host is unreachable or answers garbage
        """
        response = await self._request("GET", address, "/system/state")
        try:
            return SystemState.model_validate(response.json()).system_enabled
        except (ValueError, ValidationError) as e:
            raise TransportError(f"Invalid system state from {address}: {e}", self.name) from e

    async def set_system(self, address: str, state: bool) -> None:
        """Enable or disable the irrigation system."""
        logger.info(f"Setting irrigation system at {address} to {state}")
        await self._request(
            "PUT",
            address,
            "/system/state",
            SystemState(system_enabled=state).model_dump(),
        )

    async def set_zone(self, address: str, state: bool, index: int) -> None:
        """Open or close a zone.

        Args:
            address: Host address
            state: True to open the valve
            index: Zero-based zone index
        """
        logger.info(f"Setting zone {index} at {address} to {state}")
        await self._request(
            "PUT",
            address,
            "/zone",
            ZoneToggle(id=index, state=state).model_dump(),
        )
