"""Remote JSON document store catalog.

Works against a Firebase-style realtime database REST API:

- ``GET/PUT {base}/devices/{id}.json``: device document
- ``GET {base}/owners/{owner}/devices.json``: list of owned device ids

Missing documents are returned as JSON ``null``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from device_gateway.core.interfaces import PersistenceError, TransportError
from device_gateway.core.models import Device

logger = logging.getLogger(__name__)


class DocumentStoreCatalog:
    """Device catalog stored in a remote JSON document store."""

    name = "firebase"

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize document store catalog.

        Args:
            base_url: Database root URL
            token: Auth token sent as the ``auth`` query parameter
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._transport = transport

    def _params(self) -> dict[str, str]:
        return {"auth": self.token} if self.token else {}

    async def _get(self, path: str) -> Any:
        """GET a document.

        Raises:
            TransportError: On timeout, connection failure, non-2xx or non-JSON
        """
        url = f"{self.base_url}/{path}.json"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=self._params())
                response.raise_for_status()
            return response.json()
        except httpx.TimeoutException as e:
            raise TransportError(f"Timeout reading {path} (>{self.timeout}s)", self.name) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Reading {path} failed: {type(e).__name__}: {e}", self.name) from e
        except ValueError as e:
            raise TransportError(f"Document {path} is not JSON", self.name) from e

    async def fetch_by_id(self, device_id: str) -> Device | None:
        """Fetch a device document."""
        data = await self._get(f"devices/{device_id}")
        if data is None:
            return None
        try:
            return Device.model_validate({"id": device_id, **data})
        except (TypeError, ValidationError) as e:
            raise TransportError(f"Invalid device document {device_id}: {e}", self.name) from e

    async def fetch_by_owner(self, owner_id: str) -> list[str]:
        """List ids owned by a user, in stored order."""
        data = await self._get(f"owners/{owner_id}/devices")
        if data is None:
            return []
        # Sparse arrays and pushed lists come back as objects, keys in order
        if isinstance(data, dict):
            data = list(data.values())
        return [str(device_id) for device_id in data if device_id]

    async def upsert(self, device: Device) -> bool:
        """Write a device document."""
        url = f"{self.base_url}/devices/{device.id}.json"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.put(
                    url,
                    params=self._params(),
                    json=device.model_dump(mode="json"),
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise PersistenceError(f"Writing device {device.id} failed: {e}", self.name) from e

        logger.debug(f"Stored device document {device.id}")
        return True
