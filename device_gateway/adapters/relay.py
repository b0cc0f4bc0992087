"""Relay board HTTP client.

Relay boards expose ``/on`` and ``/off`` endpoints and take the device
id as the ``param`` query parameter. The response body is not used.
"""

from __future__ import annotations

import logging

import httpx

from device_gateway.core.interfaces import TransportError

logger = logging.getLogger(__name__)


class RelayBoardClient:
    """Client for relay board control URLs."""

    name = "relay"

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize relay board client.

        Args:
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.timeout = timeout
        self._transport = transport

    async def send(self, url: str, param: str) -> None:
        """Issue a control GET.

        Args:
            url: Control URL (e.g. ``http://192.168.1.40/on``)
            param: Device id passed as ``param``

        Raises:
            TransportError: On timeout, connection failure or non-2xx status
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params={"param": param})
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise TransportError(f"Timeout calling {url} (>{self.timeout}s)", self.name) from e
        except httpx.HTTPError as e:
            raise TransportError(f"GET {url} failed: {type(e).__name__}: {e}", self.name) from e

        logger.info(f"Relay {url} accepted param={param} ({response.status_code})")
