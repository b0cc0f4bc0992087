"""Backend adapter protocol definitions.

Defines the interfaces the core talks to: the device catalog, the
irrigation host API, the TV controller and relay boards. Using Protocol
allows structural subtyping, so adapters and test fakes need no common
base class.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from device_gateway.core.models.device import Device
from device_gateway.core.models.irrigation import Zone
from device_gateway.core.models.tv import TVVolumeState


@runtime_checkable
class CatalogStore(Protocol):
    """Persisted device catalog.

    Implementations: PostgreSQL table, remote JSON document store and an
    in-memory store. The core treats them identically.
    """

    @abstractmethod
    async def fetch_by_id(self, device_id: str) -> Device | None:
        """Fetch a device record.

        Args:
            device_id: Device identifier

        Returns:
            Device if stored, None otherwise

        Raises:
            TransportError: If the store cannot be reached
        """
        ...

    @abstractmethod
    async def fetch_by_owner(self, owner_id: str) -> list[str]:
        """List the identifiers of devices owned by a user.

        Args:
            owner_id: Owner identifier

        Returns:
            Device identifiers in catalog order

        Raises:
            TransportError: If the store cannot be reached
        """
        ...

    @abstractmethod
    async def upsert(self, device: Device) -> bool:
        """Insert or update a device record.

        Args:
            device: Device to persist

        Returns:
            True if a record was written

        Raises:
            PersistenceError: If the write fails
        """
        ...


@runtime_checkable
class IrrigationGateway(Protocol):
    """HTTP API of an irrigation host."""

    @abstractmethod
    async def list_zones(self, address: str) -> list[Zone]:
        """List the zones of the host at ``address``, in host order."""
        ...

    @abstractmethod
    async def get_system_state(self, address: str) -> bool:
        """Get whether the irrigation system is enabled."""
        ...

    @abstractmethod
    async def set_system(self, address: str, state: bool) -> None:
        """Enable or disable the irrigation system."""
        ...

    @abstractmethod
    async def set_zone(self, address: str, state: bool, index: int) -> None:
        """Open or close a single zone."""
        ...


@runtime_checkable
class TVAdapter(Protocol):
    """Controller for the TV."""

    @abstractmethod
    async def is_online(self, address: str) -> bool:
        """Check whether the TV answers on the network."""
        ...

    @abstractmethod
    async def get_volume(self) -> TVVolumeState:
        """Get the current volume and mute state."""
        ...

    @abstractmethod
    async def set_volume(self, level: int) -> None:
        """Set the volume level."""
        ...

    @abstractmethod
    async def set_mute(self, mute: bool) -> None:
        """Mute or unmute."""
        ...

    @abstractmethod
    async def set_power(self, power: bool) -> None:
        """Switch the TV on or off."""
        ...


@runtime_checkable
class RelayClient(Protocol):
    """Client for relay-board control URLs."""

    @abstractmethod
    async def send(self, url: str, param: str) -> None:
        """Issue the control GET to ``url`` with ``param`` as query parameter.

        Raises:
            TransportError: If the board is unreachable or answers non-2xx
        """
        ...


class GatewayError(Exception):
    """Base exception for gateway errors."""

    def __init__(self, message: str, backend: str | None = None) -> None:
        """Initialize gateway error.

        Args:
            message: Error description
            backend: Backend name (optional)
        """
        self.backend = backend
        super().__init__(f"[{backend}] {message}" if backend else message)


class TransportError(GatewayError):
    """Raised when a backend is unreachable, times out or answers non-2xx."""

    pass


class DeserializationError(GatewayError):
    """Raised when an inbound request or seed record cannot be parsed."""

    pass


class PersistenceError(GatewayError):
    """Raised when the device catalog rejects a write."""

    pass
