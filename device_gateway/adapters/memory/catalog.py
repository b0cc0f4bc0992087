"""In-memory device catalog.

Keeps device records in a dict, optionally seeded from a YAML file.
Used for development and tests; records are lost on restart.

Seed file format::

    devices:
      - id: rtr1
        address: 192.168.1.1
        kind: ROUTER
        hardware: OTHER
        owner_id: user-1
        name: Basement Router
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from device_gateway.core.interfaces import DeserializationError
from device_gateway.core.models import Device

from .fixtures import DEFAULT_DEVICES

logger = logging.getLogger(__name__)


class InMemoryCatalog:
    """Device catalog held in process memory.

    Records are kept in insertion order, which is also the order
    ``fetch_by_owner`` reports them in.

    Attributes:
        devices: Dict mapping device id to its record
    """

    name = "memory"

    def __init__(self, devices: list[Device] | None = None) -> None:
        """Initialize catalog.

        Args:
            devices: Initial records (default: DEFAULT_DEVICES)
        """
        initial = DEFAULT_DEVICES if devices is None else devices
        self.devices: dict[str, Device] = {
            d.id: d.model_copy(deep=True) for d in initial
        }
        logger.info(f"InMemoryCatalog initialized with {len(self.devices)} devices")

    @classmethod
    def from_yaml(cls, path: str | Path) -> InMemoryCatalog:
        """Create a catalog seeded from a YAML file.

        Args:
            path: Seed file path

        Returns:
            Seeded catalog

        Raises:
            FileNotFoundError: If the file does not exist
            DeserializationError: If a record is invalid
        """
        logger.info(f"Loading device catalog seed from: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        try:
            devices = [Device.model_validate(raw) for raw in data.get("devices", [])]
        except ValidationError as e:
            raise DeserializationError(f"Invalid device in {path}: {e}", "memory") from e
        return cls(devices)

    async def fetch_by_id(self, device_id: str) -> Device | None:
        """Get a copy of a record, or None if unknown."""
        device = self.devices.get(device_id)
        if device is None:
            return None
        return device.model_copy(deep=True)

    async def fetch_by_owner(self, owner_id: str) -> list[str]:
        """List ids of devices owned by a user, in insertion order."""
        return [d.id for d in self.devices.values() if d.owner_id == owner_id]

    async def upsert(self, device: Device) -> bool:
        """Store a copy of the record."""
        self.devices[device.id] = device.model_copy(deep=True)
        return True

    def snapshot(self) -> dict[str, Device]:
        """Copy of all records (for inspection in tests)."""
        return copy.deepcopy(self.devices)
