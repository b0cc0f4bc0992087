"""Core abstractions for the device gateway.

Modules:
    interfaces: Protocol definitions for catalog and device backends
    models: Canonical device, backend payload and smart-home schema models
    identifiers: Composite zone identifier parsing
"""

from device_gateway.core.interfaces import (
    CatalogStore,
    IrrigationGateway,
    RelayClient,
    TVAdapter,
)
from device_gateway.core.models import Device, DeviceKind, HardwarePlatform

__all__ = [
    "CatalogStore",
    "Device",
    "DeviceKind",
    "HardwarePlatform",
    "IrrigationGateway",
    "RelayClient",
    "TVAdapter",
]
