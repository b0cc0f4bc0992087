"""Protocol definitions for device backends.

The core only talks to these interfaces; concrete adapters live in
``device_gateway.adapters``.
"""

from device_gateway.core.interfaces.backends import (
    CatalogStore,
    DeserializationError,
    GatewayError,
    IrrigationGateway,
    PersistenceError,
    RelayClient,
    TransportError,
    TVAdapter,
)

__all__ = [
    "CatalogStore",
    "DeserializationError",
    "GatewayError",
    "IrrigationGateway",
    "PersistenceError",
    "RelayClient",
    "TransportError",
    "TVAdapter",
]
