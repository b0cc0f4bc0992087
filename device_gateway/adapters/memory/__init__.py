"""In-memory device catalog for development and testing.

Usage:
    >>> from device_gateway.adapters.memory import InMemoryCatalog
    >>> catalog = InMemoryCatalog.from_yaml("config/devices.yaml")
    >>> device = await catalog.fetch_by_id("rtr1")
"""

from device_gateway.adapters.memory.catalog import InMemoryCatalog
from device_gateway.adapters.memory.fixtures import DEFAULT_DEVICES, DEMO_OWNER

__all__ = [
    "DEFAULT_DEVICES",
    "DEMO_OWNER",
    "InMemoryCatalog",
]
