"""Gateway data models.

Canonical devices, backend payloads, inbound commands and the
smart-home schema objects the gateway produces.
"""

from device_gateway.core.models.command import CommandResult, DeviceCommand, DeviceUpdate
from device_gateway.core.models.device import (
    TV_OFF_STATE,
    Device,
    DeviceKind,
    HardwarePlatform,
)
from device_gateway.core.models.irrigation import SystemState, Zone, ZoneToggle
from device_gateway.core.models.smart_home import (
    SmartHomeDevice,
    SmartHomeDeviceInfo,
    SmartHomeName,
)
from device_gateway.core.models.tv import TVCommand, TVVolumeState

__all__ = [
    "CommandResult",
    "Device",
    "DeviceCommand",
    "DeviceKind",
    "DeviceUpdate",
    "HardwarePlatform",
    "SmartHomeDevice",
    "SmartHomeDeviceInfo",
    "SmartHomeName",
    "SystemState",
    "TVCommand",
    "TVVolumeState",
    "TV_OFF_STATE",
    "Zone",
    "ZoneToggle",
]
