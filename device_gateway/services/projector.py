"""Smart-home projection.

Maps canonical devices onto the voice assistant's device schema. Pure
functions: no I/O, identical input gives identical output.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from device_gateway.core.models import (
    Device,
    DeviceKind,
    HardwarePlatform,
    SmartHomeDevice,
    SmartHomeDeviceInfo,
    SmartHomeName,
)

TYPE_PREFIX = "action.devices.types."
TRAIT_PREFIX = "action.devices.traits."

MANUFACTURER = "GTECH"
HW_VERSION = "1.0"
DEFAULT_VOLUME_MAX = 100

DEVICE_TYPES: dict[DeviceKind, str] = {
    DeviceKind.LIGHT: "LIGHT",
    DeviceKind.SWITCH: "SWITCH",
    DeviceKind.IRRIGATION_HOST: "SWITCH",
    DeviceKind.GARAGE: "GARAGE",
    DeviceKind.SPRINKLER: "SPRINKLER",
    DeviceKind.ROUTER: "ROUTER",
    DeviceKind.TV: "TV",
}

ON_OFF_TRAITS = ("OnOff",)

DEVICE_TRAITS: dict[DeviceKind, tuple[str, ...]] = {
    DeviceKind.LIGHT: ON_OFF_TRAITS,
    DeviceKind.SWITCH: ON_OFF_TRAITS,
    DeviceKind.IRRIGATION_HOST: ON_OFF_TRAITS,
    DeviceKind.SPRINKLER: ON_OFF_TRAITS,
    DeviceKind.GARAGE: ("OpenClose",),
    DeviceKind.ROUTER: ("Reboot",),
    DeviceKind.TV: ("OnOff", "Volume"),
}

HARDWARE_MODELS: dict[HardwarePlatform, str] = {
    HardwarePlatform.RELAY_BOARD: "Arduino",
    HardwarePlatform.SINGLE_BOARD_COMPUTER: "Raspberry Pi",
    HardwarePlatform.TV_CONTROLLER: "LG",
    HardwarePlatform.OTHER: "Other",
}


def garage_attributes(device: Device) -> dict[str, Any]:
    """Attributes for garage doors."""
    return {"discreteOnlyOpenClose": True}


def on_off_attributes(device: Device) -> dict[str, Any]:
    """Attributes for devices that switch on and off."""
    return {"commandOnlyOnOff": False, "queryOnlyOnOff": False}


def tv_attributes(device: Device) -> dict[str, Any]:
    """Attributes for TVs; the volume ceiling comes from the live TV state."""
    return {
        **on_off_attributes(device),
        "volumeMaxLevel": device.attributes.get("volumeMax", DEFAULT_VOLUME_MAX),
        "volumeCanMuteAndUnmute": True,
        "commandOnlyVolume": False,
        "volumeDefaultPercentage": 10,
    }


ATTRIBUTE_BUILDERS: dict[DeviceKind, Callable[[Device], dict[str, Any]]] = {
    DeviceKind.LIGHT: on_off_attributes,
    DeviceKind.SWITCH: on_off_attributes,
    DeviceKind.IRRIGATION_HOST: on_off_attributes,
    DeviceKind.SPRINKLER: on_off_attributes,
    DeviceKind.ROUTER: on_off_attributes,
    DeviceKind.GARAGE: garage_attributes,
    DeviceKind.TV: tv_attributes,
}


def project(device: Device) -> SmartHomeDevice:
    """Project a canonical device into the smart-home schema.

    Args:
        device: Canonical device

    Returns:
        SmartHomeDevice; use ``to_payload()`` for the wire representation
    """
    display_name = device.display_name
    return SmartHomeDevice(
        id=device.id,
        type=TYPE_PREFIX + DEVICE_TYPES[device.kind],
        traits=[TRAIT_PREFIX + trait for trait in DEVICE_TRAITS[device.kind]],
        name=SmartHomeName(
            default_names=[display_name],
            name=display_name,
            nicknames=list(device.nicknames),
        ),
        attributes=ATTRIBUTE_BUILDERS[device.kind](device),
        device_info=SmartHomeDeviceInfo(
            manufacturer=MANUFACTURER,
            model=HARDWARE_MODELS[device.hardware],
            hw_version=HW_VERSION,
            sw_version=device.sw_version,
        ),
        will_report_state=True,
    )


def project_all(devices: list[Device]) -> list[dict[str, Any]]:
    """Project devices and serialize them, preserving order."""
    return [project(device).to_payload() for device in devices]
