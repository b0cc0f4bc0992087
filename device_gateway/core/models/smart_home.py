"""Smart-home schema models.

The device representation consumed by the voice-assistant integration
(SYNC response device objects). Field names follow the external schema,
so serialize with ``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SmartHomeName(BaseModel):
    """Names the assistant may use for a device."""

    model_config = ConfigDict(populate_by_name=True)

    default_names: list[str] = Field(..., alias="defaultNames")
    name: str
    nicknames: list[str] = Field(default_factory=list)


class SmartHomeDeviceInfo(BaseModel):
    """Manufacturer and version information."""

    model_config = ConfigDict(populate_by_name=True)

    manufacturer: str
    model: str
    hw_version: str = Field(..., alias="hwVersion")
    sw_version: str = Field(..., alias="swVersion")


class SmartHomeDevice(BaseModel):
    """A device as described to the voice assistant."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    traits: list[str]
    name: SmartHomeName
    attributes: dict[str, Any] = Field(default_factory=dict)
    device_info: SmartHomeDeviceInfo = Field(..., alias="deviceInfo")
    will_report_state: bool = Field(default=True, alias="willReportState")

    def to_payload(self) -> dict[str, Any]:
        """Serialize using the external schema's field names."""
        return self.model_dump(by_alias=True)
