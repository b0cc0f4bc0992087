"""Inbound command/update models and command results.

DeviceCommand and DeviceUpdate describe inbound traffic; CommandResult is
what the command router reports back after dispatching a command.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DeviceCommand(BaseModel):
    """Request to change the state of a device.

    ``state`` is a bool for on/off devices and a structured payload for TVs
    (``{"volumeLevel": 20}``, ``{"mute": true}``) or a bare bool for power.

    Examples:
        >>> DeviceCommand(id="rtr1", state=True)
        >>> DeviceCommand.model_validate({"guid": "tv1", "state": {"mute": True}})
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "guid"),
        description="Target device identifier",
    )

    state: bool | dict[str, Any] = Field(..., description="Requested state")


class DeviceUpdate(BaseModel):
    """State a device reports about itself.

    Examples:
        >>> DeviceUpdate(id="sw1", address="192.168.1.40", state=True, sw_version="12")
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "guid"),
        description="Reporting device identifier",
    )

    address: str = Field(
        ...,
        validation_alias=AliasChoices("address", "ip"),
        description="Current network address",
    )

    state: bool = Field(..., description="Current on/off state")

    sw_version: str = Field(
        ...,
        validation_alias=AliasChoices("sw_version", "softwareVersion"),
        description="Running software version",
    )


class CommandResult(BaseModel):
    """Outcome of routing a command to a device backend.

    Attributes:
        success: Whether the backend accepted the command
        device_id: Target device identifier
        message: Human-readable status or error message
        warnings: Non-fatal problems (e.g. persistence failures)
    """

    success: bool = Field(..., description="Whether the command succeeded")

    device_id: str = Field(..., description="Target device identifier")

    message: str | None = Field(default=None, description="Status or error message")

    warnings: list[str] = Field(
        default_factory=list,
        description="Non-fatal problems encountered after dispatch",
    )

    @property
    def status(self) -> str:
        """Wire status string (``ok`` or ``fail``)."""
        return "ok" if self.success else "fail"

    @classmethod
    def success_result(cls, device_id: str, message: str | None = None) -> CommandResult:
        """Create a successful command result.

        Args:
            device_id: Target device identifier
            message: Optional success message

        Returns:
            CommandResult with success=True
        """
        return cls(success=True, device_id=device_id, message=message)

    @classmethod
    def error_result(cls, device_id: str, message: str) -> CommandResult:
        """Create a failed command result.

        Args:
            device_id: Target device identifier
            message: Error message

        Returns:
            CommandResult with success=False
        """
        return cls(success=False, device_id=device_id, message=message)
