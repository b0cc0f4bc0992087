"""TV state and command models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TVVolumeState(BaseModel):
    """Volume report from the TV command-line utility.

    Example payload::

        {"muted": false, "returnValue": true,
         "scenario": "mastervolume_tv_speaker", "volume": 30, "volumeMax": 100}
    """

    model_config = ConfigDict(populate_by_name=True)

    muted: bool = Field(default=False, validation_alias=AliasChoices("muted", "mute"))
    returnValue: bool = Field(default=True)
    scenario: str = Field(default="")
    volume: int = Field(default=0)
    volumeMax: int = Field(default=100)

    def to_state(self) -> dict[str, Any]:
        """Build the canonical state for a TV that is on."""
        return {"on": True, "muted": self.muted, "currentVolume": self.volume}


class TVCommand(BaseModel):
    """Requested TV change.

    At most one field is expected; when several are present the first in
    the order volume, mute, power is applied.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    volume_level: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("volumeLevel", "volume_level"),
    )
    mute: bool | None = Field(default=None)
    power: bool | None = Field(default=None, validation_alias=AliasChoices("power", "on"))
