"""Irrigation host payload models.

Mirror the JSON exchanged with an irrigation host's HTTP API.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Zone(BaseModel):
    """A single irrigation zone as reported by ``GET /zone/info``.

    Examples:
        >>> Zone(name="Front lawn", gpio=17, time=10, enabled=True,
        ...      auto_off=True, system_order=0, state=False, id=1)
    """

    name: str = Field(..., description="Zone name")
    gpio: int = Field(..., description="GPIO pin driving the valve")
    time: int = Field(..., description="Run time in minutes")
    enabled: bool = Field(..., description="Whether the zone takes part in schedules")
    auto_off: bool = Field(..., description="Whether the zone switches itself off")
    system_order: int = Field(..., description="Position of the zone in the system")
    state: bool = Field(..., description="Whether the valve is currently open")
    id: int = Field(..., description="Zone identifier on the host")


class SystemState(BaseModel):
    """Irrigation system enabled flag (``/system/state``)."""

    system_enabled: bool


class ZoneToggle(BaseModel):
    """Body of ``PUT /zone``."""

    id: int
    state: bool
