"""API router for device commands, listings and self-reported updates."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from device_gateway.core.interfaces import DeserializationError, TransportError
from device_gateway.core.models import Device, DeviceCommand, DeviceUpdate
from device_gateway.routers.dependencies import (
    get_command_router,
    get_owner_id,
    get_resolver,
    verify_api_key,
)
from device_gateway.services.resolver import DeviceResolver
from device_gateway.services.router import CommandRouter

logger = logging.getLogger(__name__)
router = APIRouter(tags=["devices"])

UPDATED = "updated"
UPDATE_FAILED = "an error occurred."


@router.post(
    "/device",
    response_class=PlainTextResponse,
    dependencies=[Depends(verify_api_key)],
)
async def send_command(
    command: DeviceCommand,
    resolver: DeviceResolver = Depends(get_resolver),
    command_router: CommandRouter = Depends(get_command_router),
) -> PlainTextResponse:
    """Change the state of a device.

    Returns:
        ``ok`` or ``fail``; 400 ``fail`` if the state does not fit the device
    """
    device = await resolver.resolve(command.id)
    try:
        result = await command_router.apply(device, command.state)
    except DeserializationError as e:
        logger.warning(f"Rejected command for {command.id}: {e}")
        return PlainTextResponse("fail", status_code=status.HTTP_400_BAD_REQUEST)

    for warning in result.warnings:
        logger.warning(f"Command for {command.id}: {warning}")
    return PlainTextResponse(result.status)


@router.get(
    "/device",
    response_model=list[Device],
    dependencies=[Depends(verify_api_key)],
)
async def list_devices(
    owner_id: str = Depends(get_owner_id),
    resolver: DeviceResolver = Depends(get_resolver),
) -> list[Device]:
    """List the caller's devices with irrigation zones expanded.

    Raises:
        HTTPException: 502 if any backend fails (no partial list)
    """
    try:
        return await resolver.resolve_all(owner_id)
    except TransportError as e:
        logger.error(f"Listing devices for {owner_id} failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@router.get(
    "/device/{device_id}",
    response_model=Device,
    dependencies=[Depends(verify_api_key)],
)
async def get_device(
    device_id: str,
    resolver: DeviceResolver = Depends(get_resolver),
) -> Device:
    """Get one device; unknown ids yield the default (blank) device."""
    return await resolver.resolve(device_id)


@router.put("/device", response_class=PlainTextResponse)
async def update_device(
    update: DeviceUpdate,
    command_router: CommandRouter = Depends(get_command_router),
) -> PlainTextResponse:
    """Record the state a device reports about itself (JSON body)."""
    recorded = await command_router.record_update(update)
    return PlainTextResponse(UPDATED if recorded else UPDATE_FAILED)


@router.put("/update", response_class=PlainTextResponse)
async def update_device_form(
    guid: str = Form(...),
    ip: str = Form(...),
    state: str = Form(...),
    sw_version: str = Form(...),
    command_router: CommandRouter = Depends(get_command_router),
) -> PlainTextResponse:
    """Record a self-reported update sent as a form by relay boards."""
    try:
        update = DeviceUpdate(id=guid, address=ip, state=state, sw_version=sw_version)
    except ValidationError as e:
        logger.warning(f"Rejected form update from {guid}: {e}")
        return PlainTextResponse(UPDATE_FAILED, status_code=status.HTTP_400_BAD_REQUEST)

    recorded = await command_router.record_update(update)
    return PlainTextResponse(UPDATED if recorded else UPDATE_FAILED)
