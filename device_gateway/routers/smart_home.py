"""API router for the voice-assistant device listing."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from device_gateway.core.interfaces import TransportError
from device_gateway.routers.dependencies import get_owner_id, get_resolver, verify_api_key
from device_gateway.services.projector import project_all
from device_gateway.services.resolver import DeviceResolver

logger = logging.getLogger(__name__)
router = APIRouter(tags=["smart-home"])


@router.get("/google", dependencies=[Depends(verify_api_key)])
async def list_smart_home_devices(
    owner_id: str = Depends(get_owner_id),
    resolver: DeviceResolver = Depends(get_resolver),
) -> list[dict[str, Any]]:
    """List the caller's devices in the smart-home schema.

    Irrigation zones follow their host, in the order the host reports them.

    Raises:
        HTTPException: 502 if any backend fails (no partial list)
    """
    try:
        devices = await resolver.resolve_all(owner_id)
    except TransportError as e:
        logger.error(f"Smart-home listing for {owner_id} failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    logger.info(f"Projected {len(devices)} devices for {owner_id}")
    return project_all(devices)
