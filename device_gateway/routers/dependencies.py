"""Shared dependencies for API routers.

FastAPI dependency injection functions that build the resolver and the
command router from the configured backends.
"""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException, Request, status

from device_gateway.adapters.irrigation import IrrigationClient
from device_gateway.adapters.relay import RelayBoardClient
from device_gateway.adapters.tv import CommandLineTV
from device_gateway.config import Config, get_config
from device_gateway.core.interfaces import (
    CatalogStore,
    IrrigationGateway,
    RelayClient,
    TVAdapter,
)
from device_gateway.services.resolver import DeviceResolver
from device_gateway.services.router import CommandRouter


def get_catalog(request: Request) -> CatalogStore:
    """Dependency to get the catalog store created at startup.

    Args:
        request: FastAPI request object

    Returns:
        CatalogStore from application state
    """
    return request.app.state.catalog


def get_irrigation(config: Config = Depends(get_config)) -> IrrigationGateway:
    """Dependency to get the irrigation host client."""
    return IrrigationClient(port=config.irrigation_port, timeout=config.backend_timeout)


def get_tv(config: Config = Depends(get_config)) -> TVAdapter:
    """Dependency to get the TV adapter."""
    return CommandLineTV(
        command=config.tv_command,
        timeout=config.backend_timeout,
        default_address=config.tv_address,
    )


def get_relay(config: Config = Depends(get_config)) -> RelayClient:
    """Dependency to get the relay board client."""
    return RelayBoardClient(timeout=config.backend_timeout)


def get_resolver(
    catalog: CatalogStore = Depends(get_catalog),
    irrigation: IrrigationGateway = Depends(get_irrigation),
    tv: TVAdapter = Depends(get_tv),
) -> DeviceResolver:
    """Dependency to get the device resolver.

    Args:
        catalog: Device catalog
        irrigation: Irrigation host client
        tv: TV adapter

    Returns:
        DeviceResolver wired to the configured backends
    """
    return DeviceResolver(catalog, irrigation, tv)


def get_command_router(
    catalog: CatalogStore = Depends(get_catalog),
    irrigation: IrrigationGateway = Depends(get_irrigation),
    tv: TVAdapter = Depends(get_tv),
    relay: RelayClient = Depends(get_relay),
) -> CommandRouter:
    """Dependency to get the command router.

    Args:
        catalog: Device catalog
        irrigation: Irrigation host client
        tv: TV adapter
        relay: Relay board client

    Returns:
        CommandRouter wired to the configured backends
    """
    return CommandRouter(catalog, irrigation, tv, relay)


def verify_api_key(
    x_api_key: str | None = Header(default=None),
    config: Config = Depends(get_config),
) -> None:
    """Reject requests without the shared key when one is configured.

    Raises:
        HTTPException: 401 if the key is missing or wrong
    """
    if config.api_key and x_api_key != config.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def get_owner_id(x_auth_id: str | None = Header(default=None)) -> str:
    """Owner whose devices are listed, taken from ``x-auth-id``.

    Raises:
        HTTPException: 400 if the header is missing
    """
    if not x_auth_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing x-auth-id header")
    return x_auth_id
