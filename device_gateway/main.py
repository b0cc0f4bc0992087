"""Device gateway FastAPI application.

Main entry point: exposes device commands, listings, self-reported
updates and the smart-home device listing over HTTP.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pythonjsonlogger import jsonlogger

from device_gateway import __version__
from device_gateway.adapters import get_catalog_store
from device_gateway.config import get_config
from device_gateway.routers import devices, health, smart_home


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """Send all log records to stdout.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Emit one JSON object per record; plain text otherwise
    """
    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(
            jsonlogger.JsonFormatter(  # type: ignore[attr-defined]
                "%(asctime)s %(name)s %(levelname)s %(message)s",
                rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
            )
        )
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))

    root_logger = logging.getLogger()
    # Idempotent: repeated startups keep a single handler
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(log_level.upper())

    for noisy in ("httpx", "httpcore", "asyncpg"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager.

    Creates the catalog store on startup and closes it on shutdown.

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    config = get_config()
    setup_logging(config.log_level, config.log_json)
    logger = logging.getLogger(__name__)

    logger.info("Device gateway starting up")
    config.log_status()

    catalog = get_catalog_store(config)
    connect = getattr(catalog, "connect", None)
    if connect is not None:
        await connect()
    app.state.catalog = catalog

    yield

    logger.info("Device gateway shutting down")
    disconnect = getattr(catalog, "disconnect", None)
    if disconnect is not None:
        await disconnect()


app = FastAPI(
    title="Device Gateway",
    description="Uniform device control over relay boards, irrigation hosts and TVs",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().cors_origins,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["*"],
)

app.include_router(devices.router)
app.include_router(smart_home.router)
app.include_router(health.router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint.

    Returns:
        Welcome message with API info
    """
    return {
        "message": "Device Gateway",
        "version": __version__,
        "docs": "/docs",
    }
