"""Health check endpoints.

Liveness answers as long as the process runs; readiness also checks the
device catalog, since no command or listing works without it.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from device_gateway.core.interfaces import CatalogStore, TransportError
from device_gateway.routers.dependencies import get_catalog

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

# Id that is never stored; a lookup only proves the catalog answers
SENTINEL_ID = "__health__"


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness check.

    Returns:
        Status message (200 while the service is running)
    """
    return {"status": "ok"}


@router.get("/health/ready")
async def readiness_check(catalog: CatalogStore = Depends(get_catalog)) -> JSONResponse:
    """Readiness check against the device catalog.

    Returns:
        JSON response with the catalog check result;
        HTTP 200 if the catalog answers, HTTP 503 otherwise
    """
    checks = {
        "api": "ok",
        "catalog": await _check_catalog(catalog),
    }

    all_ok = all(v == "ok" for v in checks.values())
    status_code = status.HTTP_200_OK if all_ok else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        status_code=status_code,
        content={
            "status": "ok" if all_ok else "degraded",
            "checks": checks,
        },
    )


async def _check_catalog(catalog: CatalogStore) -> str:
    """Check the catalog with a lookup.

    Returns:
        "ok" if the catalog answered, error message otherwise
    """
    try:
        await catalog.fetch_by_id(SENTINEL_ID)
    except TransportError as e:
        logger.error(f"Catalog health check failed: {e}")
        return f"error: {str(e)[:50]}"
    return "ok"
