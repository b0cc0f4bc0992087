"""Concrete backend adapters.

Catalog stores (memory, PostgreSQL, remote document store) and device
clients (irrigation hosts, relay boards, TV).
"""

from __future__ import annotations

import logging

from device_gateway.config import Config
from device_gateway.core.interfaces import CatalogStore

logger = logging.getLogger(__name__)


def get_catalog_store(config: Config) -> CatalogStore:
    """Factory function to get the configured catalog store.

    PostgreSQL catalogs still need ``await catalog.connect()``.

    Args:
        config: Application configuration

    Returns:
        CatalogStore instance

    Raises:
        ValueError: If the backend is configured incompletely
    """
    backend = config.catalog_backend

    if backend == "postgres":
        from device_gateway.adapters.postgres import PostgresCatalog
        logger.info(f"Using PostgreSQL catalog at {config.postgres_host}:{config.postgres_port}")
        return PostgresCatalog(
            host=config.postgres_host,
            port=config.postgres_port,
            user=config.postgres_user,
            password=config.postgres_password,
            database=config.postgres_db,
            timeout=config.backend_timeout,
        )

    elif backend == "firebase":
        from device_gateway.adapters.document_store import DocumentStoreCatalog
        if not config.document_store_url:
            raise ValueError("DOCUMENT_STORE_URL is required when CATALOG_BACKEND=firebase")
        logger.info(f"Using document store catalog at {config.document_store_url}")
        return DocumentStoreCatalog(
            base_url=config.document_store_url,
            token=config.document_store_token,
            timeout=config.backend_timeout,
        )

    else:
        from device_gateway.adapters.memory import InMemoryCatalog
        if config.catalog_seed_path:
            return InMemoryCatalog.from_yaml(config.catalog_seed_path)
        logger.info("Using in-memory catalog with demo devices")
        return InMemoryCatalog()
