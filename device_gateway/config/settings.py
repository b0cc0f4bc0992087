"""Application configuration.

Settings are read from environment variables (and an optional ``.env``
file). Field names map to upper-case variables, e.g. ``CATALOG_BACKEND``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Gateway configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Structured JSON log output")

    # Device catalog
    catalog_backend: Literal["memory", "postgres", "firebase"] = Field(
        default="memory",
        description="Device catalog implementation",
    )
    catalog_seed_path: str | None = Field(
        default=None,
        description="YAML file seeding the in-memory catalog",
    )
    postgres_host: str = Field(default="localhost")
    postgres_port: int = Field(default=5432)
    postgres_user: str = Field(default="automation")
    postgres_password: str = Field(default="changeme")
    postgres_db: str = Field(default="automation")
    document_store_url: str | None = Field(
        default=None,
        description="Base URL of the remote JSON document store",
    )
    document_store_token: str | None = Field(
        default=None,
        description="Auth token appended to document store requests",
    )

    # Device backends
    irrigation_port: int = Field(default=3030, description="Irrigation host API port")
    backend_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for every backend call",
    )
    tv_command: str = Field(
        default="upstairs-tv",
        description="Command-line utility controlling the TV",
    )
    tv_address: str | None = Field(
        default=None,
        description="TV address used when the catalog record has none",
    )

    # HTTP surface
    api_key: str | None = Field(
        default=None,
        description="Shared key required in x-api-key when set",
    )
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    def log_status(self) -> None:
        """Log the effective configuration (without secrets)."""
        logger.info(f"Catalog backend: {self.catalog_backend}")
        logger.info(f"Irrigation port: {self.irrigation_port}")
        logger.info(f"Backend timeout: {self.backend_timeout}s")
        logger.info(f"TV command: {self.tv_command}")
        logger.info(f"API key check: {'enabled' if self.api_key else 'disabled'}")


@lru_cache
def get_config() -> Config:
    """Get the application configuration.

    Returns:
        Config singleton loaded from the environment
    """
    return Config()
