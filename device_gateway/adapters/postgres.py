"""PostgreSQL device catalog.

Stores one row per device in the ``devices`` table (see
``device_gateway/migrations/``).
Structured values (state, nicknames, attributes) are kept as JSON text.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import asyncpg
from asyncpg import Pool
from pydantic import ValidationError

from device_gateway.core.interfaces import PersistenceError, TransportError
from device_gateway.core.models import Device

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent.parent / "migrations"

_COLUMNS = "guid, ip, kind, hardware, last_state, last_seen, sw_version, useruuid, name, nicknames, attributes"


def row_to_device(row: Any) -> Device:
    """Convert a ``devices`` row into a Device."""
    return Device(
        id=row["guid"],
        address=row["ip"] or "",
        kind=row["kind"],
        hardware=row["hardware"],
        state=json.loads(row["last_state"]) if row["last_state"] else False,
        last_seen=row["last_seen"] or "",
        sw_version=row["sw_version"] or "0",
        owner_id=row["useruuid"] or "",
        name=row["name"] or "",
        nicknames=json.loads(row["nicknames"]) if row["nicknames"] else [row["name"] or ""],
        attributes=json.loads(row["attributes"]) if row["attributes"] else {},
    )


def device_to_params(device: Device) -> tuple[Any, ...]:
    """Convert a Device into ``devices`` column values."""
    return (
        device.id,
        device.address,
        device.kind.value,
        device.hardware.value,
        json.dumps(device.state),
        device.last_seen,
        device.sw_version,
        device.owner_id,
        device.name,
        json.dumps(device.nicknames),
        json.dumps(device.attributes),
    )


class PostgresCatalog:
    """Device catalog backed by a PostgreSQL table."""

    name = "postgres"

    def __init__(
        self,
        host: str = "localhost",
        port: int = 5432,
        user: str = "automation",
        password: str = "changeme",
        database: str = "automation",
        timeout: float = 10.0,
    ) -> None:
        """Initialize catalog (call ``connect()`` before use).

        Args:
            host: Database host
            port: Database port
            user: Database user
            password: Database password
            database: Database name
            timeout: Connection and command timeout in seconds
        """
        self.pool: Pool | None = None
        self.timeout = timeout
        self._config = {
            "host": host,
            "port": port,
            "user": user,
            "password": password,
            "database": database,
        }

    async def connect(self) -> None:
        """Create the connection pool and apply migrations."""
        if self.pool is not None:
            return

        try:
            self.pool = await asyncpg.create_pool(
                **self._config,
                min_size=1,
                max_size=10,
                timeout=self.timeout,
                command_timeout=self.timeout,
            )
            logger.info("Catalog database connection pool created")
            await self._run_migrations()
        except (OSError, asyncpg.PostgresError) as e:
            logger.error(f"Failed to connect to catalog database: {e}")
            raise TransportError(f"Cannot connect to database: {e}", self.name) from e

    async def disconnect(self) -> None:
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Catalog database connection pool closed")

    async def _run_migrations(self) -> None:
        """Apply pending ``*.sql`` files in name order, each in its own transaction."""
        if not self.pool:
            return

        migrations = sorted(MIGRATIONS_DIR.glob("*.sql"))
        if not migrations:
            logger.warning(f"No catalog migrations found in {MIGRATIONS_DIR}")
            return

        async with self.pool.acquire() as conn:
            await conn.execute(
                "CREATE TABLE IF NOT EXISTS catalog_migrations ("
                " filename TEXT PRIMARY KEY,"
                " applied_at TIMESTAMPTZ NOT NULL DEFAULT now())"
            )
            done = {r["filename"] for r in await conn.fetch("SELECT filename FROM catalog_migrations")}

            for path in migrations:
                if path.name in done:
                    continue
                logger.info(f"Applying catalog migration {path.name}")
                async with conn.transaction():
                    await conn.execute(path.read_text(encoding="utf-8"))
                    await conn.execute(
                        "INSERT INTO catalog_migrations (filename) VALUES ($1)", path.name
                    )

    def _require_pool(self) -> Pool:
        if not self.pool:
            raise TransportError("Database not connected", self.name)
        return self.pool

    async def fetch_by_id(self, device_id: str) -> Device | None:
        """Fetch a device row by guid."""
        pool = self._require_pool()
        try:
            async with pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"SELECT {_COLUMNS} FROM devices WHERE guid = $1",
                    device_id,
                )
        except (OSError, asyncpg.PostgresError) as e:
            raise TransportError(f"Query for {device_id} failed: {e}", self.name) from e

        if row is None:
            return None
        try:
            return row_to_device(row)
        except (ValueError, ValidationError) as e:
            raise TransportError(f"Invalid device row {device_id}: {e}", self.name) from e

    async def fetch_by_owner(self, owner_id: str) -> list[str]:
        """List guids owned by a user, oldest record first."""
        pool = self._require_pool()
        try:
            async with pool.acquire() as conn:
                rows = await conn.fetch(
                    "SELECT guid FROM devices WHERE useruuid = $1 ORDER BY created_at, guid",
                    owner_id,
                )
        except (OSError, asyncpg.PostgresError) as e:
            raise TransportError(f"Query for owner {owner_id} failed: {e}", self.name) from e

        return [row["guid"] for row in rows]

    async def upsert(self, device: Device) -> bool:
        """Insert or update a device row."""
        pool = self._require_pool()
        try:
            async with pool.acquire() as conn:
                status = await conn.execute(
                    f"""
                    INSERT INTO devices ({_COLUMNS})
                    VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11)
                    ON CONFLICT (guid) DO UPDATE SET
                        ip = EXCLUDED.ip,
                        kind = EXCLUDED.kind,
                        hardware = EXCLUDED.hardware,
                        last_state = EXCLUDED.last_state,
                        last_seen = EXCLUDED.last_seen,
                        sw_version = EXCLUDED.sw_version,
                        useruuid = EXCLUDED.useruuid,
                        name = EXCLUDED.name,
                        nicknames = EXCLUDED.nicknames,
                        attributes = EXCLUDED.attributes
                    """,
                    *device_to_params(device),
                )
        except (OSError, asyncpg.PostgresError) as e:
            raise PersistenceError(f"Upsert of {device.id} failed: {e}", self.name) from e

        # status is e.g. "INSERT 0 1"
        return status.split()[-1] != "0"
