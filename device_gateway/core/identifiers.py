"""Composite zone identifier helpers.

An irrigation zone has no catalog record of its own. It is addressed by
its host's identifier (a UUID) followed by ``-`` and a single digit zone
number, e.g. ``0f8fad5b-d9cb-469f-a165-70867728950e-3``.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

ZONE_ID_PATTERN = re.compile(
    r"^[0-9A-Fa-f]{8}-?(?:[0-9A-Fa-f]{4}-?){3}[0-9A-Fa-f]{12}-[0-9]$"
)


def is_zone_id(identifier: str) -> bool:
    """Check if an identifier addresses an irrigation zone.

    Args:
        identifier: Device identifier

    Returns:
        True if the identifier is a composite zone id
    """
    return ZONE_ID_PATTERN.match(identifier) is not None


def split_zone_id(identifier: str) -> tuple[str, int] | None:
    """Split a composite zone id into host id and zone number.

    Args:
        identifier: Device identifier

    Returns:
        ``(host_id, zone_number)``, or None if the identifier is not a zone id
    """
    if not is_zone_id(identifier):
        return None
    host_id, _, zone = identifier.rpartition("-")
    return host_id, int(zone)


def make_zone_id(host_id: str, zone_id: int) -> str:
    """Build the composite id of a zone."""
    return f"{host_id}-{zone_id}"


def zone_index_from_version(sw_version: str) -> int:
    """Derive the zero-based index a zone is switched by.

    Zone devices carry their one-based zone number in ``sw_version``.
    Anything that does not parse as an integer maps to index 0.

    Args:
        sw_version: Software version field of a zone device

    Returns:
        Zero-based zone index
    """
    try:
        return int(sw_version) - 1
    except (TypeError, ValueError):
        logger.warning(f"Unparseable zone number {sw_version!r}, using index 0")
        return 0
