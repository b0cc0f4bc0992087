"""Tests for the in-memory catalog."""

from pathlib import Path

import pytest

from device_gateway.adapters.memory import DEFAULT_DEVICES, InMemoryCatalog
from device_gateway.core.interfaces import CatalogStore, DeserializationError
from device_gateway.core.models import DeviceKind, HardwarePlatform

SEED = """
devices:
  - id: rtr1
    address: 192.168.1.1
    kind: ROUTER
    hardware: OTHER
    sw_version: "64"
    owner_id: user-1
    name: Basement Router
    nicknames: [Basement Router]
  - id: porch-light
    address: 192.168.1.40
    kind: LIGHT
    hardware: ARDUINO
    owner_id: user-1
  - id: shed
    kind: SWITCH
    owner_id: user-2
"""


def test_satisfies_catalog_protocol():
    assert isinstance(InMemoryCatalog(), CatalogStore)


def test_default_devices():
    catalog = InMemoryCatalog()

    assert list(catalog.snapshot()) == [d.id for d in DEFAULT_DEVICES]


def test_from_yaml(tmp_path):
    seed = tmp_path / "devices.yaml"
    seed.write_text(SEED)

    catalog = InMemoryCatalog.from_yaml(seed)

    devices = catalog.snapshot()
    assert list(devices) == ["rtr1", "porch-light", "shed"]
    assert devices["porch-light"].hardware == HardwarePlatform.RELAY_BOARD
    assert devices["rtr1"].kind == DeviceKind.ROUTER


def test_from_yaml_invalid_record(tmp_path):
    seed = tmp_path / "devices.yaml"
    seed.write_text("devices:\n  - id: x\n    kind: TOASTER\n")

    with pytest.raises(DeserializationError):
        InMemoryCatalog.from_yaml(seed)


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        InMemoryCatalog.from_yaml(tmp_path / "missing.yaml")


@pytest.mark.asyncio
async def test_fetch_returns_copy(catalog):
    device = await catalog.fetch_by_id("rtr1")
    device.state = True

    assert catalog.snapshot()["rtr1"].state is False


@pytest.mark.asyncio
async def test_fetch_unknown(catalog):
    assert await catalog.fetch_by_id("ghost") is None


@pytest.mark.asyncio
async def test_fetch_by_owner_in_insertion_order(tmp_path):
    seed = tmp_path / "devices.yaml"
    seed.write_text(SEED)
    catalog = InMemoryCatalog.from_yaml(seed)

    assert await catalog.fetch_by_owner("user-1") == ["rtr1", "porch-light"]
    assert await catalog.fetch_by_owner("user-2") == ["shed"]


@pytest.mark.asyncio
async def test_upsert_inserts_and_updates(catalog, light_device):
    light_device.state = True
    assert await catalog.upsert(light_device) is True
    assert catalog.snapshot()["porch-light"].state is True

    light_device.id = "new-light"
    await catalog.upsert(light_device)
    assert "new-light" in catalog.snapshot()


def test_example_seed_file_loads():
    seed = Path(__file__).resolve().parents[2] / "config" / "devices.yaml"

    devices = InMemoryCatalog.from_yaml(seed).snapshot()

    assert devices["0f8fad5b-d9cb-469f-a165-70867728950e"].kind == DeviceKind.IRRIGATION_HOST
    assert devices["living-room-tv"].hardware == HardwarePlatform.TV_CONTROLLER
