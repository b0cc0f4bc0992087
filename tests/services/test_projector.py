"""Tests for the smart-home projection."""

from device_gateway.core.models import Device, DeviceKind, HardwarePlatform
from device_gateway.services.projector import project, project_all


def test_router_projection(router_device):
    """A router record projects to the full smart-home payload."""
    payload = project(router_device).to_payload()

    assert payload == {
        "id": "rtr1",
        "type": "action.devices.types.ROUTER",
        "traits": ["action.devices.traits.Reboot"],
        "name": {
            "defaultNames": ["Basement Router"],
            "name": "Basement Router",
            "nicknames": ["Basement Router"],
        },
        "attributes": {"commandOnlyOnOff": False, "queryOnlyOnOff": False},
        "deviceInfo": {
            "manufacturer": "GTECH",
            "model": "Other",
            "hwVersion": "1.0",
            "swVersion": "64",
        },
        "willReportState": True,
    }


def test_light_projection(light_device):
    projected = project(light_device)

    assert projected.type == "action.devices.types.LIGHT"
    assert projected.traits == ["action.devices.traits.OnOff"]
    assert projected.device_info.model == "Arduino"


def test_garage_projection():
    device = Device(
        id="garage", kind=DeviceKind.GARAGE, hardware=HardwarePlatform.RELAY_BOARD
    )
    projected = project(device)

    assert projected.type == "action.devices.types.GARAGE"
    assert projected.traits == ["action.devices.traits.OpenClose"]
    assert projected.attributes == {"discreteOnlyOpenClose": True}


def test_irrigation_host_projects_as_switch(host_device):
    projected = project(host_device)

    assert projected.type == "action.devices.types.SWITCH"
    assert projected.traits == ["action.devices.traits.OnOff"]
    assert projected.device_info.model == "Raspberry Pi"


def test_zone_projection():
    device = Device(
        id="0f8fad5b-d9cb-469f-a165-70867728950e-1",
        kind=DeviceKind.SPRINKLER,
        hardware=HardwarePlatform.SINGLE_BOARD_COMPUTER,
        name="Front lawn",
        nicknames=["Front lawn", "Zone 1"],
        sw_version="1",
    )
    projected = project(device)

    assert projected.type == "action.devices.types.SPRINKLER"
    assert projected.name.nicknames == ["Front lawn", "Zone 1"]


def test_tv_projection_uses_live_volume_ceiling(tv_device):
    tv_device.attributes = {"volumeMax": 60, "volume": 12}
    projected = project(tv_device)

    assert projected.type == "action.devices.types.TV"
    assert projected.traits == [
        "action.devices.traits.OnOff",
        "action.devices.traits.Volume",
    ]
    assert projected.attributes["volumeMaxLevel"] == 60
    assert projected.attributes["volumeCanMuteAndUnmute"] is True
    assert projected.device_info.model == "LG"


def test_tv_projection_default_volume_ceiling(tv_device):
    assert project(tv_device).attributes["volumeMaxLevel"] == 100


def test_unnamed_device_uses_id_as_name():
    payload = project(Device(id="sw7")).to_payload()

    assert payload["name"]["name"] == "sw7"
    assert payload["name"]["defaultNames"] == ["sw7"]


def test_projection_is_deterministic(router_device, tv_device, host_device):
    devices = [router_device, tv_device, host_device]

    assert project_all(devices) == project_all(devices)


def test_project_all_preserves_order(router_device, light_device, host_device):
    payloads = project_all([host_device, router_device, light_device])

    assert [p["id"] for p in payloads] == [host_device.id, "rtr1", "porch-light"]


def test_every_kind_projects():
    for kind in DeviceKind:
        projected = project(Device(id=f"dev-{kind.value}", kind=kind))
        assert projected.type.startswith("action.devices.types.")
        assert projected.traits
