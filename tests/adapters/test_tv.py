"""Tests for the command-line TV adapter."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from device_gateway.adapters.tv import CommandLineTV
from device_gateway.core.interfaces import TransportError

VOLUME_REPORT = (
    '{"muted": false, "returnValue": true, '
    '"scenario": "mastervolume_tv_speaker", "volume": 30, "volumeMax": 100}'
)


@pytest.fixture
def tv():
    """TV adapter with the subprocess runner mocked out."""
    adapter = CommandLineTV(command="upstairs-tv", timeout=1.0, default_address="192.168.1.80")
    adapter._run = AsyncMock(return_value=(0, "", ""))
    return adapter


@pytest.mark.asyncio
async def test_get_volume_reads_stderr(tv):
    tv._run.return_value = (0, "", VOLUME_REPORT)

    state = await tv.get_volume()

    assert state.volume == 30
    assert state.muted is False
    tv._run.assert_awaited_once_with(["upstairs-tv", "get", "vol"])


@pytest.mark.asyncio
async def test_get_volume_accepts_stdout(tv):
    tv._run.return_value = (0, VOLUME_REPORT, "")

    assert (await tv.get_volume()).volumeMax == 100


@pytest.mark.asyncio
async def test_get_volume_garbage_is_transport_error(tv):
    tv._run.return_value = (0, "", "not json")

    with pytest.raises(TransportError, match="Invalid volume report"):
        await tv.get_volume()


@pytest.mark.asyncio
async def test_set_volume(tv):
    await tv.set_volume(25)

    tv._run.assert_awaited_once_with(["upstairs-tv", "set", "vol", "25"])


@pytest.mark.asyncio
async def test_set_mute(tv):
    await tv.set_mute(True)

    tv._run.assert_awaited_once_with(["upstairs-tv", "set", "mute", "on"])


@pytest.mark.asyncio
async def test_set_power_off(tv):
    await tv.set_power(False)

    tv._run.assert_awaited_once_with(["upstairs-tv", "power", "off"])


@pytest.mark.asyncio
async def test_nonzero_exit_is_transport_error(tv):
    tv._run.return_value = (1, "", "no route to host")

    with pytest.raises(TransportError, match="exit 1"):
        await tv.set_mute(False)


@pytest.mark.asyncio
async def test_is_online_pings_record_address(tv):
    assert await tv.is_online("192.168.1.81") is True

    tv._run.assert_awaited_once_with(["ping", "-c", "1", "-W", "1", "192.168.1.81"])


@pytest.mark.asyncio
async def test_is_online_falls_back_to_default_address(tv):
    await tv.is_online("")

    tv._run.assert_awaited_once_with(["ping", "-c", "1", "-W", "1", "192.168.1.80"])


@pytest.mark.asyncio
async def test_is_online_false_when_ping_fails(tv):
    tv._run.return_value = (1, "", "")

    assert await tv.is_online("192.168.1.80") is False


@pytest.mark.asyncio
async def test_is_online_false_when_ping_cannot_run(tv):
    tv._run.side_effect = TransportError("Cannot run ping", "tv")

    assert await tv.is_online("192.168.1.80") is False


@pytest.mark.asyncio
async def test_is_online_without_any_address():
    adapter = CommandLineTV()

    assert await adapter.is_online("") is False


@pytest.mark.asyncio
async def test_run_collects_output():
    proc = MagicMock()
    proc.returncode = 0
    proc.communicate = AsyncMock(return_value=(b"out", b"err"))

    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)) as spawn:
        result = await CommandLineTV()._run(["upstairs-tv", "get", "vol"])

    assert result == (0, "out", "err")
    assert spawn.await_args.args == ("upstairs-tv", "get", "vol")


@pytest.mark.asyncio
async def test_run_missing_executable_is_transport_error():
    with patch("asyncio.create_subprocess_exec", AsyncMock(side_effect=FileNotFoundError("nope"))):
        with pytest.raises(TransportError, match="Cannot run"):
            await CommandLineTV()._run(["upstairs-tv", "get", "vol"])


@pytest.mark.asyncio
async def test_run_timeout_kills_process():
    proc = MagicMock()
    proc.communicate = AsyncMock(side_effect=asyncio.TimeoutError())
    proc.wait = AsyncMock(return_value=-9)

    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(TransportError, match="Timeout"):
            await CommandLineTV(timeout=0.1)._run(["upstairs-tv", "get", "vol"])

    proc.kill.assert_called_once()
