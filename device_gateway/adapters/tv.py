"""TV adapter driving a local command-line utility.

The utility is invoked as ``<command> get vol``, ``<command> set vol N``,
``<command> set mute on|off`` and ``<command> power on|off``. Volume
reports are JSON, written to stderr by the utility (stdout is accepted
too). Liveness is checked with a single ``ping``.
"""

from __future__ import annotations

import asyncio
import json
import logging

from pydantic import ValidationError

from device_gateway.core.interfaces import TransportError
from device_gateway.core.models import TVVolumeState

logger = logging.getLogger(__name__)


class CommandLineTV:
    """TV controller backed by a command-line utility.

    Example:
        >>> tv = CommandLineTV("upstairs-tv", default_address="192.168.1.80")
        >>> if await tv.is_online(""):
        ...     state = await tv.get_volume()
    """

    name = "tv"

    def __init__(
        self,
        command: str = "upstairs-tv",
        timeout: float = 10.0,
        default_address: str | None = None,
    ) -> None:
        """Initialize TV adapter.

        Args:
            command: Utility executable
            timeout: Timeout in seconds for each invocation
            default_address: Address pinged when the device record has none
        """
        self.command = command
        self.timeout = timeout
        self.default_address = default_address

    async def _run(self, args: list[str]) -> tuple[int, str, str]:
        """Run a command and collect its output.

        Returns:
            Tuple of (exit code, stdout, stderr)

        Raises:
            TransportError: If the command cannot be started or times out
        """
        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TransportError(f"Cannot run {args[0]}: {e}", self.name) from e

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise TransportError(
                f"Timeout running {' '.join(args)} (>{self.timeout}s)", self.name
            ) from e

        stdout_str = stdout.decode() if stdout else ""
        stderr_str = stderr.decode() if stderr else ""
        return proc.returncode or 0, stdout_str, stderr_str

    async def _control(self, *args: str) -> str:
        """Run the TV utility and require success.

        Returns:
            Combined output of the utility
        """
        cmd = [self.command, *args]
        code, stdout, stderr = await self._run(cmd)
        if code != 0:
            raise TransportError(
                f"Command failed: {' '.join(cmd)} (exit {code}): {stderr.strip()}",
                self.name,
            )
        return stderr.strip() or stdout.strip()

    async def is_online(self, address: str) -> bool:
        """Ping the TV once.

        Args:
            address: TV address; the configured default is used when empty

        Returns:
            True if the TV answered
        """
        target = address or self.default_address
        if not target:
            logger.warning("No TV address configured, treating TV as offline")
            return False

        try:
            code, _, _ = await self._run(["ping", "-c", "1", "-W", "1", target])
        except TransportError as e:
            logger.warning(f"TV liveness check failed: {e}")
            return False
        return code == 0

    async def get_volume(self) -> TVVolumeState:
        """Get the current volume state.

        Raises:
            TransportError: If the utility fails or prints something unparseable
        """
        output = await self._control("get", "vol")
        try:
            return TVVolumeState.model_validate(json.loads(output))
        except (ValueError, ValidationError) as e:
            raise TransportError(f"Invalid volume report: {output[:100]}", self.name) from e

    async def set_volume(self, level: int) -> None:
        """Set the volume level."""
        logger.info(f"Setting TV volume to {level}")
        await self._control("set", "vol", str(level))

    async def set_mute(self, mute: bool) -> None:
        """Mute or unmute."""
        logger.info(f"Setting TV mute to {mute}")
        await self._control("set", "mute", "on" if mute else "off")

    async def set_power(self, power: bool) -> None:
        """Switch the TV on or off."""
        logger.info(f"Setting TV power to {power}")
        await self._control("power", "on" if power else "off")
