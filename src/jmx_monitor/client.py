"""Async client running jmxterm as a subprocess."""

from __future__ import annotations

import asyncio
import logging
import os
import signal
from typing import Self

from jmx_monitor.utils.decorators import handle_retrieval_errors

logger = logging.getLogger(__name__)


class JmxtermProcessError(Exception):
    """jmxterm exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str) -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"jmxterm exited with status {returncode}: {stderr.strip()}")


async def _kill_group(process: asyncio.subprocess.Process) -> None:
    """Kill the shell and every process in its pipeline."""
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    await process.wait()


class JmxtermClient:
    """Async client for the jmxterm command-line tool.

    Runs one shell command at a time and returns its standard output. A
    command that outlives the timeout is killed.

    Args:
        timeout: Per-command timeout in seconds.
    """

    def __init__(self, timeout: float = 60.0) -> None:
        """Initialize the jmxterm client."""
        self._timeout = timeout
        self._process: asyncio.subprocess.Process | None = None
        self._calls = 0

    async def __aenter__(self) -> Self:
        """Enter async context."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context and kill any process still running."""
        if self._process is not None and self._process.returncode is None:
            await _kill_group(self._process)
        self._process = None

    @property
    def timeout(self) -> float:
        """Per-command timeout in seconds."""
        return self._timeout

    @property
    def calls(self) -> int:
        """Number of commands started by this client."""
        return self._calls

    @handle_retrieval_errors("running jmxterm")
    async def run(self, command: str) -> str:
        """Run a jmxterm command line through the shell.

        Args:
            command: Shell command built by build_command.

        Returns:
            Decoded standard output, untrimmed.

        Raises:
            MetricNotFoundError: If the process cannot start, exits with a
                non-zero status or does not finish within the timeout.
        """
        self._calls += 1
        self._process = await asyncio.create_subprocess_shell(
            command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )

        try:
            stdout, stderr = await asyncio.wait_for(
                self._process.communicate(), timeout=self._timeout
            )
        except TimeoutError:
            logger.error("jmxterm did not finish within %.0fs", self._timeout)
            await _kill_group(self._process)
            raise

        if self._process.returncode != 0:
            raise JmxtermProcessError(
                self._process.returncode, stderr.decode(errors="replace")
            )

        return stdout.decode(errors="replace")
