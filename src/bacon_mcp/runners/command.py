"""Async subprocess execution for cargo and its plugins.

``CommandRunner`` starts one process, drains both pipes while it runs and
hands back a ``CommandResult``. Nothing about the child's fate is raised:
non-zero exits, timeouts and processes that never started are all
described by the result.
"""

from __future__ import annotations

import asyncio
import contextlib
import os
import time
from pathlib import Path
from typing import TYPE_CHECKING

from bacon_mcp.logging import get_logger
from bacon_mcp.runners.models import CommandResult

if TYPE_CHECKING:
    from asyncio.subprocess import Process
    from collections.abc import Sequence

__all__ = ["CommandRunner"]

logger = get_logger(__name__)

#: Seconds between SIGTERM and SIGKILL for a process that overran its timeout
TERMINATION_GRACE_PERIOD: float = 2.0

#: Seconds spent collecting buffered output after a kill
PARTIAL_READ_TIMEOUT: float = 0.1

#: Exit codes reported when the process could not be started
EXIT_COMMAND_NOT_FOUND: int = 127
EXIT_PERMISSION_DENIED: int = 126
EXIT_LAUNCH_FAILED: int = 1

#: Exit code recorded when the process ends without a status
EXIT_UNKNOWN: int = 1

#: Exit code recorded for a process stopped because of the timeout
EXIT_TIMED_OUT: int = -1


def _decode(data: bytes | None) -> str:
    return data.decode("utf-8", errors="replace") if data else ""


async def _read_leftover(stream: asyncio.StreamReader | None) -> str:
    """Whatever a stopped process left in one of its pipes."""
    if stream is None:
        return ""
    with contextlib.suppress(TimeoutError, OSError, ValueError):
        return _decode(
            await asyncio.wait_for(stream.read(), timeout=PARTIAL_READ_TIMEOUT)
        )
    return ""


class CommandRunner:
    """Run external commands with a timeout and a controlled environment.

    The child inherits ``os.environ`` overlaid with ``env``; per-call
    variables win over both. A timeout of None (or <= 0) waits forever.

    Example:
        ```python
        runner = CommandRunner(cwd=project, timeout=600.0)
        result = await runner.run(["cargo", "check", "--message-format=json"])
        if result.timed_out:
            ...
        ```
    """

    def __init__(
        self,
        cwd: Path | None = None,
        timeout: float | None = None,
        env: dict[str, str] | None = None,
    ) -> None:
        self._cwd = cwd
        self._timeout = timeout
        self._extra_env = dict(env) if env else {}

    def _environment(self, overrides: dict[str, str] | None) -> dict[str, str]:
        return {**os.environ, **self._extra_env, **(overrides or {})}

    @staticmethod
    def _normalize_timeout(timeout: float | None) -> float | None:
        if timeout is None or timeout <= 0:
            return None
        return timeout

    async def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        timeout: float | None = None,
        env: dict[str, str] | None = None,
    ) -> CommandResult:
        """Run ``command`` to completion (or timeout) and capture its output.

        Args:
            command: Program and arguments; no shell is involved.
            cwd: Directory for this call, overriding the runner's.
            timeout: Timeout for this call, overriding the runner's.
            env: Extra variables for this call only.

        A missing working directory is reported like any other launch
        failure: exit 1 with the reason in stderr.
        """
        workdir = cwd if cwd is not None else self._cwd
        if workdir is not None and not workdir.is_dir():
            return CommandResult(
                EXIT_LAUNCH_FAILED, "", f"Working directory does not exist: {workdir}"
            )

        limit = self._normalize_timeout(
            timeout if timeout is not None else self._timeout
        )
        started = time.monotonic()
        result = await self._execute(command, workdir, limit, self._environment(env))
        elapsed_ms = int((time.monotonic() - started) * 1000)

        return CommandResult(
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
            duration_ms=elapsed_ms,
            timed_out=result.timed_out,
        )

    async def _execute(
        self,
        command: Sequence[str],
        cwd: Path | None,
        timeout: float | None,
        env: dict[str, str],
    ) -> CommandResult:
        program = command[0]
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                env=env,
            )
        except FileNotFoundError:
            return CommandResult(
                EXIT_COMMAND_NOT_FOUND, "", f"Command not found: {program}"
            )
        except PermissionError:
            return CommandResult(
                EXIT_PERMISSION_DENIED, "", f"Permission denied: {program}"
            )
        except OSError as e:
            return CommandResult(EXIT_LAUNCH_FAILED, "", f"Failed to start {program}: {e}")

        try:
            # communicate() reads both pipes concurrently, so a chatty child
            # never stalls on a full pipe buffer
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=timeout
            )
        except TimeoutError:
            logger.warning("Command timed out after %ss: %s", timeout, " ".join(command))
            return await self._stop(process)

        returncode = process.returncode
        return CommandResult(
            returncode=returncode if returncode is not None else EXIT_UNKNOWN,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )

    async def _stop(self, process: Process) -> CommandResult:
        """Terminate an overrunning process, escalating to kill."""
        process.terminate()
        try:
            await asyncio.wait_for(process.wait(), timeout=TERMINATION_GRACE_PERIOD)
        except TimeoutError:
            process.kill()
            await process.wait()

        return CommandResult(
            returncode=EXIT_TIMED_OUT,
            stdout=await _read_leftover(process.stdout),
            stderr=await _read_leftover(process.stderr),
            timed_out=True,
        )
