"""Tests for CommandRunner class.

The CommandRunner provides async subprocess execution with timeout handling,
environment merging, working directory validation, and launch failures
reported as results.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from bacon_mcp.runners.command import (
    EXIT_COMMAND_NOT_FOUND,
    EXIT_PERMISSION_DENIED,
    CommandRunner,
)
from bacon_mcp.runners.models import CommandResult

SUBPROCESS_EXEC = "bacon_mcp.runners.command.asyncio.create_subprocess_exec"


class TestCommandRunner:
    """Tests for CommandRunner class."""

    @pytest.mark.asyncio
    async def test_run_simple_command(self, mock_process: MagicMock) -> None:
        """A simple command returns a populated CommandResult."""
        with patch(SUBPROCESS_EXEC, AsyncMock(return_value=mock_process)):
            runner = CommandRunner()
            result = await runner.run(["echo", "hello"])

        assert isinstance(result, CommandResult)
        assert result.returncode == 0
        assert result.stdout == "stdout output"
        assert result.stderr == ""
        assert result.success is True
        assert result.timed_out is False
        assert result.duration_ms >= 0

    @pytest.mark.asyncio
    async def test_run_command_with_stderr(self, mock_process: MagicMock) -> None:
        """stderr is captured separately from stdout."""
        mock_process.communicate = AsyncMock(return_value=(b"out", b"err"))

        with patch(SUBPROCESS_EXEC, AsyncMock(return_value=mock_process)):
            result = await CommandRunner().run(["some", "command"])

        assert result.stdout == "out"
        assert result.stderr == "err"

    @pytest.mark.asyncio
    async def test_nonzero_exit_is_a_result(self, mock_process: MagicMock) -> None:
        """A failing command is reported, not raised."""
        mock_process.returncode = 101
        mock_process.communicate = AsyncMock(return_value=(b"", b"error: aborting"))

        with patch(SUBPROCESS_EXEC, AsyncMock(return_value=mock_process)):
            result = await CommandRunner().run(["cargo", "build"])

        assert result.returncode == 101
        assert result.success is False
        assert result.stderr == "error: aborting"

    @pytest.mark.asyncio
    async def test_missing_returncode_becomes_one(
        self, mock_process: MagicMock
    ) -> None:
        """A process that reports no exit status is recorded as failed."""
        mock_process.returncode = None

        with patch(SUBPROCESS_EXEC, AsyncMock(return_value=mock_process)):
            result = await CommandRunner().run(["cargo", "check"])

        assert result.returncode == 1

    @pytest.mark.asyncio
    async def test_invalid_utf8_is_replaced(self, mock_process: MagicMock) -> None:
        """Undecodable bytes do not abort the capture."""
        mock_process.communicate = AsyncMock(return_value=(b"ok \xff\xfe", b""))

        with patch(SUBPROCESS_EXEC, AsyncMock(return_value=mock_process)):
            result = await CommandRunner().run(["cargo", "check"])

        assert result.stdout.startswith("ok ")
        assert "�" in result.stdout

    @pytest.mark.asyncio
    async def test_run_command_timeout(self, mock_process: MagicMock) -> None:
        """Timeout terminates the process and flags the result."""
        mock_process.communicate = AsyncMock(side_effect=TimeoutError())
        mock_process.wait = AsyncMock()

        with patch(SUBPROCESS_EXEC, AsyncMock(return_value=mock_process)):
            runner = CommandRunner(timeout=0.1)
            result = await runner.run(["sleep", "10"])

        assert result.timed_out is True
        assert result.returncode == -1
        assert result.success is False
        mock_process.terminate.assert_called_once()
        mock_process.kill.assert_not_called()

    @pytest.mark.asyncio
    async def test_timeout_kills_after_grace_period(
        self, mock_process: MagicMock
    ) -> None:
        """A process ignoring SIGTERM is killed."""
        mock_process.communicate = AsyncMock(side_effect=TimeoutError())
        mock_process.wait = AsyncMock(side_effect=[TimeoutError(), None])

        with patch(SUBPROCESS_EXEC, AsyncMock(return_value=mock_process)):
            result = await CommandRunner(timeout=0.1).run(["sleep", "10"])

        assert result.timed_out is True
        mock_process.terminate.assert_called_once()
        mock_process.kill.assert_called_once()

    @pytest.mark.asyncio
    async def test_zero_timeout_disables_timeout(
        self, mock_process: MagicMock
    ) -> None:
        """timeout <= 0 means wait indefinitely."""
        captured: dict[str, object] = {}

        async def fake_wait_for(awaitable, timeout):  # noqa: ANN001
            captured["timeout"] = timeout
            return await awaitable

        with (
            patch(SUBPROCESS_EXEC, AsyncMock(return_value=mock_process)),
            patch("bacon_mcp.runners.command.asyncio.wait_for", fake_wait_for),
        ):
            await CommandRunner(timeout=0).run(["cargo", "test"])

        assert captured["timeout"] is None

    @pytest.mark.asyncio
    async def test_missing_working_directory_is_a_result(self) -> None:
        """A missing directory fails like a launch error, without spawning."""
        exec_mock = AsyncMock()

        with patch(SUBPROCESS_EXEC, exec_mock):
            runner = CommandRunner(cwd=Path("/nonexistent/path/xyz"))
            result = await runner.run(["echo", "test"])

        assert result.returncode == 1
        assert result.success is False
        assert result.stdout == ""
        assert result.stderr == "Working directory does not exist: /nonexistent/path/xyz"
        exec_mock.assert_not_called()

    @pytest.mark.asyncio
    async def test_cwd_is_passed_to_subprocess(
        self, mock_process: MagicMock, tmp_path: Path
    ) -> None:
        """Commands run inside the configured directory."""
        exec_mock = AsyncMock(return_value=mock_process)

        with patch(SUBPROCESS_EXEC, exec_mock):
            await CommandRunner(cwd=tmp_path).run(["cargo", "check"])

        assert exec_mock.call_args.kwargs["cwd"] == tmp_path
        assert exec_mock.call_args.args == ("cargo", "check")

    @pytest.mark.asyncio
    async def test_environment_merge(self, mock_process: MagicMock) -> None:
        """Custom variables are merged over the parent environment."""
        captured_env = None

        async def capture_env(*args, **kwargs):
            nonlocal captured_env
            captured_env = kwargs.get("env")
            return mock_process

        with patch(SUBPROCESS_EXEC, AsyncMock(side_effect=capture_env)):
            runner = CommandRunner(env={"CUSTOM_VAR": "custom_value"})
            await runner.run(["echo", "test"], env={"PER_CALL": "1"})

        assert captured_env is not None
        assert captured_env["CUSTOM_VAR"] == "custom_value"
        assert captured_env["PER_CALL"] == "1"
        # Should also have PATH from parent env
        assert "PATH" in captured_env


class TestLaunchFailures:
    """Launch failures are results with conventional exit codes."""

    @pytest.mark.asyncio
    async def test_command_not_found(self) -> None:
        with patch(SUBPROCESS_EXEC, AsyncMock(side_effect=FileNotFoundError())):
            result = await CommandRunner().run(["cargo", "check"])

        assert result.returncode == EXIT_COMMAND_NOT_FOUND
        assert result.stderr == "Command not found: cargo"
        assert result.stdout == ""

    @pytest.mark.asyncio
    async def test_permission_denied(self) -> None:
        with patch(SUBPROCESS_EXEC, AsyncMock(side_effect=PermissionError())):
            result = await CommandRunner().run(["cargo", "check"])

        assert result.returncode == EXIT_PERMISSION_DENIED
        assert "Permission denied" in result.stderr

    @pytest.mark.asyncio
    async def test_other_os_error(self) -> None:
        with patch(SUBPROCESS_EXEC, AsyncMock(side_effect=OSError("exec format error"))):
            result = await CommandRunner().run(["cargo", "check"])

        assert result.returncode == 1
        assert result.stderr == "Failed to start cargo: exec format error"
