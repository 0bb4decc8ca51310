"""Cargo invocation on top of CommandRunner."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from bacon_mcp.config import CargoConfig
from bacon_mcp.logging import get_logger
from bacon_mcp.runners.command import CommandRunner

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bacon_mcp.runners.models import CommandResult

__all__ = ["CargoRunner", "NO_COLOR_ENV"]

logger = get_logger(__name__)

#: Output is parsed as text/JSON, so ANSI color codes are always disabled.
NO_COLOR_ENV: dict[str, str] = {"CARGO_TERM_COLOR": "never"}


class CargoRunner:
    """Run ``cargo <args>`` inside a project directory.

    Example:
        ```python
        runner = CargoRunner(CargoConfig())
        result = await runner.run(["check", "--message-format=json"], project)
        ```
    """

    def __init__(self, config: CargoConfig | None = None) -> None:
        self._config = config if config is not None else CargoConfig()

    @property
    def config(self) -> CargoConfig:
        return self._config

    def command_line(self, args: Sequence[str]) -> list[str]:
        """Full argv for a cargo invocation."""
        return [self._config.binary, *args]

    async def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        """Run cargo with ``args`` in ``cwd`` and capture its output.

        Never raises for cargo failures; a non-zero exit is part of the
        returned result.
        """
        # Config env first so the color override always wins
        env = {**self._config.env, **NO_COLOR_ENV}
        runner = CommandRunner(
            cwd=cwd,
            timeout=self._config.effective_timeout,
            env=env,
        )
        command = self.command_line(args)
        logger.debug("Running command: %s (cwd=%s)", " ".join(command), cwd)
        result = await runner.run(command)
        logger.debug(
            "Command completed with return code %s in %sms",
            result.returncode,
            result.duration_ms,
        )
        return result
