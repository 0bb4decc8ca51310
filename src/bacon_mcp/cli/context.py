"""State shared between the root command and its subcommands."""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, TypeVar

import click

from bacon_mcp.config import BaconConfig

__all__ = [
    "CLIContext",
    "ExitCode",
    "async_command",
    "get_cli_context",
]


class ExitCode(IntEnum):
    """Process exit status of ``bacon-mcp``.

    FAILURE also covers a tool call whose response carries the error flag.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE = 2


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Root-level options, stored in ``ctx.obj["cli_ctx"]``.

    Attributes:
        config: Merged configuration, read by the tool commands.
    """

    config: BaconConfig


def get_cli_context(ctx: click.Context) -> CLIContext:
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    return cli_ctx


F = TypeVar("F", bound=Callable[..., Any])


def async_command(f: F) -> F:
    """Let a coroutine function serve as a Click command callback.

    Example:
        >>> @click.command()
        >>> @async_command
        >>> async def serve() -> None:
        >>>     await serve_stdio(create_cargo_tools_server())
    """

    @functools.wraps(f)
    def run_sync(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))

    return run_sync  # type: ignore[return-value]
