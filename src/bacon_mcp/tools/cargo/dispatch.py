"""Shared request handling for the cargo tools.

Every tool goes through :func:`project_tool`, which checks ``path`` and the
Cargo.toml marker before any subprocess runs, validates the remaining
options, and turns every failure into an error-flagged response so nothing
is ever raised into the MCP server.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from claude_agent_sdk import tool

from bacon_mcp.exceptions import BaconError
from bacon_mcp.logging import bind_context, clear_context, get_logger
from bacon_mcp.project import require_rust_project
from bacon_mcp.runners.models import CommandResult, Diagnostic
from bacon_mcp.tools.cargo.options import OptionsT, input_schema, parse_options
from bacon_mcp.tools.cargo.responses import (
    error_response,
    failure_notice,
    text_response,
    timeout_notice,
)

__all__ = ["project_tool", "dispatch", "render_report"]

logger = get_logger(__name__)

ProjectHandler = Callable[[Path, OptionsT], Awaitable[dict[str, Any]]]


async def dispatch(
    name: str,
    args: dict[str, Any],
    options_model: type[OptionsT],
    handler: ProjectHandler[OptionsT],
) -> dict[str, Any]:
    """Validate a tool call and run its handler.

    Returns:
        The handler's response, or an error response for input errors and
        unexpected failures.
    """
    bind_context(tool=name)
    try:
        path = args.get("path") if isinstance(args, dict) else None
        if not path or not isinstance(path, str):
            logger.warning("%s: called without a path", name)
            return error_response("Error: path is required")

        project = require_rust_project(path)
        bind_context(project=path)
        options = parse_options(options_model, args)

        logger.info("%s: started", name)
        response = await handler(project, options)
        logger.info("%s: finished", name)
        return response

    except BaconError as e:
        logger.warning("%s: %s", name, e.message)
        return error_response(f"Error: {e.message}")
    except Exception as e:
        logger.exception("%s: unexpected error", name)
        return error_response(f"Error: {e}")
    finally:
        clear_context()


def project_tool(
    name: str,
    description: str,
    options_model: type[OptionsT],
    handler: ProjectHandler[OptionsT],
) -> Any:
    """Build an MCP tool whose handler receives a validated project.

    Args:
        name: Tool name exposed over MCP.
        description: Tool description exposed over MCP.
        options_model: Model that validates the argument bag and provides
            the advertised input schema.
        handler: Coroutine taking the project root and parsed options.

    Returns:
        Decorated tool function.
    """

    @tool(name, description, input_schema(options_model))
    async def _invoke(args: dict[str, Any]) -> dict[str, Any]:
        return await dispatch(name, args, options_model, handler)

    return _invoke


def render_report(
    result: CommandResult,
    report: str,
    diagnostics: list[Diagnostic] | None = None,
) -> dict[str, Any]:
    """Wrap a rendered report into a (non-error) response.

    Adds a notice when cargo timed out. When cargo failed without producing
    a single diagnostic, its stderr is appended so a launch failure or
    manifest error does not read as a clean run.
    """
    text = timeout_notice(result) + report
    if diagnostics is not None:
        text += failure_notice(result, diagnostics)
    return text_response(text)
