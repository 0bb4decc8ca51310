"""MCP response helpers for the cargo tools.

Responses carry plain text. Error responses additionally set ``is_error``,
which the SDK server turns into the protocol's ``isError`` flag.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from bacon_mcp.runners.models import CommandResult, Diagnostic


def text_response(text: str) -> dict[str, Any]:
    """Create MCP success response.

    Args:
        text: Report text.

    Returns:
        MCP-formatted success response.
    """
    return {"content": [{"type": "text", "text": text}]}


def error_response(message: str) -> dict[str, Any]:
    """Create MCP error response.

    Args:
        message: Human-readable error message, already prefixed.

    Returns:
        MCP-formatted error response.
    """
    return {"content": [{"type": "text", "text": message}], "is_error": True}


def response_text(response: dict[str, Any]) -> str:
    """Concatenated text content of a response."""
    return "".join(
        item.get("text", "")
        for item in response.get("content", [])
        if item.get("type") == "text"
    )


def is_error(response: dict[str, Any]) -> bool:
    return bool(response.get("is_error"))


def timeout_notice(result: CommandResult) -> str:
    """Prefix added to reports of an invocation that hit the timeout."""
    if not result.timed_out:
        return ""
    seconds = result.duration_ms / 1000
    return f"⏱️ cargo timed out after {seconds:.1f}s; results may be incomplete.\n\n"


def failure_notice(result: CommandResult, diagnostics: Sequence[Diagnostic]) -> str:
    """Cargo's stderr, for a failed run that produced no diagnostics.

    Without it a missing subcommand or a manifest error would read as a
    clean run.
    """
    if diagnostics or result.success or not result.stderr.strip():
        return ""
    return (
        f"\n\nCargo exited with status {result.returncode}:\n"
        f"{result.stderr.rstrip()}"
    )
