"""Cargo MCP tools for Rust projects.

This is the MCP (Model Context Protocol) interface layer that:
- Takes tool calls from an assistant
- Validates the project path and the remaining arguments
- Delegates to CargoRunner for the actual cargo invocations
- Returns MCP-formatted text responses

Usage:
    from bacon_mcp.tools.cargo import create_cargo_tools_server

    server = create_cargo_tools_server()
"""

from __future__ import annotations

from bacon_mcp.tools.cargo.constants import SERVER_NAME, SERVER_VERSION, TOOL_NAMES
from bacon_mcp.tools.cargo.responses import (
    error_response,
    is_error,
    response_text,
    text_response,
)
from bacon_mcp.tools.cargo.server import create_cargo_tools, create_cargo_tools_server

__all__ = [
    # Server factory
    "create_cargo_tools",
    "create_cargo_tools_server",
    # Response helpers
    "error_response",
    "is_error",
    "response_text",
    "text_response",
    # Constants
    "SERVER_NAME",
    "SERVER_VERSION",
    "TOOL_NAMES",
]
