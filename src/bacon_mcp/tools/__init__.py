"""bacon-mcp MCP tool definitions and servers.

Tools are built with the Claude Agent SDK, so the server can be mounted
in-process by an agent or served over stdio by ``bacon-mcp serve``.
"""

from __future__ import annotations

from bacon_mcp.tools.cargo import create_cargo_tools_server

__all__ = [
    "create_cargo_tools_server",
]
