"""Stdio transport for the cargo tools server.

The Agent SDK builds an in-process MCP server; this module exposes the same
server instance to external MCP clients over stdin/stdout.
"""

from __future__ import annotations

from claude_agent_sdk.types import McpSdkServerConfig
from mcp.server.stdio import stdio_server

from bacon_mcp.logging import get_logger

__all__ = ["serve_stdio"]

logger = get_logger(__name__)


async def serve_stdio(server: McpSdkServerConfig) -> None:
    """Serve an SDK MCP server over stdio until the client disconnects.

    Args:
        server: Server config returned by ``create_cargo_tools_server``.
    """
    instance = server["instance"]
    logger.info("Starting %s server (stdio transport)", server["name"])
    async with stdio_server() as (read_stream, write_stream):
        await instance.run(
            read_stream,
            write_stream,
            instance.create_initialization_options(),
        )
    logger.info("%s server stopped", server["name"])
