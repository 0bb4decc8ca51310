from __future__ import annotations

import asyncio

import click

from bacon_mcp.cli.context import async_command, get_cli_context
from bacon_mcp.logging import get_logger
from bacon_mcp.tools.cargo import create_cargo_tools_server
from bacon_mcp.transport import serve_stdio


@click.command()
@click.pass_context
@async_command
async def serve(ctx: click.Context) -> None:
    """Run the MCP server over stdio.

    Stdout carries the protocol stream; logs go to stderr.

    Examples:
        bacon-mcp serve
        BACON_MCP_LOG_FORMAT=json bacon-mcp -v serve
    """
    logger = get_logger(__name__)
    cli_ctx = get_cli_context(ctx)

    server = create_cargo_tools_server(cli_ctx.config.cargo)
    try:
        await serve_stdio(server)
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("Interrupted, shutting down")
