"""CLI subcommands."""

from __future__ import annotations

from bacon_mcp.cli.commands.serve import serve
from bacon_mcp.cli.commands.tools import call, list_tools

__all__ = ["call", "list_tools", "serve"]
