"""bacon-mcp: Rust toolchain operations exposed as MCP tools."""

from __future__ import annotations

__version__ = "0.2.0"
