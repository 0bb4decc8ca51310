"""Cargo tool implementations for MCP.

Each submodule exposes ``create_*_tool`` factories that close over a
shared CargoRunner.
"""

from __future__ import annotations

from bacon_mcp.tools.cargo.tools.check import (
    create_bacon_build_tool,
    create_bacon_check_tool,
    create_bacon_doc_tool,
)
from bacon_mcp.tools.cargo.tools.clippy import (
    create_bacon_clippy_strict_tool,
    create_bacon_clippy_tool,
)
from bacon_mcp.tools.cargo.tools.dependencies import (
    create_bacon_audit_tool,
    create_bacon_deny_tool,
    create_bacon_machete_tool,
    create_bacon_outdated_tool,
    create_bacon_udeps_tool,
)
from bacon_mcp.tools.cargo.tools.fmt import (
    create_bacon_fmt_check_tool,
    create_bacon_fmt_tool,
)
from bacon_mcp.tools.cargo.tools.info import create_rust_project_info_tool
from bacon_mcp.tools.cargo.tools.quality import create_bacon_quality_tool
from bacon_mcp.tools.cargo.tools.cargo_test import create_bacon_test_tool

__all__ = [
    "create_bacon_audit_tool",
    "create_bacon_build_tool",
    "create_bacon_check_tool",
    "create_bacon_clippy_strict_tool",
    "create_bacon_clippy_tool",
    "create_bacon_deny_tool",
    "create_bacon_doc_tool",
    "create_bacon_fmt_check_tool",
    "create_bacon_fmt_tool",
    "create_bacon_machete_tool",
    "create_bacon_outdated_tool",
    "create_bacon_quality_tool",
    "create_bacon_test_tool",
    "create_bacon_udeps_tool",
    "create_rust_project_info_tool",
]
