"""Constants for the cargo MCP tools."""

from __future__ import annotations

from bacon_mcp import __version__

#: MCP Server configuration
SERVER_NAME: str = "bacon-mcp"
SERVER_VERSION: str = __version__

#: Flag requesting line-delimited JSON diagnostics from cargo
JSON_MESSAGE_FORMAT: str = "--message-format=json"

#: Extra flags that let ``--fix`` touch a dirty or staged working tree
FIX_FLAGS: tuple[str, ...] = ("--fix", "--allow-dirty", "--allow-staged")

PATH_DESCRIPTION: str = (
    "Absolute path to the Rust project directory (containing Cargo.toml)"
)

#: Checks accepted by ``cargo deny check``
DENY_CHECKS: tuple[str, ...] = ("all", "advisories", "bans", "licenses", "sources")

#: Tool names in registration order
TOOL_NAMES: tuple[str, ...] = (
    "bacon_check",
    "bacon_clippy",
    "bacon_clippy_strict",
    "bacon_test",
    "bacon_build",
    "bacon_doc",
    "bacon_fmt_check",
    "bacon_fmt",
    "bacon_audit",
    "bacon_deny",
    "bacon_outdated",
    "bacon_udeps",
    "bacon_machete",
    "bacon_quality",
    "rust_project_info",
)
