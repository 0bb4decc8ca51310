"""MCP server factory for the cargo tools.

Provides the factory function to create an MCP server with all cargo tools.
"""

from __future__ import annotations

from claude_agent_sdk import SdkMcpTool, create_sdk_mcp_server
from claude_agent_sdk.types import McpSdkServerConfig

from bacon_mcp.config import CargoConfig
from bacon_mcp.logging import get_logger
from bacon_mcp.runners import CargoRunner
from bacon_mcp.tools.cargo.constants import SERVER_NAME, SERVER_VERSION
from bacon_mcp.tools.cargo.tools import (
    create_bacon_audit_tool,
    create_bacon_build_tool,
    create_bacon_check_tool,
    create_bacon_clippy_strict_tool,
    create_bacon_clippy_tool,
    create_bacon_deny_tool,
    create_bacon_doc_tool,
    create_bacon_fmt_check_tool,
    create_bacon_fmt_tool,
    create_bacon_machete_tool,
    create_bacon_outdated_tool,
    create_bacon_quality_tool,
    create_bacon_test_tool,
    create_bacon_udeps_tool,
    create_rust_project_info_tool,
)

logger = get_logger(__name__)


def create_cargo_tools(cargo: CargoRunner) -> dict[str, SdkMcpTool]:
    """Create every cargo tool, keyed by tool name in registration order.

    Args:
        cargo: Runner shared by all tools.

    Returns:
        Mapping of tool name to tool.
    """
    factories = (
        create_bacon_check_tool,
        create_bacon_clippy_tool,
        create_bacon_clippy_strict_tool,
        create_bacon_test_tool,
        create_bacon_build_tool,
        create_bacon_doc_tool,
        create_bacon_fmt_check_tool,
        create_bacon_fmt_tool,
        create_bacon_audit_tool,
        create_bacon_deny_tool,
        create_bacon_outdated_tool,
        create_bacon_udeps_tool,
        create_bacon_machete_tool,
        create_bacon_quality_tool,
        create_rust_project_info_tool,
    )
    tools: dict[str, SdkMcpTool] = {}
    for factory in factories:
        created = factory(cargo)
        tools[created.name] = created
    return tools


def create_cargo_tools_server(
    config: CargoConfig | None = None,
) -> McpSdkServerConfig:
    """Create MCP server with all cargo tools registered.

    Args:
        config: Cargo settings (binary, timeout, environment). Defaults to
            ``CargoConfig()``.

    Returns:
        Configured MCP server instance.

    Example:
        ```python
        from bacon_mcp.tools import create_cargo_tools_server

        server = create_cargo_tools_server()
        agent_options = ClaudeAgentOptions(
            mcp_servers={"bacon": server},
            allowed_tools=["mcp__bacon__bacon_check"],
        )
        ```
    """
    cargo = CargoRunner(config)

    logger.info("Creating cargo tools MCP server (version %s)", SERVER_VERSION)

    tools = create_cargo_tools(cargo)

    server = create_sdk_mcp_server(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        tools=list(tools.values()),
    )

    # Add tools to the server dict for test access
    server["_tools"] = tools  # type: ignore[typeddict-unknown-key]

    return server
