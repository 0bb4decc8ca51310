"""Project overview tool: rust_project_info."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from bacon_mcp.exceptions import ManifestReadError
from bacon_mcp.logging import get_logger
from bacon_mcp.project import get_project_info, parse_cargo_metadata
from bacon_mcp.runners import CargoRunner
from bacon_mcp.tools.cargo.dispatch import project_tool
from bacon_mcp.tools.cargo.options import METADATA_ARGS, ProjectOptions
from bacon_mcp.tools.cargo.responses import text_response

logger = get_logger(__name__)


def create_rust_project_info_tool(cargo: CargoRunner) -> Any:
    """Create rust_project_info tool.

    Name and version come from Cargo.toml itself. Targets and the
    dependency count come from ``cargo metadata``; if that fails the
    report just stops after the path.

    Args:
        cargo: Runner used for every invocation.

    Returns:
        Decorated tool function.
    """

    async def rust_project_info(
        project: Path, options: ProjectOptions
    ) -> dict[str, Any]:
        info = get_project_info(project)
        if info is None:
            raise ManifestReadError(project)

        result = await cargo.run(METADATA_ARGS, project)

        output = f"📦 Project: {info.name} v{info.version}\n"
        output += f"📁 Path: {options.path}\n"

        metadata = parse_cargo_metadata(result.stdout)
        if metadata is None:
            logger.debug("rust_project_info: no usable cargo metadata")
            return text_response(output)

        output += "\n📋 Targets:\n"
        for target in metadata.targets:
            output += f"   - {target.name} ({', '.join(target.kinds)})\n"
        if metadata.dependency_count > 0:
            output += f"\n📚 Dependencies: {metadata.dependency_count}\n"
        return text_response(output)

    return project_tool(
        "rust_project_info",
        "Get information about a Rust project including name, version, and "
        "basic structure.",
        ProjectOptions,
        rust_project_info,
    )
