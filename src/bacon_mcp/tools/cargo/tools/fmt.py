"""Formatting tools: bacon_fmt_check and bacon_fmt."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from bacon_mcp.formatting import format_fmt_check
from bacon_mcp.runners import CargoRunner
from bacon_mcp.runners.parsers import parse_fmt_check
from bacon_mcp.tools.cargo.dispatch import project_tool, render_report
from bacon_mcp.tools.cargo.options import FMT_CHECK_ARGS, ProjectOptions

FORMATTED = "✅ All files are properly formatted!"


def create_bacon_fmt_check_tool(cargo: CargoRunner) -> Any:
    """Create bacon_fmt_check tool.

    Args:
        cargo: Runner used for every invocation.

    Returns:
        Decorated tool function.
    """

    async def bacon_fmt_check(
        project: Path, options: ProjectOptions
    ) -> dict[str, Any]:
        result = await cargo.run(FMT_CHECK_ARGS, project)
        if result.success:
            return render_report(result, FORMATTED)
        return render_report(result, format_fmt_check(parse_fmt_check(result.stdout)))

    return project_tool(
        "bacon_fmt_check",
        "Run `cargo fmt --check` to verify code formatting without modifying "
        "files. Returns a list of files that need formatting.",
        ProjectOptions,
        bacon_fmt_check,
    )


def create_bacon_fmt_tool(cargo: CargoRunner) -> Any:
    """Create bacon_fmt tool.

    Args:
        cargo: Runner used for every invocation.

    Returns:
        Decorated tool function.
    """

    async def bacon_fmt(project: Path, options: ProjectOptions) -> dict[str, Any]:
        result = await cargo.run(["fmt"], project)
        if result.success:
            return render_report(result, "✅ Code formatted successfully!")
        return render_report(result, f"❌ Formatting failed:\n{result.stderr}")

    return project_tool(
        "bacon_fmt",
        "Run `cargo fmt` to automatically format all Rust code in the project "
        "according to rustfmt rules.",
        ProjectOptions,
        bacon_fmt,
    )
