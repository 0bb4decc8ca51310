"""Clippy lint tools: bacon_clippy and bacon_clippy_strict."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from bacon_mcp.formatting import format_diagnostics
from bacon_mcp.logging import get_logger
from bacon_mcp.runners import CargoRunner
from bacon_mcp.runners.parsers import parse_cargo_diagnostics
from bacon_mcp.tools.cargo.dispatch import project_tool, render_report
from bacon_mcp.tools.cargo.options import ClippyOptions, ClippyStrictOptions

logger = get_logger(__name__)

STRICT_HEADER = "🔒 Strict Clippy (pedantic + nursery + cargo, warnings denied)\n\n"


def create_bacon_clippy_tool(cargo: CargoRunner) -> Any:
    """Create bacon_clippy tool.

    The report is headed by the lint groups that were switched on, if any.

    Args:
        cargo: Runner used for every invocation.

    Returns:
        Decorated tool function.
    """

    async def bacon_clippy(project: Path, options: ClippyOptions) -> dict[str, Any]:
        result = await cargo.run(options.to_cargo_args(), project)
        diagnostics = parse_cargo_diagnostics(result.stdout)
        logger.info("bacon_clippy: %d diagnostic(s)", len(diagnostics))

        output = ""
        groups = options.enabled_groups()
        if groups:
            output += f"🔍 Clippy with: {', '.join(groups)}\n\n"
        output += format_diagnostics(diagnostics)
        return render_report(result, output, diagnostics)

    return project_tool(
        "bacon_clippy",
        "Run `cargo clippy` on a Rust project for comprehensive linting. Returns "
        "warnings about common mistakes, style issues, and potential bugs with "
        "suggested fixes. Supports multiple lint levels for high-quality Rust code.",
        ClippyOptions,
        bacon_clippy,
    )


def create_bacon_clippy_strict_tool(cargo: CargoRunner) -> Any:
    """Create bacon_clippy_strict tool.

    Args:
        cargo: Runner used for every invocation.

    Returns:
        Decorated tool function.
    """

    async def bacon_clippy_strict(
        project: Path, options: ClippyStrictOptions
    ) -> dict[str, Any]:
        result = await cargo.run(options.to_cargo_args(), project)
        diagnostics = parse_cargo_diagnostics(result.stdout)
        return render_report(
            result, STRICT_HEADER + format_diagnostics(diagnostics), diagnostics
        )

    return project_tool(
        "bacon_clippy_strict",
        "Run clippy with strict settings for maximum code quality. Enables "
        "pedantic + nursery + cargo lints and denies warnings. Ideal for "
        "ensuring production-quality Rust code.",
        ClippyStrictOptions,
        bacon_clippy_strict,
    )
