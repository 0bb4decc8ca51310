"""Compiler-diagnostic tools: bacon_check, bacon_build and bacon_doc.

All three run cargo with ``--message-format=json`` and render the
diagnostics cargo reports on stdout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from bacon_mcp.formatting import format_diagnostics
from bacon_mcp.logging import get_logger
from bacon_mcp.runners import CargoRunner
from bacon_mcp.runners.parsers import parse_cargo_diagnostics
from bacon_mcp.tools.cargo.dispatch import project_tool, render_report
from bacon_mcp.tools.cargo.options import BuildOptions, CheckOptions, DocOptions

logger = get_logger(__name__)


def create_bacon_check_tool(cargo: CargoRunner) -> Any:
    """Create bacon_check tool.

    Args:
        cargo: Runner used for every invocation.

    Returns:
        Decorated tool function.
    """

    async def bacon_check(project: Path, options: CheckOptions) -> dict[str, Any]:
        result = await cargo.run(options.to_cargo_args(), project)
        diagnostics = parse_cargo_diagnostics(result.stdout)
        logger.info("bacon_check: %d diagnostic(s)", len(diagnostics))
        return render_report(result, format_diagnostics(diagnostics), diagnostics)

    return project_tool(
        "bacon_check",
        "Run `cargo check` on a Rust project and return all compiler errors and "
        "warnings. This is the fastest way to find compilation issues without "
        "generating code.",
        CheckOptions,
        bacon_check,
    )


def create_bacon_build_tool(cargo: CargoRunner) -> Any:
    """Create bacon_build tool.

    Args:
        cargo: Runner used for every invocation.

    Returns:
        Decorated tool function.
    """

    async def bacon_build(project: Path, options: BuildOptions) -> dict[str, Any]:
        result = await cargo.run(options.to_cargo_args(), project)
        diagnostics = parse_cargo_diagnostics(result.stdout)

        header = "✅ Build successful!\n\n" if result.success else "❌ Build failed!\n\n"
        return render_report(
            result, header + format_diagnostics(diagnostics), diagnostics
        )

    return project_tool(
        "bacon_build",
        "Run `cargo build` on a Rust project. Compiles the project and returns "
        "any errors or warnings.",
        BuildOptions,
        bacon_build,
    )


def create_bacon_doc_tool(cargo: CargoRunner) -> Any:
    """Create bacon_doc tool.

    Args:
        cargo: Runner used for every invocation.

    Returns:
        Decorated tool function.
    """

    async def bacon_doc(project: Path, options: DocOptions) -> dict[str, Any]:
        result = await cargo.run(options.to_cargo_args(), project)
        diagnostics = parse_cargo_diagnostics(result.stdout)

        if result.success:
            header = "✅ Documentation generated successfully!\n\n"
        else:
            header = "❌ Documentation generation failed!\n\n"
        return render_report(
            result, header + format_diagnostics(diagnostics), diagnostics
        )

    return project_tool(
        "bacon_doc",
        "Run `cargo doc` to generate and check documentation. Returns any "
        "documentation warnings or errors.",
        DocOptions,
        bacon_doc,
    )
