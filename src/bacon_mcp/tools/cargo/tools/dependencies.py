"""Dependency hygiene tools backed by cargo subcommand plugins.

bacon_audit, bacon_deny, bacon_outdated, bacon_udeps and bacon_machete each
need the corresponding cargo plugin installed. Their output is passed
through mostly verbatim; if the plugin is missing, cargo's own complaint
ends up in the report.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from bacon_mcp.runners import CargoRunner
from bacon_mcp.tools.cargo.dispatch import project_tool, render_report
from bacon_mcp.tools.cargo.options import (
    DenyOptions,
    MacheteOptions,
    OutdatedOptions,
    ProjectOptions,
    UdepsOptions,
)

UP_TO_DATE_MARKER = "All dependencies are up to date"
UNUSED_MARKER = "unused"


def create_bacon_audit_tool(cargo: CargoRunner) -> Any:
    """Create bacon_audit tool."""

    async def bacon_audit(project: Path, options: ProjectOptions) -> dict[str, Any]:
        result = await cargo.run(["audit"], project)
        if result.success:
            return render_report(
                result, "✅ No known vulnerabilities found in dependencies!"
            )
        return render_report(
            result, f"⚠️ Security audit results:\n\n{result.stdout}\n{result.stderr}"
        )

    return project_tool(
        "bacon_audit",
        "Run `cargo audit` to check for known security vulnerabilities in "
        "dependencies. Requires cargo-audit to be installed.",
        ProjectOptions,
        bacon_audit,
    )


def create_bacon_deny_tool(cargo: CargoRunner) -> Any:
    """Create bacon_deny tool."""

    async def bacon_deny(project: Path, options: DenyOptions) -> dict[str, Any]:
        result = await cargo.run(options.to_cargo_args(), project)
        if result.success:
            return render_report(
                result, f"✅ cargo deny ({options.check}): All checks passed!"
            )
        return render_report(
            result,
            f"⚠️ cargo deny ({options.check}) found issues:\n\n"
            f"{result.stdout}\n{result.stderr}",
        )

    return project_tool(
        "bacon_deny",
        "Run `cargo deny` to check dependencies for licenses, security "
        "advisories, and duplicate versions. Requires cargo-deny to be "
        "installed. More comprehensive than cargo audit.",
        DenyOptions,
        bacon_deny,
    )


def create_bacon_outdated_tool(cargo: CargoRunner) -> Any:
    """Create bacon_outdated tool.

    cargo-outdated exits 0 whether or not anything is outdated, so the
    verdict comes from its stdout.
    """

    async def bacon_outdated(
        project: Path, options: OutdatedOptions
    ) -> dict[str, Any]:
        result = await cargo.run(options.to_cargo_args(), project)
        if UP_TO_DATE_MARKER in result.stdout:
            return render_report(result, "✅ All dependencies are up to date!")

        output = f"📦 Outdated dependencies:\n\n{result.stdout}"
        if result.stderr:
            output += "\n" + result.stderr
        return render_report(result, output)

    return project_tool(
        "bacon_outdated",
        "Run `cargo outdated` to check for outdated dependencies. Shows which "
        "dependencies have newer versions available. Requires cargo-outdated "
        "to be installed.",
        OutdatedOptions,
        bacon_outdated,
    )


def create_bacon_udeps_tool(cargo: CargoRunner) -> Any:
    """Create bacon_udeps tool.

    Runs on the nightly toolchain selector configured in
    ``cargo.nightly_toolchain``.
    """

    async def bacon_udeps(project: Path, options: UdepsOptions) -> dict[str, Any]:
        args = options.to_cargo_args(cargo.config.nightly_toolchain)
        result = await cargo.run(args, project)
        if result.success and UNUSED_MARKER not in result.stdout:
            return render_report(result, "✅ No unused dependencies found!")
        return render_report(
            result, f"📦 Unused dependencies:\n\n{result.stdout}\n{result.stderr}"
        )

    return project_tool(
        "bacon_udeps",
        "Run `cargo udeps` to find unused dependencies in your Cargo.toml. "
        "Requires cargo-udeps and nightly Rust. Helps keep your dependency "
        "list clean.",
        UdepsOptions,
        bacon_udeps,
    )


def create_bacon_machete_tool(cargo: CargoRunner) -> Any:
    """Create bacon_machete tool."""

    async def bacon_machete(
        project: Path, options: MacheteOptions
    ) -> dict[str, Any]:
        result = await cargo.run(options.to_cargo_args(), project)
        if result.success:
            if options.fix:
                return render_report(result, "✅ Unused dependencies removed!")
            return render_report(result, "✅ No unused dependencies found!")
        return render_report(
            result,
            f"📦 Unused dependencies found:\n\n{result.stdout}\n{result.stderr}"
            "\n\nRun with fix=true to remove them.",
        )

    return project_tool(
        "bacon_machete",
        "Run `cargo machete` to find unused dependencies. Faster than "
        "cargo-udeps and doesn't require nightly. Requires cargo-machete to "
        "be installed.",
        MacheteOptions,
        bacon_machete,
    )
