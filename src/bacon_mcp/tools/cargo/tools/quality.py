"""Composite quality report: bacon_quality.

Runs clippy (pedantic + nursery), ``fmt --check`` and ``doc --no-deps`` one
after another and merges the results into one report. The three cargo
invocations share the target directory, so they never overlap.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bacon_mcp.formatting import format_diagnostics, format_fmt_check
from bacon_mcp.logging import get_logger
from bacon_mcp.runners import CargoRunner
from bacon_mcp.runners.models import CommandResult, Diagnostic
from bacon_mcp.runners.parsers import parse_cargo_diagnostics, parse_fmt_check
from bacon_mcp.tools.cargo.dispatch import project_tool
from bacon_mcp.tools.cargo.options import (
    FMT_CHECK_ARGS,
    QUALITY_CLIPPY_ARGS,
    QUALITY_DOC_ARGS,
    ProjectOptions,
)
from bacon_mcp.tools.cargo.responses import (
    failure_notice,
    text_response,
    timeout_notice,
)

logger = get_logger(__name__)

REPORT_TITLE = "🔍 **Comprehensive Code Quality Report**\n\n"


@dataclass(slots=True)
class StepOutcome:
    """Rendered section body and the number of issues it contributes."""

    text: str
    issues: int


QualityStep = Callable[[CargoRunner, Path], Awaitable[StepOutcome]]


def _issue_count(result: CommandResult, diagnostics: list[Diagnostic]) -> int:
    # A failed run with nothing to show still counts once
    if diagnostics:
        return len(diagnostics)
    return 0 if result.success else 1


async def clippy_step(cargo: CargoRunner, project: Path) -> StepOutcome:
    result = await cargo.run(QUALITY_CLIPPY_ARGS, project)
    diagnostics = parse_cargo_diagnostics(result.stdout)
    return StepOutcome(
        timeout_notice(result)
        + format_diagnostics(diagnostics)
        + failure_notice(result, diagnostics)
        + "\n",
        _issue_count(result, diagnostics),
    )


async def fmt_step(cargo: CargoRunner, project: Path) -> StepOutcome:
    result = await cargo.run(FMT_CHECK_ARGS, project)
    if result.success:
        return StepOutcome("✅ All files are properly formatted!\n\n", 0)
    unformatted = parse_fmt_check(result.stdout)
    # Any non-zero exit counts as one issue, however many files differ
    return StepOutcome(
        timeout_notice(result) + format_fmt_check(unformatted, detailed=False) + "\n\n",
        1,
    )


async def doc_step(cargo: CargoRunner, project: Path) -> StepOutcome:
    result = await cargo.run(QUALITY_DOC_ARGS, project)
    diagnostics = parse_cargo_diagnostics(result.stdout)
    if not diagnostics and result.success:
        return StepOutcome(
            timeout_notice(result) + "✅ Documentation builds without warnings!\n\n",
            0,
        )
    if not diagnostics:
        return StepOutcome(
            timeout_notice(result)
            + "❌ Documentation generation failed!"
            + failure_notice(result, diagnostics)
            + "\n\n",
            1,
        )
    return StepOutcome(
        timeout_notice(result) + format_diagnostics(diagnostics) + "\n",
        len(diagnostics),
    )


#: Report sections in execution order
QUALITY_STEPS: tuple[tuple[str, QualityStep], ...] = (
    ("Clippy (pedantic + nursery)", clippy_step),
    ("Formatting", fmt_step),
    ("Documentation", doc_step),
)


async def build_quality_report(cargo: CargoRunner, project: Path) -> str:
    """Run every quality step in order and render the combined report.

    A step that raises is reported inline and counted as one issue; the
    remaining steps still run.
    """
    output = REPORT_TITLE
    total_issues = 0

    for heading, step in QUALITY_STEPS:
        output += f"## {heading}\n"
        try:
            outcome = await step(cargo, project)
        except Exception as e:
            logger.exception("bacon_quality: step %r failed", heading)
            outcome = StepOutcome(f"❌ Step failed: {e}\n\n", 1)
        output += outcome.text
        total_issues += outcome.issues

    output += "## Summary\n"
    if total_issues == 0:
        output += "✅ **Excellent!** No quality issues found."
    else:
        output += f"⚠️ Found {total_issues} issue(s) to address."
    logger.info("bacon_quality: %d issue(s)", total_issues)
    return output


def create_bacon_quality_tool(cargo: CargoRunner) -> Any:
    """Create bacon_quality tool.

    Args:
        cargo: Runner used for every invocation.

    Returns:
        Decorated tool function.
    """

    async def bacon_quality(
        project: Path, options: ProjectOptions
    ) -> dict[str, Any]:
        return text_response(await build_quality_report(cargo, project))

    return project_tool(
        "bacon_quality",
        "Run a comprehensive code quality check: clippy (pedantic + nursery), "
        "fmt check, and doc check. Returns a combined report of all issues found.",
        ProjectOptions,
        bacon_quality,
    )
