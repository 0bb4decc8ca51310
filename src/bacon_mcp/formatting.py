"""Plain-text rendering of diagnostics and test results.

Every function here is pure: the same input always yields the same text.
The output is meant for people (and assistants) to read, not to be parsed
back.
"""

from __future__ import annotations

from collections.abc import Sequence

from bacon_mcp.runners.models import Diagnostic, DiagnosticLevel, TestReport, TestStatus

__all__ = [
    "NO_ISSUES",
    "format_diagnostics",
    "format_fmt_check",
    "format_test_results",
    "severity_marker",
]

NO_ISSUES = "No issues found."

_MARKERS: dict[DiagnosticLevel, str] = {
    DiagnosticLevel.ERROR: "❌",
    DiagnosticLevel.WARNING: "⚠️",
}
_INFO_MARKER = "ℹ️"


def severity_marker(level: DiagnosticLevel) -> str:
    """Icon shown in front of a diagnostic."""
    return _MARKERS.get(level, _INFO_MARKER)


def format_diagnostics(diagnostics: Sequence[Diagnostic]) -> str:
    """Render diagnostics in input order under an error/warning tally.

    Notes and help messages are rendered too; they just do not count
    towards the header.

    Example:
        >>> format_diagnostics([])
        'No issues found.'
    """
    if not diagnostics:
        return NO_ISSUES

    errors = sum(1 for d in diagnostics if d.level is DiagnosticLevel.ERROR)
    warnings = sum(1 for d in diagnostics if d.level is DiagnosticLevel.WARNING)

    lines = [f"Found {errors} error(s) and {warnings} warning(s):", ""]
    for d in diagnostics:
        code = f"[{d.code}] " if d.code else ""
        lines.append(f"{severity_marker(d.level)} {code}{d.message}")
        lines.append(f"   → {d.location}")
        if d.suggestion:
            lines.append(f"   💡 Suggestion: {d.suggestion}")
        lines.append("")

    return "\n".join(lines) + "\n"


def format_test_results(report: TestReport, returncode: int, stderr: str) -> str:
    """Render a test run.

    When the run failed but no individual test failed, cargo never got as
    far as running tests (usually a compile error), so stderr is appended
    under its own heading.
    """
    output = f"Test Results: {report.summary.text}\n\n"

    failed = report.with_status(TestStatus.FAILED)
    passed = report.with_status(TestStatus.PASSED)
    skipped = report.with_status(TestStatus.SKIPPED)

    if failed:
        output += "❌ Failed tests:\n"
        for t in failed:
            output += f"   - {t.name}\n"
        output += "\n"

    if passed:
        output += f"✅ Passed: {len(passed)} tests\n"

    if skipped:
        output += f"⏭️ Ignored: {len(skipped)} tests\n"

    if returncode != 0 and not failed:
        output += f"\nCompilation or other error:\n{stderr}"

    return output


def format_fmt_check(unformatted: Sequence[str], *, detailed: bool = True) -> str:
    """Render ``cargo fmt --check`` findings.

    Args:
        unformatted: "Diff in ..." header lines.
        detailed: List every header and the fix hint; the quality report
            only wants the count.
    """
    if not detailed:
        return f"⚠️ {len(unformatted)} file(s) need formatting"
    listing = "\n".join(unformatted)
    return f"⚠️ {len(unformatted)} file(s) need formatting:\n{listing}\n\nRun bacon_fmt to fix."
