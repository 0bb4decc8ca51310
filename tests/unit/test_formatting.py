"""Tests for report rendering."""

from __future__ import annotations

from bacon_mcp.formatting import (
    NO_ISSUES,
    format_diagnostics,
    format_fmt_check,
    format_test_results,
    severity_marker,
)
from bacon_mcp.runners.models import (
    Diagnostic,
    DiagnosticLevel,
    TestOutcome,
    TestReport,
    TestStatus,
    TestSummary,
)


def _diagnostic(level: DiagnosticLevel, message: str, **kwargs) -> Diagnostic:  # noqa: ANN003
    return Diagnostic(
        level=level,
        message=message,
        file=kwargs.pop("file", "src/main.rs"),
        line=kwargs.pop("line", 3),
        column=kwargs.pop("column", 5),
        **kwargs,
    )


class TestFormatDiagnostics:
    def test_empty(self) -> None:
        assert format_diagnostics([]) == NO_ISSUES == "No issues found."

    def test_full_rendering(self) -> None:
        diagnostics = [
            _diagnostic(DiagnosticLevel.ERROR, "mismatched types", code="E0308"),
            _diagnostic(
                DiagnosticLevel.WARNING,
                "unused variable: `x`",
                code="unused_variables",
                line=7,
                column=9,
                suggestion="_x",
            ),
            _diagnostic(DiagnosticLevel.NOTE, "see the docs"),
        ]

        assert format_diagnostics(diagnostics) == (
            "Found 1 error(s) and 1 warning(s):\n"
            "\n"
            "❌ [E0308] mismatched types\n"
            "   → src/main.rs:3:5\n"
            "\n"
            "⚠️ [unused_variables] unused variable: `x`\n"
            "   → src/main.rs:7:9\n"
            "   💡 Suggestion: _x\n"
            "\n"
            "ℹ️ see the docs\n"
            "   → src/main.rs:3:5\n"
            "\n"
        )

    def test_is_deterministic(self) -> None:
        diagnostics = [_diagnostic(DiagnosticLevel.WARNING, "dead code")]
        assert format_diagnostics(diagnostics) == format_diagnostics(diagnostics)

    def test_notes_do_not_count(self) -> None:
        text = format_diagnostics([_diagnostic(DiagnosticLevel.HELP, "try this")])
        assert text.startswith("Found 0 error(s) and 0 warning(s):")


def test_severity_marker() -> None:
    assert severity_marker(DiagnosticLevel.ERROR) == "❌"
    assert severity_marker(DiagnosticLevel.WARNING) == "⚠️"
    assert severity_marker(DiagnosticLevel.NOTE) == "ℹ️"
    assert severity_marker(DiagnosticLevel.HELP) == "ℹ️"


class TestFormatTestResults:
    def _report(self, *tests: TestOutcome, authoritative: bool = True) -> TestReport:
        passed = sum(1 for t in tests if t.status is TestStatus.PASSED)
        failed = sum(1 for t in tests if t.status is TestStatus.FAILED)
        ignored = sum(1 for t in tests if t.status is TestStatus.SKIPPED)
        return TestReport(
            tests=tests,
            summary=TestSummary(passed, failed, ignored, authoritative=authoritative),
        )

    def test_mixed_run(self) -> None:
        report = self._report(
            TestOutcome("a::ok", TestStatus.PASSED),
            TestOutcome("a::bad", TestStatus.FAILED),
            TestOutcome("a::slow", TestStatus.SKIPPED),
        )

        assert format_test_results(report, 101, "error: test failed") == (
            "Test Results: 1 passed, 1 failed, 1 ignored\n"
            "\n"
            "❌ Failed tests:\n"
            "   - a::bad\n"
            "\n"
            "✅ Passed: 1 tests\n"
            "⏭️ Ignored: 1 tests\n"
        )

    def test_compile_error_appends_stderr(self) -> None:
        report = self._report(authoritative=False)

        text = format_test_results(report, 101, "error[E0425]: cannot find value")

        assert text == (
            "Test Results: 0 tests found\n"
            "\n"
            "\nCompilation or other error:\nerror[E0425]: cannot find value"
        )

    def test_success_has_no_error_section(self) -> None:
        report = self._report(TestOutcome("t", TestStatus.PASSED))

        text = format_test_results(report, 0, "   Compiling demo")

        assert "Compilation or other error" not in text
        assert "Failed tests" not in text


class TestFormatFmtCheck:
    def test_detailed(self) -> None:
        headers = ["Diff in src/main.rs at line 1:", "Diff in src/lib.rs at line 4:"]
        assert format_fmt_check(headers) == (
            "⚠️ 2 file(s) need formatting:\n"
            "Diff in src/main.rs at line 1:\n"
            "Diff in src/lib.rs at line 4:\n"
            "\n"
            "Run bacon_fmt to fix."
        )

    def test_count_only(self) -> None:
        assert format_fmt_check(["Diff in a"], detailed=False) == (
            "⚠️ 1 file(s) need formatting"
        )
