"""Data models for cargo invocations and their normalized output.

This module defines immutable, frozen dataclasses for representing:
- Command execution results (CommandResult)
- Compiler and linter findings (Diagnostic, DiagnosticLevel)
- Test outcomes (TestOutcome, TestStatus, TestSummary, TestReport)

All models are built once from a single invocation's output and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "CommandResult",
    "Diagnostic",
    "DiagnosticLevel",
    "TestOutcome",
    "TestReport",
    "TestStatus",
    "TestSummary",
]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of executing a single command.

    Attributes:
        returncode: Exit code from the command (0 = success). Never None:
            a missing status is recorded as 1.
        stdout: Standard output captured from the command.
        stderr: Standard error captured from the command. Launch failures
            (executable missing, permission denied) are reported here.
        duration_ms: Execution time in milliseconds.
        timed_out: True if the command exceeded its timeout limit.
    """

    returncode: int
    stdout: str
    stderr: str
    duration_ms: int = 0
    timed_out: bool = False

    @property
    def success(self) -> bool:
        """True if command completed successfully (returncode 0, no timeout)."""
        return self.returncode == 0 and not self.timed_out


class DiagnosticLevel(str, Enum):
    """Severity of a compiler or linter finding."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    HELP = "help"

    @classmethod
    def from_raw(cls, raw: str) -> DiagnosticLevel:
        """Normalize a rustc level string.

        rustc also emits "failure-note" and "error: internal compiler error";
        those fold into NOTE and ERROR. Anything unrecognized becomes NOTE so
        it is still shown without inflating the error/warning tally.
        """
        try:
            return cls(raw)
        except ValueError:
            pass
        if raw.startswith("error"):
            return cls.ERROR
        return cls.NOTE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One normalized compiler/linter finding.

    Attributes:
        level: Severity of the finding.
        message: Message text, verbatim from rustc.
        file: File of the primary span.
        line: 1-based line of the primary span.
        column: 1-based column of the primary span.
        code: Error code or lint name (e.g. "E0308", "clippy::needless_return").
        rendered: rustc's own multi-line rendering of the message.
        suggestion: Replacement proposed for the primary span.
    """

    level: DiagnosticLevel
    message: str
    file: str
    line: int
    column: int
    code: str | None = None
    rendered: str | None = None
    suggestion: str | None = None

    @property
    def location(self) -> str:
        """Location formatted as file:line:column."""
        return f"{self.file}:{self.line}:{self.column}"


class TestStatus(str, Enum):
    """Outcome of a single test."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class TestOutcome:
    """One test as reported by libtest.

    Attributes:
        name: Test identifier as printed, e.g. "parser::tests::empty" or
            "src/lib.rs - Parser::new (line 10)" for doc tests.
        status: Normalized outcome.
    """

    __test__ = False

    name: str
    status: TestStatus


@dataclass(frozen=True, slots=True)
class TestSummary:
    """Tally for a test run.

    Attributes:
        passed: Passed test count.
        failed: Failed test count.
        ignored: Ignored test count.
        authoritative: True when the counts come from libtest's own
            "test result:" line rather than from counting outcome lines.
    """

    __test__ = False

    passed: int
    failed: int
    ignored: int
    authoritative: bool

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.ignored

    @property
    def text(self) -> str:
        """Summary sentence used in reports."""
        if self.authoritative:
            return f"{self.passed} passed, {self.failed} failed, {self.ignored} ignored"
        return f"{self.total} tests found"

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class TestReport:
    """Parsed test run: outcomes in reported order plus the summary."""

    __test__ = False

    tests: tuple[TestOutcome, ...]
    summary: TestSummary

    def with_status(self, status: TestStatus) -> tuple[TestOutcome, ...]:
        """Outcomes with the given status, in reported order."""
        return tuple(t for t in self.tests if t.status is status)
