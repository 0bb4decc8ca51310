"""Parser for libtest's human-readable ``cargo test`` output."""

from __future__ import annotations

import re

from bacon_mcp.runners.models import TestOutcome, TestReport, TestStatus, TestSummary

__all__ = ["LibtestParser"]

_STATUS_TOKENS: dict[str, TestStatus] = {
    "ok": TestStatus.PASSED,
    "failed": TestStatus.FAILED,
    "ignored": TestStatus.SKIPPED,
}


class LibtestParser:
    """Parse ``test <name> ... <ok|FAILED|ignored>`` lines and the result line.

    The name capture is non-greedy up to `` ... `` so doc test names such as
    ``src/lib.rs - Parser::new (line 10)`` survive intact. Anything else the
    tests print is ignored.
    """

    _test_pattern = re.compile(r"^test\s+(.+?)\s+\.\.\.\s+(ok|FAILED|ignored)")
    _result_pattern = re.compile(
        r"test result: .*?\. (\d+) passed; (\d+) failed; (\d+) ignored"
    )

    def parse(self, output: str) -> TestReport:
        """Extract test outcomes and a summary from test output.

        The caller concatenates stderr and stdout before parsing.
        """
        tests: list[TestOutcome] = []
        for line in output.split("\n"):
            match = self._test_pattern.match(line)
            if match:
                tests.append(
                    TestOutcome(
                        name=match.group(1),
                        status=_STATUS_TOKENS[match.group(2).lower()],
                    )
                )

        result = self._result_pattern.search(output)
        if result:
            summary = TestSummary(
                passed=int(result.group(1)),
                failed=int(result.group(2)),
                ignored=int(result.group(3)),
                authoritative=True,
            )
        else:
            summary = TestSummary(
                passed=sum(1 for t in tests if t.status is TestStatus.PASSED),
                failed=sum(1 for t in tests if t.status is TestStatus.FAILED),
                ignored=sum(1 for t in tests if t.status is TestStatus.SKIPPED),
                authoritative=False,
            )

        return TestReport(tests=tuple(tests), summary=summary)
