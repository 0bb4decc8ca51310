"""Output parsers for cargo, libtest and rustfmt output."""

from __future__ import annotations

from bacon_mcp.runners.models import Diagnostic, TestReport
from bacon_mcp.runners.parsers.cargo_json import CargoJSONParser, select_primary_span
from bacon_mcp.runners.parsers.libtest import LibtestParser
from bacon_mcp.runners.parsers.rustfmt import RustfmtCheckParser

__all__ = [
    "CargoJSONParser",
    "LibtestParser",
    "RustfmtCheckParser",
    "parse_cargo_diagnostics",
    "parse_fmt_check",
    "parse_test_output",
    "select_primary_span",
]

_CARGO_JSON = CargoJSONParser()
_LIBTEST = LibtestParser()
_RUSTFMT = RustfmtCheckParser()


def parse_cargo_diagnostics(output: str) -> list[Diagnostic]:
    """Diagnostics from cargo ``--message-format=json`` output."""
    return _CARGO_JSON.parse(output)


def parse_test_output(output: str) -> TestReport:
    """Outcomes and summary from ``cargo test`` output."""
    return _LIBTEST.parse(output)


def parse_fmt_check(output: str) -> list[str]:
    """Unformatted-file headers from ``cargo fmt --check`` stdout."""
    return _RUSTFMT.parse(output)
