"""Subprocess execution and output normalization for cargo."""

from __future__ import annotations

from bacon_mcp.runners.cargo import CargoRunner
from bacon_mcp.runners.command import CommandRunner
from bacon_mcp.runners.models import (
    CommandResult,
    Diagnostic,
    DiagnosticLevel,
    TestOutcome,
    TestReport,
    TestStatus,
    TestSummary,
)

__all__ = [
    # Models
    "CommandResult",
    "Diagnostic",
    "DiagnosticLevel",
    "TestOutcome",
    "TestReport",
    "TestStatus",
    "TestSummary",
    # Runners
    "CargoRunner",
    "CommandRunner",
]
