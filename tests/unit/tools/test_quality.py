"""Tests for the composite bacon_quality report."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from bacon_mcp.runners import CommandResult
from bacon_mcp.tools.cargo import create_cargo_tools, is_error, response_text


def _result(returncode: int = 0, stdout: str = "") -> CommandResult:
    return CommandResult(returncode=returncode, stdout=stdout, stderr="")


async def _quality(cargo: MagicMock, project: Path) -> str:
    tools = create_cargo_tools(cargo)
    response = await tools["bacon_quality"].handler({"path": str(project)})
    assert not is_error(response)
    return response_text(response)


@pytest.mark.asyncio
async def test_clean_project(mock_cargo: MagicMock, rust_project: Path) -> None:
    text = await _quality(mock_cargo, rust_project)

    assert text == (
        "🔍 **Comprehensive Code Quality Report**\n\n"
        "## Clippy (pedantic + nursery)\n"
        "No issues found.\n"
        "## Formatting\n"
        "✅ All files are properly formatted!\n\n"
        "## Documentation\n"
        "✅ Documentation builds without warnings!\n\n"
        "## Summary\n"
        "✅ **Excellent!** No quality issues found."
    )


@pytest.mark.asyncio
async def test_steps_run_in_order(mock_cargo: MagicMock, rust_project: Path) -> None:
    await _quality(mock_cargo, rust_project)

    commands = [list(c.args[0]) for c in mock_cargo.run.call_args_list]
    assert commands == [
        [
            "clippy",
            "--message-format=json",
            "--all-targets",
            "--",
            "-W",
            "clippy::pedantic",
            "-W",
            "clippy::nursery",
        ],
        ["fmt", "--check"],
        ["doc", "--message-format=json", "--no-deps"],
    ]


@pytest.mark.asyncio
async def test_issue_total(
    mock_cargo: MagicMock,
    rust_project: Path,
    compiler_message: Callable[..., str],
) -> None:
    clippy_out = "\n".join(
        [compiler_message("needless return"), compiler_message("missing docs")]
    )
    doc_out = compiler_message("unresolved link to `Foo`", code=None)
    mock_cargo.run = AsyncMock(
        side_effect=[
            _result(stdout=clippy_out),
            _result(1, stdout="Diff in a.rs at line 1:\nDiff in b.rs at line 2:\n"),
            _result(stdout=doc_out),
        ]
    )

    text = await _quality(mock_cargo, rust_project)

    assert "## Clippy (pedantic + nursery)\nFound 0 error(s) and 2 warning(s):" in text
    assert "## Formatting\n⚠️ 2 file(s) need formatting\n\n## Documentation\n" in text
    assert "⚠️ unresolved link to `Foo`" in text
    # 2 clippy + 1 doc + 1 for the formatting step
    assert text.endswith("## Summary\n⚠️ Found 4 issue(s) to address.")


@pytest.mark.asyncio
async def test_failing_step_does_not_abort_report(
    mock_cargo: MagicMock, rust_project: Path
) -> None:
    mock_cargo.run = AsyncMock(
        side_effect=[RuntimeError("pipe closed"), _result(), _result()]
    )

    text = await _quality(mock_cargo, rust_project)

    assert "## Clippy (pedantic + nursery)\n❌ Step failed: pipe closed\n\n" in text
    assert "✅ All files are properly formatted!" in text
    assert "✅ Documentation builds without warnings!" in text
    assert text.endswith("⚠️ Found 1 issue(s) to address.")
    assert mock_cargo.run.await_count == 3


@pytest.mark.asyncio
async def test_failed_steps_without_diagnostics_are_issues(
    mock_cargo: MagicMock, rust_project: Path
) -> None:
    mock_cargo.run = AsyncMock(
        side_effect=[
            CommandResult(101, "", "error: no such command: `clippy`\n"),
            _result(),
            CommandResult(101, "", "error: failed to parse manifest\n"),
        ]
    )

    text = await _quality(mock_cargo, rust_project)

    assert (
        "## Clippy (pedantic + nursery)\nNo issues found.\n\n"
        "Cargo exited with status 101:\nerror: no such command: `clippy`\n"
    ) in text
    assert (
        "## Documentation\n❌ Documentation generation failed!\n\n"
        "Cargo exited with status 101:\nerror: failed to parse manifest\n\n"
    ) in text
    assert text.endswith("⚠️ Found 2 issue(s) to address.")
