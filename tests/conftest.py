from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Callable, Generator, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from bacon_mcp.config import CargoConfig
from bacon_mcp.runners import CargoRunner, CommandResult

if TYPE_CHECKING:
    from click.testing import CliRunner


SAMPLE_MANIFEST = """\
[package]
name = "demo-crate"
version = "0.3.1"
edition = "2021"

[dependencies]
serde = "1"
"""


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Keep test log output on stderr at WARNING and above."""
    from bacon_mcp.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Scratch directory; the working directory is restored afterwards."""
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
    os.chdir(original_cwd)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Run with no BACON_MCP_* variables set."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("BACON_MCP_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def rust_project(tmp_path: Path) -> Path:
    """A directory that passes the Cargo.toml check."""
    (tmp_path / "Cargo.toml").write_text(SAMPLE_MANIFEST)
    return tmp_path


@pytest.fixture
def mock_cargo() -> MagicMock:
    """Mock CargoRunner whose run() succeeds with empty output by default.

    Example:
        >>> mock_cargo.run.return_value = CommandResult(101, "", "boom")
    """
    cargo = MagicMock(spec=CargoRunner)
    cargo.config = CargoConfig()
    cargo.run = AsyncMock(return_value=CommandResult(returncode=0, stdout="", stderr=""))
    return cargo


def make_compiler_message(
    message: str = "unused variable: `x`",
    *,
    level: str = "warning",
    code: str | None = "unused_variables",
    file_name: str = "src/main.rs",
    line: int = 2,
    column: int = 9,
    label: str | None = "help: prefix it with an underscore",
    suggestion: str | None = None,
    spans: list[dict[str, Any]] | None = None,
) -> str:
    """One line of ``cargo --message-format=json`` output."""
    if spans is None:
        spans = [
            {
                "file_name": file_name,
                "line_start": line,
                "line_end": line,
                "column_start": column,
                "column_end": column + 1,
                "is_primary": True,
                "label": label,
                "suggested_replacement": suggestion,
            }
        ]
    record = {
        "reason": "compiler-message",
        "package_id": "demo-crate 0.3.1 (path+file:///work/demo-crate)",
        "message": {
            "message": message,
            "code": {"code": code, "explanation": None} if code else None,
            "level": level,
            "spans": spans,
            "children": [],
            "rendered": f"{level}: {message}\n",
        },
    }
    return json.dumps(record)


@pytest.fixture
def compiler_message() -> Callable[..., str]:
    """Factory fixture for cargo compiler-message lines."""
    return make_compiler_message


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def mock_process() -> MagicMock:
    """Create a mock subprocess object with common methods and attributes."""
    process = MagicMock()
    process.returncode = 0
    process.pid = 12345
    process.stdout = None
    process.stderr = None
    process.communicate = AsyncMock(return_value=(b"stdout output", b""))
    process.wait = AsyncMock()
    process.terminate = MagicMock()
    process.kill = MagicMock()
    return process
