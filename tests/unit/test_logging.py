"""Tests for the bacon_mcp.logging module."""

from __future__ import annotations

import logging
import os
import sys
from unittest.mock import patch

import structlog

from bacon_mcp.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_default_level(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("BACON_MCP_LOG_LEVEL", None)
            configure_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_json_via_env(self) -> None:
        with patch.dict(os.environ, {"BACON_MCP_LOG_FORMAT": "json"}):
            configure_logging()

        log = structlog.get_logger()
        assert log is not None

    def test_configure_logging_custom_level(self) -> None:
        configure_logging(level=logging.DEBUG)

        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_level_from_env(self) -> None:
        with patch.dict(os.environ, {"BACON_MCP_LOG_LEVEL": "INFO"}):
            configure_logging()

        assert logging.getLogger().level == logging.INFO

    def test_handlers_write_to_stderr(self) -> None:
        configure_logging()
        configure_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].stream is sys.stderr


class TestContext:
    def test_bind_and_clear(self) -> None:
        bind_context(tool="bacon_check", project="/work/demo")
        assert structlog.contextvars.get_contextvars() == {
            "tool": "bacon_check",
            "project": "/work/demo",
        }

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_json_output_includes_context(self, capsys) -> None:  # noqa: ANN001
        configure_logging(force_json=True, level=logging.INFO)
        bind_context(tool="bacon_test")
        try:
            get_logger("tests").info("cargo finished")
        finally:
            clear_context()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"tool": "bacon_test"' in captured.err
        assert "cargo finished" in captured.err
