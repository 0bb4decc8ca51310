"""structlog setup for bacon-mcp.

Every record, whether it comes from structlog or from a third-party library
using the stdlib ``logging`` module, is rendered by one stderr handler.
stdout is reserved for the MCP stdio stream.

Environment:
    BACON_MCP_LOG_LEVEL: Level name used when no explicit level is given.
    BACON_MCP_LOG_FORMAT: ``json`` for JSON lines, anything else for the
        console renderer.

Usage:
    from bacon_mcp.logging import configure_logging, get_logger

    configure_logging()
    log = get_logger(__name__)
    log.info("cargo_started", args=["check"])
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.types import Processor

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "clear_context",
]

LOG_FORMAT_ENV_VAR = "BACON_MCP_LOG_FORMAT"
LOG_LEVEL_ENV_VAR = "BACON_MCP_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def _pre_chain() -> list[Processor]:
    # Run for structlog events and for foreign stdlib records alike
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(as_json: bool) -> Processor:
    if as_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(level: int, renderer: Processor) -> logging.Handler:
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
) -> None:
    """Install the stderr handler and configure structlog.

    Safe to call more than once; the previous handlers on the root logger
    are replaced.

    Args:
        force_json: Render JSON even when BACON_MCP_LOG_FORMAT is unset.
        level: Explicit level; falls back to BACON_MCP_LOG_LEVEL.
    """
    as_json = force_json or os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"
    effective = _level_from_env() if level is None else level

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(_stderr_handler(effective, _renderer(as_json)))
    root.setLevel(effective)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually for ``__name__``."""
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log


def bind_context(**context: Any) -> None:
    """Attach key/value pairs to every log line of the current task."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Drop everything added with :func:`bind_context`."""
    structlog.contextvars.clear_contextvars()
