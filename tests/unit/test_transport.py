"""Tests for the stdio transport adapter."""

from __future__ import annotations

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from bacon_mcp.transport import serve_stdio


@pytest.mark.asyncio
async def test_runs_server_instance_over_stdio_streams() -> None:
    read_stream, write_stream = object(), object()

    @asynccontextmanager
    async def fake_stdio_server():
        yield read_stream, write_stream

    instance = MagicMock()
    instance.run = AsyncMock()
    instance.create_initialization_options.return_value = {"server": "opts"}
    server = {"type": "sdk", "name": "bacon-mcp", "instance": instance}

    with patch("bacon_mcp.transport.stdio_server", fake_stdio_server):
        await serve_stdio(server)  # type: ignore[arg-type]

    instance.run.assert_awaited_once_with(read_stream, write_stream, {"server": "opts"})
