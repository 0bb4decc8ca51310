"""bacon-mcp exception hierarchy.

All exceptions can be imported from this package:
    from bacon_mcp.exceptions import BaconError, NotARustProjectError
"""

from __future__ import annotations

from bacon_mcp.exceptions.base import BaconError
from bacon_mcp.exceptions.config import ConfigError
from bacon_mcp.exceptions.project import (
    ManifestReadError,
    NotARustProjectError,
    ProjectError,
)
from bacon_mcp.exceptions.tools import ToolArgumentError

__all__ = [
    "BaconError",
    "ConfigError",
    "ManifestReadError",
    "NotARustProjectError",
    "ProjectError",
    "ToolArgumentError",
]
