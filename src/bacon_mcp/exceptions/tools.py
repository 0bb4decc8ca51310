from __future__ import annotations

from bacon_mcp.exceptions.base import BaconError


class ToolArgumentError(BaconError):
    """A tool argument is missing or has the wrong shape.

    Attributes:
        argument: Name of the offending argument, when known.
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument
