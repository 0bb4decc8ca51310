from __future__ import annotations

from typing import Any

from bacon_mcp.exceptions.base import BaconError


class ConfigError(BaconError):
    """A config file or setting could not be loaded.

    Attributes:
        message: What went wrong.
        field: Dotted path of the offending setting (e.g. "cargo.binary").
        value: The rejected input, when there is one.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
