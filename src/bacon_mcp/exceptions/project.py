from __future__ import annotations

from pathlib import Path

from bacon_mcp.exceptions.base import BaconError


class ProjectError(BaconError):
    """The requested path is not a usable Rust project.

    Attributes:
        path: The directory that was inspected.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path


class NotARustProjectError(ProjectError):
    """The directory has no Cargo.toml manifest."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            f"No Cargo.toml found at {path}. Is this a Rust project?",
            path=path,
        )


class ManifestReadError(ProjectError):
    """Cargo.toml exists but could not be read."""

    def __init__(self, path: Path | str) -> None:
        super().__init__("Could not parse Cargo.toml", path=path)
