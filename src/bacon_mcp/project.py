"""Rust project detection and metadata lookup."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path

from bacon_mcp.exceptions import NotARustProjectError
from bacon_mcp.logging import get_logger

__all__ = [
    "MANIFEST_FILENAME",
    "PackageMetadata",
    "ProjectInfo",
    "TargetInfo",
    "get_project_info",
    "parse_cargo_metadata",
    "require_rust_project",
    "validate_rust_project",
]

logger = get_logger(__name__)

MANIFEST_FILENAME = "Cargo.toml"

_NAME_PATTERN = re.compile(r'name\s*=\s*"([^"]+)"')
_VERSION_PATTERN = re.compile(r'version\s*=\s*"([^"]+)"')


@dataclass(frozen=True, slots=True)
class ProjectInfo:
    """Name and version read from Cargo.toml."""

    name: str
    version: str


@dataclass(frozen=True, slots=True)
class TargetInfo:
    """A cargo target (lib, bin, test, ...)."""

    name: str
    kinds: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PackageMetadata:
    """Subset of ``cargo metadata`` output for the first package."""

    targets: tuple[TargetInfo, ...]
    dependency_count: int


def validate_rust_project(path: Path | str) -> bool:
    """True if ``path`` contains a Cargo.toml."""
    return (Path(path) / MANIFEST_FILENAME).exists()


def require_rust_project(path: Path | str) -> Path:
    """Return ``path`` as a Path, or raise if it is not a Rust project.

    Raises:
        NotARustProjectError: If Cargo.toml is missing.
    """
    if not validate_rust_project(path):
        raise NotARustProjectError(path)
    return Path(path)


def get_project_info(path: Path | str) -> ProjectInfo | None:
    """Read name and version from the project's Cargo.toml.

    The first ``name = "..."`` and ``version = "..."`` assignments win.
    Workspace-inherited versions (``version.workspace = true``) are not
    resolved and fall back to ``0.0.0``.

    Returns:
        ProjectInfo, or None if the manifest cannot be read.
    """
    manifest = Path(path) / MANIFEST_FILENAME
    try:
        text = manifest.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read %s: %s", manifest, e)
        return None

    name_match = _NAME_PATTERN.search(text)
    version_match = _VERSION_PATTERN.search(text)
    return ProjectInfo(
        name=name_match.group(1) if name_match else "unknown",
        version=version_match.group(1) if version_match else "0.0.0",
    )


def parse_cargo_metadata(output: str) -> PackageMetadata | None:
    """Extract targets and dependency count of the first package.

    Args:
        output: stdout of ``cargo metadata --no-deps --format-version=1``.

    Returns:
        PackageMetadata, or None if the output is not usable metadata.
    """
    try:
        metadata = json.loads(output)
    except json.JSONDecodeError:
        return None
    if not isinstance(metadata, dict):
        return None

    packages = metadata.get("packages") or []
    if not packages or not isinstance(packages[0], dict):
        return None
    package = packages[0]

    targets = tuple(
        TargetInfo(
            name=str(target.get("name", "")),
            kinds=tuple(str(k) for k in target.get("kind") or ()),
        )
        for target in package.get("targets") or ()
        if isinstance(target, dict)
    )
    return PackageMetadata(
        targets=targets,
        dependency_count=len(package.get("dependencies") or ()),
    )
