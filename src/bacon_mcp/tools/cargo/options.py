"""Typed tool options and their translation into cargo arguments.

Each tool validates its argument bag into one of these models; the model
then composes the cargo argument list. Flag order is significant and fixed.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bacon_mcp.exceptions import ToolArgumentError
from bacon_mcp.tools.cargo.constants import (
    FIX_FLAGS,
    JSON_MESSAGE_FORMAT,
    PATH_DESCRIPTION,
)

__all__ = [
    "BuildOptions",
    "CargoTestOptions",
    "CheckOptions",
    "ClippyOptions",
    "ClippyStrictOptions",
    "DenyOptions",
    "DocOptions",
    "MacheteOptions",
    "OutdatedOptions",
    "ProjectOptions",
    "UdepsOptions",
    "input_schema",
    "parse_options",
    "QUALITY_CLIPPY_ARGS",
    "QUALITY_DOC_ARGS",
    "FMT_CHECK_ARGS",
    "METADATA_ARGS",
]

#: Lint groups enabled by clippy_strict, in flag order
STRICT_LINT_GROUPS: tuple[str, ...] = ("pedantic", "nursery", "cargo")

QUALITY_CLIPPY_ARGS: tuple[str, ...] = (
    "clippy",
    JSON_MESSAGE_FORMAT,
    "--all-targets",
    "--",
    "-W",
    "clippy::pedantic",
    "-W",
    "clippy::nursery",
)
QUALITY_DOC_ARGS: tuple[str, ...] = ("doc", JSON_MESSAGE_FORMAT, "--no-deps")
FMT_CHECK_ARGS: tuple[str, ...] = ("fmt", "--check")
METADATA_ARGS: tuple[str, ...] = ("metadata", "--no-deps", "--format-version=1")


class ProjectOptions(BaseModel):
    """Options shared by every tool."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    path: str = Field(description=PATH_DESCRIPTION)


OptionsT = TypeVar("OptionsT", bound=ProjectOptions)


class CheckOptions(ProjectOptions):
    all_targets: bool = Field(
        default=False,
        description="Check all targets (lib, bins, tests, examples). Default: false",
    )
    all_features: bool = Field(
        default=False,
        description="Activate all available features. Default: false",
    )

    def to_cargo_args(self) -> list[str]:
        args = ["check", JSON_MESSAGE_FORMAT]
        if self.all_targets:
            args.append("--all-targets")
        if self.all_features:
            args.append("--all-features")
        return args


class ClippyOptions(ProjectOptions):
    """Options for ``bacon_clippy``.

    Lint flags go after ``--`` in this order: lint groups, ``-D warnings``,
    then one flag pair per entry of ``allow``, ``warn`` and ``deny``.
    """

    all_targets: bool = Field(
        default=True,
        description="Check all targets (lib, bins, tests, examples). Default: true",
    )
    pedantic: bool = Field(
        default=False,
        description=(
            "Enable pedantic lints - extra strict checks for code quality. "
            "Warns on missing docs, unwrap usage, etc. Default: false"
        ),
    )
    nursery: bool = Field(
        default=False,
        description=(
            "Enable nursery lints - experimental lints that may have false "
            "positives but catch edge cases. Default: false"
        ),
    )
    cargo: bool = Field(
        default=False,
        description=(
            "Enable cargo lints - checks for Cargo.toml issues like missing "
            "metadata, wildcard dependencies. Default: false"
        ),
    )
    restriction: bool = Field(
        default=False,
        description=(
            "Enable restriction lints - very strict lints (panic, unwrap, "
            "expect, indexing). Usually too strict for most code. Default: false"
        ),
    )
    deny_warnings: bool = Field(
        default=False,
        description=(
            "Treat all warnings as errors (deny instead of warn). "
            "Useful for CI. Default: false"
        ),
    )
    fix: bool = Field(
        default=False,
        description="Automatically apply suggested fixes where possible. Default: false",
    )
    allow: list[str] = Field(
        default_factory=list,
        description=(
            "List of specific lints to allow (ignore). "
            "E.g., ['clippy::too_many_arguments']"
        ),
    )
    warn: list[str] = Field(
        default_factory=list,
        description="List of specific lints to warn on. E.g., ['clippy::unwrap_used']",
    )
    deny: list[str] = Field(
        default_factory=list,
        description=(
            "List of specific lints to deny (treat as errors). "
            "E.g., ['clippy::panic']"
        ),
    )

    def enabled_groups(self) -> list[str]:
        """Lint groups switched on, in flag order."""
        groups = {
            "pedantic": self.pedantic,
            "nursery": self.nursery,
            "cargo": self.cargo,
            "restriction": self.restriction,
        }
        return [name for name, enabled in groups.items() if enabled]

    def lint_flags(self) -> list[str]:
        flags: list[str] = []
        for group in self.enabled_groups():
            flags += ["-W", f"clippy::{group}"]
        if self.deny_warnings:
            flags += ["-D", "warnings"]
        for lint in self.allow:
            flags += ["-A", lint]
        for lint in self.warn:
            flags += ["-W", lint]
        for lint in self.deny:
            flags += ["-D", lint]
        return flags

    def to_cargo_args(self) -> list[str]:
        args = ["clippy", JSON_MESSAGE_FORMAT]
        if self.all_targets:
            args.append("--all-targets")
        if self.fix:
            args.extend(FIX_FLAGS)
        flags = self.lint_flags()
        if flags:
            args += ["--", *flags]
        return args


class ClippyStrictOptions(ProjectOptions):
    all_targets: bool = Field(
        default=True,
        description="Check all targets (lib, bins, tests, examples). Default: true",
    )
    fix: bool = Field(
        default=False,
        description="Automatically apply suggested fixes where possible. Default: false",
    )

    def to_cargo_args(self) -> list[str]:
        args = ["clippy", JSON_MESSAGE_FORMAT]
        if self.all_targets:
            args.append("--all-targets")
        if self.fix:
            args.extend(FIX_FLAGS)
        args.append("--")
        for group in STRICT_LINT_GROUPS:
            args += ["-W", f"clippy::{group}"]
        args += ["-D", "warnings"]
        return args


class CargoTestOptions(ProjectOptions):
    filter: str | None = Field(
        default=None,
        description="Filter to run only tests matching this pattern (e.g., 'test_parse')",
    )
    no_capture: bool = Field(
        default=False,
        description="Show stdout/stderr from tests (don't capture). Default: false",
    )

    def to_cargo_args(self) -> list[str]:
        args = ["test"]
        if self.filter:
            args.append(self.filter)
        if self.no_capture:
            args += ["--", "--nocapture"]
        return args


class BuildOptions(ProjectOptions):
    release: bool = Field(
        default=False,
        description="Build in release mode with optimizations. Default: false",
    )
    all_targets: bool = Field(
        default=False, description="Build all targets. Default: false"
    )

    def to_cargo_args(self) -> list[str]:
        args = ["build", JSON_MESSAGE_FORMAT]
        if self.release:
            args.append("--release")
        if self.all_targets:
            args.append("--all-targets")
        return args


class DocOptions(ProjectOptions):
    no_deps: bool = Field(
        default=True,
        description="Don't build documentation for dependencies. Default: true",
    )
    document_private: bool = Field(
        default=False, description="Document private items as well. Default: false"
    )
    open: bool = Field(
        default=False,
        description="Open documentation in browser after building. Default: false",
    )

    def to_cargo_args(self) -> list[str]:
        args = ["doc", JSON_MESSAGE_FORMAT]
        if self.no_deps:
            args.append("--no-deps")
        if self.document_private:
            args.append("--document-private-items")
        if self.open:
            args.append("--open")
        return args


class DenyOptions(ProjectOptions):
    check: Literal["all", "advisories", "bans", "licenses", "sources"] = Field(
        default="all",
        description=(
            "Which checks to run: 'all' (default), 'advisories' (security), "
            "'bans' (denied crates/duplicates), 'licenses', or 'sources' "
            "(allowed registries)"
        ),
    )

    def to_cargo_args(self) -> list[str]:
        args = ["deny", "check"]
        if self.check != "all":
            args.append(self.check)
        return args


class OutdatedOptions(ProjectOptions):
    depth: int = Field(
        default=1,
        ge=0,
        description=(
            "How deep in the dependency tree to check. "
            "Default: 1 (direct deps only)"
        ),
    )

    def to_cargo_args(self) -> list[str]:
        return ["outdated", "--depth", str(self.depth)]


class UdepsOptions(ProjectOptions):
    all_targets: bool = Field(
        default=True,
        description="Check all targets for unused dependencies. Default: true",
    )

    def to_cargo_args(self, toolchain: str = "+nightly") -> list[str]:
        args = [toolchain, "udeps"]
        if self.all_targets:
            args.append("--all-targets")
        return args


class MacheteOptions(ProjectOptions):
    fix: bool = Field(
        default=False,
        description=(
            "Automatically remove unused dependencies from Cargo.toml. "
            "Default: false"
        ),
    )

    def to_cargo_args(self) -> list[str]:
        args = ["machete"]
        if self.fix:
            args.append("--fix")
        return args


def _strip_titles(node: Any) -> Any:
    if isinstance(node, dict):
        return {k: _strip_titles(v) for k, v in node.items() if k != "title"}
    if isinstance(node, list):
        return [_strip_titles(v) for v in node]
    return node


def input_schema(model: type[ProjectOptions]) -> dict[str, Any]:
    """JSON schema advertised for a tool's arguments."""
    schema = model.model_json_schema()
    return {
        "type": "object",
        "properties": _strip_titles(schema.get("properties", {})),
        "required": list(schema.get("required", [])),
    }


def parse_options(
    model: type[OptionsT], args: dict[str, Any]
) -> OptionsT:
    """Validate a tool's argument bag.

    Raises:
        ToolArgumentError: On a missing or malformed argument.
    """
    try:
        return model.model_validate(args)
    except ValidationError as e:
        first_error = e.errors()[0]
        argument = ".".join(str(loc) for loc in first_error["loc"])
        raise ToolArgumentError(
            f"Invalid argument '{argument}': {first_error['msg']}",
            argument=argument,
        ) from e
