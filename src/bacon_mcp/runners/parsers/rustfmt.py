"""Parser for ``cargo fmt --check`` output."""

from __future__ import annotations

__all__ = ["RustfmtCheckParser"]


class RustfmtCheckParser:
    """Collect the ``Diff in <file>:<line>:`` headers rustfmt prints."""

    prefix: str = "Diff in"

    def parse(self, output: str) -> list[str]:
        """Return the diff header lines in order."""
        return [line for line in output.split("\n") if line.startswith(self.prefix)]
