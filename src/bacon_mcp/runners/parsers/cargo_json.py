"""Parser for cargo's ``--message-format=json`` output."""

from __future__ import annotations

import json
from typing import Any

from bacon_mcp.runners.models import Diagnostic, DiagnosticLevel

__all__ = ["CargoJSONParser", "COMPILER_MESSAGE", "select_primary_span"]

#: ``reason`` tag of records that carry a rustc diagnostic
COMPILER_MESSAGE: str = "compiler-message"


def _decode_record(line: str) -> dict[str, Any] | None:
    """Decode one output line into a JSON object, or None to skip it."""
    stripped = line.strip()
    if not stripped.startswith("{"):
        return None
    try:
        record = json.loads(stripped)
    except json.JSONDecodeError:
        return None
    return record if isinstance(record, dict) else None


def select_primary_span(spans: list[Any]) -> dict[str, Any] | None:
    """Pick the span a diagnostic should be located at.

    The first span carrying a non-null ``label`` wins; otherwise the first
    span in emission order. Returns None when there are no spans.
    """
    usable = [s for s in spans if isinstance(s, dict)]
    for span in usable:
        if span.get("label") is not None:
            return span
    return usable[0] if usable else None


def _diagnostic_from_message(message: dict[str, Any]) -> Diagnostic | None:
    spans = message.get("spans")
    if not isinstance(spans, list):
        return None
    span = select_primary_span(spans)
    if span is None:
        return None

    try:
        line = int(span["line_start"])
        column = int(span["column_start"])
        file_name = str(span["file_name"])
    except (KeyError, TypeError, ValueError):
        return None

    code_info = message.get("code")
    code = code_info.get("code") if isinstance(code_info, dict) else None

    return Diagnostic(
        level=DiagnosticLevel.from_raw(str(message.get("level", ""))),
        message=str(message.get("message", "")),
        file=file_name,
        line=line,
        column=column,
        code=code,
        rendered=message.get("rendered"),
        suggestion=span.get("suggested_replacement"),
    )


class CargoJSONParser:
    """Parse line-delimited cargo JSON records into diagnostics.

    Only ``compiler-message`` records are considered; artifacts, build-script
    output and non-JSON lines are skipped. Messages without any span are
    dropped rather than given a made-up location. Duplicates are kept.
    """

    def parse(self, output: str) -> list[Diagnostic]:
        """Extract diagnostics from cargo JSON output."""
        diagnostics: list[Diagnostic] = []

        # Only "\n" ends a record: serde_json leaves U+2028 and U+0085 raw
        # inside strings, and str.splitlines would break the record there
        for line in output.split("\n"):
            record = _decode_record(line)
            if record is None or record.get("reason") != COMPILER_MESSAGE:
                continue
            message = record.get("message")
            if not isinstance(message, dict):
                continue
            diagnostic = _diagnostic_from_message(message)
            if diagnostic is not None:
                diagnostics.append(diagnostic)

        return diagnostics
