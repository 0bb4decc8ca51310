"""Text helpers for CLI output."""

from __future__ import annotations

__all__ = ["format_error"]


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Render an error for stderr.

    Example:
        >>> print(format_error("Invalid JSON", suggestion="Pass an object"))
        Error: Invalid JSON
        Suggestion: Pass an object
    """
    lines = [f"Error: {message}", *(f"  {d}" for d in details or ())]
    if suggestion:
        lines.append(f"Suggestion: {suggestion}")
    return "\n".join(lines)
