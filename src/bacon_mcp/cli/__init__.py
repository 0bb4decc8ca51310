"""Command-line interface for bacon-mcp."""
