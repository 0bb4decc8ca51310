"""``bacon-mcp`` command line.

``bacon-mcp serve`` runs the MCP server on stdio; ``list-tools`` and
``call`` exercise the same tools without an MCP client.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

# BACON_MCP_* variables from ./.env must be visible before config loads
load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

from bacon_mcp import __version__  # noqa: E402
from bacon_mcp.cli.commands import call, list_tools, serve  # noqa: E402
from bacon_mcp.cli.context import CLIContext, ExitCode  # noqa: E402
from bacon_mcp.cli.output import format_error  # noqa: E402
from bacon_mcp.config import BaconConfig, load_config  # noqa: E402
from bacon_mcp.exceptions import ConfigError  # noqa: E402
from bacon_mcp.logging import configure_logging  # noqa: E402

VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _log_level(config: BaconConfig, verbose: int, quiet: bool) -> int:
    # --quiet beats -v, which beats the configured verbosity
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG if verbose > 1 else logging.INFO
    return VERBOSITY_LEVELS.get(config.verbosity, logging.WARNING)


def _describe_config_error(e: ConfigError) -> str:
    details = []
    if e.field:
        details.append(f"Field: {e.field}")
    if e.value is not None:
        details.append(f"Value: {e.value}")
    return format_error(e.message, details=details)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="bacon-mcp")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, path_type=str),
    default=None,
    help="YAML config file that overrides every other source.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Log more (-v INFO, -vv DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Log errors only.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    verbose: int,
    quiet: bool,
) -> None:
    """bacon-mcp - cargo diagnostics for AI assistants over MCP."""
    ctx.ensure_object(dict)

    config_path = Path(config_file) if config_file else None
    try:
        config = load_config(config_path)
    except ConfigError as e:
        # Logging is not configured yet
        click.echo(_describe_config_error(e), err=True)
        ctx.exit(ExitCode.FAILURE)

    configure_logging(level=_log_level(config, verbose, quiet))
    ctx.obj["cli_ctx"] = CLIContext(config=config)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (serve, list_tools, call):
    cli.add_command(_command)

if __name__ == "__main__":
    cli()
