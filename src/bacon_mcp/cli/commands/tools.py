from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from bacon_mcp.cli.context import ExitCode, async_command, get_cli_context
from bacon_mcp.cli.output import format_error
from bacon_mcp.runners import CargoRunner
from bacon_mcp.tools.cargo import create_cargo_tools, is_error, response_text


@click.command("list-tools")
@click.pass_context
def list_tools(ctx: click.Context) -> None:
    """List the tools the server exposes.

    Examples:
        bacon-mcp list-tools
    """
    cli_ctx = get_cli_context(ctx)
    tools = create_cargo_tools(CargoRunner(cli_ctx.config.cargo))
    for name, tool in tools.items():
        click.echo(name)
        click.echo(f"    {tool.description}")


def _parse_arguments(raw: str | None) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e.msg}", param_hint="--args") from e
    if not isinstance(parsed, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--args")
    return parsed


@click.command()
@click.argument("tool_name")
@click.option(
    "-p",
    "--path",
    "project_path",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    help="Rust project directory. Defaults to the current directory.",
)
@click.option(
    "-a",
    "--args",
    "raw_args",
    default=None,
    help='Extra tool arguments as a JSON object, e.g. \'{"pedantic": true}\'.',
)
@click.pass_context
@async_command
async def call(
    ctx: click.Context,
    tool_name: str,
    project_path: str | None,
    raw_args: str | None,
) -> None:
    """Invoke one tool locally and print its report.

    Exits with status 1 when the tool returns an error response.

    Examples:
        bacon-mcp call bacon_check --path ~/src/my-crate
        bacon-mcp call bacon_clippy --args '{"pedantic": true}'
    """
    cli_ctx = get_cli_context(ctx)
    tools = create_cargo_tools(CargoRunner(cli_ctx.config.cargo))

    tool = tools.get(tool_name)
    if tool is None:
        click.echo(
            format_error(
                f"Unknown tool: {tool_name}",
                suggestion="Run 'bacon-mcp list-tools' to see available tools",
            ),
            err=True,
        )
        raise SystemExit(ExitCode.USAGE)

    arguments = _parse_arguments(raw_args)
    if project_path is not None:
        arguments["path"] = str(Path(project_path).resolve())
    else:
        arguments.setdefault("path", str(Path.cwd()))

    response = await tool.handler(arguments)
    click.echo(response_text(response))
    if is_error(response):
        raise SystemExit(ExitCode.FAILURE)
