"""Root ``structcheck`` command group.

Global flags are folded into :class:`StructcheckSettings` once, here, and
reach every subcommand through :class:`AppContext`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from structcheck import __version__
from structcheck.commands import register_commands
from structcheck.commands._context import AppContext
from structcheck.config.settings import StructcheckSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="structcheck")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the status line.")
@click.option("-v", "--verbose", is_flag=True, help="Show timings and debug logs.")
@click.option("--log-json", is_flag=True, help="Emit logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Config file to use instead of discovery.")
@click.option(
    "--root",
    "project_root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory schema modules are imported from (default: config file directory).",
)
@click.option("--no-plugins", is_flag=True, help="Skip third-party and local plugins.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, project_root: Path | None, no_plugins: bool, **flags: Any) -> None:
    """Check documents and values against structural schemas."""
    overrides: dict[str, Any] = dict(flags)
    if no_plugins:
        overrides["plugins"] = {"enabled": False}
    ctx.obj = AppContext(
        StructcheckSettings.from_cli(config_path=config_path, project_root=project_root, **overrides)
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
