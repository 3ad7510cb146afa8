"""Command: check documents against a schema."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from structcheck.commands._base import ExamplesCommand

if TYPE_CHECKING:
    from structcheck.commands._context import AppContext


@click.command(
    cls=ExamplesCommand,
    examples="""\
  structcheck check user.json --schema myapp.schemas:user
  structcheck check config/*.yaml --schema myapp.schemas:service_config
  structcheck check data.txt --schema myapp.schemas:payload --format json
  structcheck check a.json b.json --fail-fast
  structcheck --json check order.toml --schema shop.schemas:order""",
)
@click.argument(
    "documents",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-s",
    "--schema",
    "schema_ref",
    default=None,
    help="Schema reference as module:attribute (default: [check] schema).",
)
@click.option(
    "-f",
    "--format",
    "fmt",
    default=None,
    help="Document format (json, yaml, toml, or a plugin format). Default: by suffix.",
)
@click.option(
    "--fail-fast/--no-fail-fast",
    default=None,
    help="Stop at the first invalid document.",
)
@click.pass_obj
def check(
    app: AppContext,
    documents: tuple[Path, ...],
    schema_ref: str | None,
    fmt: str | None,
    fail_fast: bool | None,
) -> None:
    """Check that DOCUMENTS match a schema."""
    from structcheck.services.check import CheckService

    svc = CheckService(app.settings, app.plugins)
    app.emit(svc.check(list(documents), schema_ref=schema_ref, fmt=fmt, fail_fast=fail_fast))
