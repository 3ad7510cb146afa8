"""Command: print a schema in builder notation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from structcheck.commands._base import ExamplesCommand

if TYPE_CHECKING:
    from structcheck.commands._context import AppContext


@click.command(
    cls=ExamplesCommand,
    examples="""\
  structcheck describe myapp.schemas:user
  structcheck --json describe myapp.schemas:file_tree""",
)
@click.argument("schema_ref")
@click.pass_obj
def describe(app: AppContext, schema_ref: str) -> None:
    """Show the schema referenced by SCHEMA_REF (module:attribute)."""
    from structcheck.services.schemas import SchemaService

    app.emit(SchemaService(app.settings, app.plugins).describe(schema_ref))
