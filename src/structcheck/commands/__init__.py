"""Subcommand modules for structcheck.

Provides register_commands() which uses deferred imports to keep
``structcheck --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from structcheck.commands.check import check
    from structcheck.commands.describe import describe

    cli.add_command(check)
    cli.add_command(describe)
