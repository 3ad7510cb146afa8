"""AppContext — what every subcommand receives via ``@click.pass_obj``.

Holds the resolved settings, sets up logging, discovers plugins on first
use, and decides where a ServiceResult is written and with which exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from structcheck.config.logging import configure_logging, get_logger
from structcheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from structcheck.config.settings import StructcheckSettings
    from structcheck.plugins.manager import PluginManager
    from structcheck.services.result import ServiceResult

log = get_logger(__name__)


class AppContext:
    """Per-invocation state shared by the root group and its subcommands.

    ``--help`` and ``--version`` never touch :attr:`plugins`, so they never
    import third-party plugin code.
    """

    def __init__(self, settings: StructcheckSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """Plugin manager, discovered on first access unless plugins are disabled."""
        if self._plugins is None:
            from structcheck.plugins.manager import PluginManager

            manager = PluginManager()
            if self.settings.plugins.enabled:
                names = manager.discover_and_load(local_dir=self.settings.local_plugin_dir)
                log.debug("plugins_loaded", plugins=names, formats=manager.formats())
            self._plugins = manager
        return self._plugins

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Write *result* and exit 1 if it is a failure.

        Successful results go to stdout; failures go to stderr. Warnings go
        to stderr as ``WARNING:`` lines unless the output is JSON (they are
        in the payload) or quiet.
        """
        out = self.output_settings
        click.echo(format_result(result, settings=out), err=not result.ok)
        if not (out.json_output or out.quiet):
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
