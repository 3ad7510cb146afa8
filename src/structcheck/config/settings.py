"""StructcheckSettings — one object for CLI flags, env vars and config file.

Sources, highest priority first: keyword arguments (the CLI flags),
``STRUCTCHECK_*`` environment variables (``__`` separates nested keys, as
in ``STRUCTCHECK_CHECK__SCHEMA``), the discovered config file, and the
defaults baked into :mod:`structcheck.config.models`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from structcheck.config.discovery import find_config, read_config_table
from structcheck.config.models import CheckConfig, PluginsConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings read from ``structcheck.toml`` or ``[tool.structcheck]``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._table: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._table = read_config_table(toml_path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        return dict(self._table)


# pydantic-settings builds sources from a classmethod, so the file chosen
# by from_cli() reaches settings_customise_sources() through this slot.
_source_path = threading.local()


class StructcheckSettings(BaseSettings):
    """Resolved settings for one structcheck invocation.

    Attributes:
        project_root: Directory schema references are imported from: the
            config file's directory, else the working directory.
        config_path: The config file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STRUCTCHECK_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    check: CheckConfig = Field(default_factory=CheckConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @property
    def local_plugin_dir(self) -> Path:
        """Absolute directory scanned for single-file plugins."""
        return self.project_root / self.plugins.local_dir

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_source_path, "value", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> StructcheckSettings:
        """Build settings for a CLI invocation.

        An explicit *config_path* that does not exist is ignored rather
        than searched around. Without one, the config file is discovered
        from *project_root* (or the working directory).
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                toml_path = None
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path is not None else Path.cwd()

        _source_path.value = toml_path
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        finally:
            _source_path.value = None
