"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, structcheck.toml only contains
overrides. A project needs no config file at all; the most common entry
is ``[check] schema`` naming the schema to check documents against.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    schema_ref: str | None = Field(default=None, alias="schema")
    format: str = "auto"
    fail_fast: bool = False


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".structcheck/plugins"


class StructcheckConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    check: CheckConfig = Field(default_factory=CheckConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
