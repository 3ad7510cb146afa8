"""Built-in document loaders: JSON, YAML and TOML."""

from __future__ import annotations

import pluggy

from structcheck.infrastructure.documents import (
    DEFAULT_SUFFIXES,
    load_json,
    load_toml,
    load_yaml,
)
from structcheck.plugins.hookspecs import DocumentLoader

hookimpl = pluggy.HookimplMarker("structcheck")


class BuiltinLoadersPlugin:
    """Registers the loaders for the formats structcheck reads out of the box."""

    @hookimpl
    def register_document_loaders(self) -> dict[str, DocumentLoader]:
        return {"json": load_json, "yaml": load_yaml, "toml": load_toml}

    @hookimpl
    def register_format_suffixes(self) -> dict[str, str]:
        return dict(DEFAULT_SUFFIXES)
