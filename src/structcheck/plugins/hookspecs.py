"""Pluggy hook specifications for structcheck.

Two setup-time hooks let plugins teach ``structcheck check`` new document
formats. One event hook fires after every checked document.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("structcheck")

DocumentLoader = Callable[[Path], Any]


class StructcheckHookSpec:
    """Hook specifications for the structcheck plugin system."""

    @hookspec
    def register_document_loaders(self) -> dict[str, DocumentLoader] | None:
        """Return format name -> loader mappings.

        A loader takes a path and returns the parsed document, raising
        ``DocumentLoadError`` when the file cannot be parsed.
        """

    @hookspec
    def register_format_suffixes(self) -> dict[str, str] | None:
        """Return file suffix (``".yml"``) -> format name mappings."""

    @hookspec
    def post_check(self, schema_ref: str, path: str, valid: bool) -> None:
        """Called after a document has been checked."""
