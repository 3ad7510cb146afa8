"""Document loading — turn files on disk into plain Python values.

Loaders return only the value kinds the validator understands: dicts,
lists, str, int, float, bool and None. ``undefined`` never comes out of a
file; an absent key is simply absent.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

DEFAULT_SUFFIXES: dict[str, str] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
}


class DocumentLoadError(Exception):
    """A document could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _new_yaml() -> YAML:
    """Create a fresh safe-mode YAML parser.

    Safe mode yields builtin dicts and lists rather than round-trip
    containers, and never constructs arbitrary Python objects.
    """
    return YAML(typ="safe", pure=True)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(path, str(exc)) from exc


def load_json(path: Path) -> Any:
    try:
        return json.loads(_read_text(path))
    except ValueError as exc:
        raise DocumentLoadError(path, f"invalid JSON: {exc}") from exc


def load_yaml(path: Path) -> Any:
    try:
        return _new_yaml().load(_read_text(path))
    except (YAMLError, ValueError) as exc:
        raise DocumentLoadError(path, f"invalid YAML: {exc}") from exc


def load_toml(path: Path) -> Any:
    try:
        return tomllib.loads(_read_text(path))
    except ValueError as exc:
        raise DocumentLoadError(path, f"invalid TOML: {exc}") from exc


def detect_format(path: Path, suffixes: dict[str, str] | None = None) -> str | None:
    """Return the format name registered for *path*'s suffix, or None."""
    table = DEFAULT_SUFFIXES if suffixes is None else suffixes
    return table.get(path.suffix.lower())
