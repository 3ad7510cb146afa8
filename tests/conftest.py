"""Shared pytest fixtures for structcheck tests."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from structcheck.config.settings import StructcheckSettings
from structcheck.plugins.manager import PluginManager

# Schema module written into the temporary project root. Each test gets a
# fresh module name so sys.modules caching never leaks between tests.
_SCHEMA_MODULE_SRC = """\
from structcheck import (
    NUMBER,
    RECURSION,
    STRING,
    array,
    literal,
    object_of,
    recursive,
    union,
)

user = object_of({"name": STRING}, {"age": NUMBER})

tree = recursive(
    union(
        object_of({"type": literal("File"), "name": STRING}),
        object_of({"type": literal("Folder"), "items": array(RECURSION)}),
    )
)

not_a_schema = 42

unbound = array(RECURSION)


class Models:
    user = user
"""

_counter = 0


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory; CWD is moved there for the test."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STRUCTCHECK_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def schema_module(project_root: Path) -> Generator[str]:
    """Write a schema module into the project root and return its name."""
    global _counter
    _counter += 1
    name = f"sc_test_schemas_{_counter}"
    (project_root / f"{name}.py").write_text(_SCHEMA_MODULE_SRC, encoding="utf-8")
    try:
        yield name
    finally:
        sys.modules.pop(name, None)


@pytest.fixture
def settings(project_root: Path) -> StructcheckSettings:
    return StructcheckSettings.from_cli(project_root=project_root)


@pytest.fixture
def plugins() -> PluginManager:
    """Plugin manager with only the built-in loaders registered."""
    return PluginManager()


@pytest.fixture
def write_json(project_root: Path) -> Callable[[str, Any], Path]:
    """Return a helper that writes *value* as JSON under the project root."""

    def _write(name: str, value: Any) -> Path:
        path = project_root / name
        path.write_text(json.dumps(value), encoding="utf-8")
        return path

    return _write
