"""Locate and read structcheck configuration.

Configuration lives either in a dedicated ``structcheck.toml`` or in the
``[tool.structcheck]`` table of a project's ``pyproject.toml``. Both are
searched from the working directory upwards; at any one level the
dedicated file wins. ``STRUCTCHECK_CONFIG`` names a file explicitly and
turns the search off.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from structcheck.config.models import StructcheckConfig

CONFIG_FILENAME = "structcheck.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "STRUCTCHECK_CONFIG"


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the structcheck settings stored in *path*.

    For ``pyproject.toml`` that is the ``[tool.structcheck]`` table (empty
    when absent); any other file is structcheck's own and used whole.

    Raises:
        tomllib.TOMLDecodeError: *path* is not valid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return data.get("tool", {}).get("structcheck", {})
    return data


def _declares_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return "structcheck" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    A ``pyproject.toml`` only counts when it has a ``[tool.structcheck]``
    table, so an unrelated project file never ends the search early.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        dedicated = candidate_dir / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = candidate_dir / PYPROJECT_FILENAME
        if pyproject.is_file() and _declares_tool_table(pyproject):
            return pyproject
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> StructcheckConfig:
    """Validate the configuration at *path*, discovering it when omitted.

    Returns the all-defaults config when there is no file.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return StructcheckConfig()
    return StructcheckConfig.model_validate(read_config_table(path))
