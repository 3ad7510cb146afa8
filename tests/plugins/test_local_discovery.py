"""Tests for local directory plugin discovery in PluginManager."""

from __future__ import annotations

import sys
from pathlib import Path

import pluggy

from structcheck.plugins.manager import PluginManager

hookimpl = pluggy.HookimplMarker("structcheck")

# -- Plugin source code used in tests ------------------------------------------

_VALID_PLUGIN_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("structcheck")


class LocalTestPlugin:
    \"\"\"A minimal local plugin for testing.\"\"\"

    @hookimpl
    def post_check(self, schema_ref: str, path: str, valid: bool) -> None:
        pass
"""

_CAPTURE_PLUGIN_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("structcheck")

calls: list[dict] = []


class CheckCapturePlugin:
    \"\"\"Captures post_check calls for verification.\"\"\"

    @hookimpl
    def post_check(self, schema_ref: str, path: str, valid: bool) -> None:
        calls.append({"schema_ref": schema_ref, "path": path, "valid": valid})
"""

_LOADER_PLUGIN_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("structcheck")


def load_lines(path):
    return path.read_text().splitlines()


class LinesPlugin:
    @hookimpl
    def register_document_loaders(self):
        return {"lines": load_lines}

    @hookimpl
    def register_format_suffixes(self):
        return {".lines": "lines"}
"""

_SYNTAX_ERROR_SRC = """\
def broken(
    # missing closing paren and colon
"""

_NO_HOOKS_SRC = """\
class PlainClass:
    \"\"\"A class with no hookimpl-decorated methods.\"\"\"
    def hello(self) -> str:
        return "world"
"""


class TestLocalDiscovery:
    """Tests for local single-file plugin discovery."""

    def test_discovers_local_plugin(self, tmp_path: Path) -> None:
        (tmp_path / "myplugin.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path)

        assert "structcheck_local_plugin_myplugin" in pm.list_plugin_names()

    def test_local_plugin_registers_loader(self, tmp_path: Path) -> None:
        (tmp_path / "lines.py").write_text(_LOADER_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path)

        assert pm.suffixes()[".lines"] == "lines"
        doc = tmp_path / "a.lines"
        doc.write_text("x\ny\n")
        assert pm.loader_for("lines")(doc) == ["x", "y"]

    def test_skips_bad_plugin_gracefully(self, tmp_path: Path) -> None:
        """A .py file with a SyntaxError is logged and skipped, no crash."""
        (tmp_path / "broken.py").write_text(_SYNTAX_ERROR_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert all("broken" not in n for n in names)
        assert "structcheck_local_plugin_broken" not in sys.modules

    def test_nonexistent_dir_is_noop(self, tmp_path: Path) -> None:
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path / "does_not_exist")
        assert pm.is_loaded is True
        assert isinstance(names, list)

    def test_local_plugin_hooks_fire(self, tmp_path: Path) -> None:
        (tmp_path / "capture.py").write_text(_CAPTURE_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm._register_local_file(tmp_path / "capture.py")

        pm.hook.post_check(schema_ref="app:user", path="a.json", valid=True)

        mod = sys.modules["structcheck_local_plugin_capture"]
        assert mod.calls == [{"schema_ref": "app:user", "path": "a.json", "valid": True}]  # type: ignore[attr-defined]

    def test_skips_underscore_prefixed_files(self, tmp_path: Path) -> None:
        (tmp_path / "_helpers.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path)

        assert all("_helpers" not in n for n in pm.list_plugin_names())

    def test_skips_classes_without_hookimpls(self, tmp_path: Path) -> None:
        (tmp_path / "plain.py").write_text(_NO_HOOKS_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path)

        assert all("plain" not in n for n in pm.list_plugin_names())

    def test_has_hook_impls_positive(self) -> None:
        class _WithHook:
            @hookimpl
            def post_check(self, schema_ref: str, path: str, valid: bool) -> None:
                pass

        assert PluginManager._has_hook_impls(_WithHook) is True

    def test_has_hook_impls_negative(self) -> None:
        class _NoHook:
            def some_method(self) -> None:
                pass

        assert PluginManager._has_hook_impls(_NoHook) is False
