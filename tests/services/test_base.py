"""Tests for BaseService and event dispatch."""

from __future__ import annotations

import pluggy

from structcheck.config.settings import StructcheckSettings
from structcheck.plugins.manager import PluginManager
from structcheck.services.base import BaseService
from structcheck.services.check import CheckService
from structcheck.services.schemas import SchemaService

hookimpl = pluggy.HookimplMarker("structcheck")


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, bool]] = []

    @hookimpl
    def post_check(self, schema_ref: str, path: str, valid: bool) -> None:
        self.calls.append((schema_ref, path, valid))


class _Exploding:
    @hookimpl
    def post_check(self, schema_ref: str, path: str, valid: bool) -> None:
        raise RuntimeError("plugin bug")


class TestBaseService:
    def test_dependencies_stored(self, settings: StructcheckSettings, plugins: PluginManager) -> None:
        service = BaseService(settings, plugins)
        assert service._settings is settings
        assert service._plugins is plugins

    def test_services_inherit(self) -> None:
        assert issubclass(CheckService, BaseService)
        assert issubclass(SchemaService, BaseService)


class TestDispatchEvent:
    def test_hook_receives_payload(self, settings: StructcheckSettings, plugins: PluginManager) -> None:
        recorder = _Recorder()
        plugins.register_plugin(recorder, name="recorder")
        warnings: list[str] = []

        BaseService(settings, plugins)._dispatch_event(
            "post_check",
            {"schema_ref": "app:user", "path": "a.json", "valid": False},
            warnings,
        )

        assert recorder.calls == [("app:user", "a.json", False)]
        assert warnings == []

    def test_plugin_failure_becomes_warning(self, settings: StructcheckSettings, plugins: PluginManager) -> None:
        plugins.register_plugin(_Exploding(), name="exploding")
        warnings: list[str] = []

        BaseService(settings, plugins)._dispatch_event(
            "post_check",
            {"schema_ref": "app:user", "path": "a.json", "valid": True},
            warnings,
        )

        assert warnings == ["Event dispatch failed for post_check"]
