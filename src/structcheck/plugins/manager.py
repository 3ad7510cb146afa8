"""PluginManager — where document formats come from.

Plugins are found in two places: installed distributions advertising the
``structcheck.plugins`` entry-point group, and single ``*.py`` files in a
project's ``.structcheck/plugins/`` directory. Every registered plugin is
asked once for the loaders and suffixes it contributes; the resulting
tables are what :class:`~structcheck.services.check.CheckService` reads.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

import pluggy

from structcheck.plugins.builtins.loaders import BuiltinLoadersPlugin
from structcheck.plugins.hookspecs import DocumentLoader, StructcheckHookSpec

PROJECT_NAME = "structcheck"
ENTRY_POINT_GROUP = "structcheck.plugins"
LOCAL_MODULE_PREFIX = "structcheck_local_plugin_"

logger = logging.getLogger(__name__)


class PluginManager:
    """Registry of plugins plus the format tables they contribute.

    The built-in JSON/YAML/TOML plugin is registered on construction, so
    those formats work even if discovery never runs. Later registrations
    override earlier ones for the same format or suffix.
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(StructcheckHookSpec)
        self._loaded = False
        self._loaders: dict[str, DocumentLoader] = {}
        self._suffixes: dict[str, str] = {}
        self._collected: set[str] = set()
        self.register_plugin(BuiltinLoadersPlugin(), name="builtin-loaders")

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then local ones from *local_dir*.

        Returns the names of all registered plugins.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if not path.name.startswith("_"):
                    self._register_local_file(path)
        for plugin in self._pm.get_plugins():
            name = self._name_of(plugin)
            if name not in self._collected:
                self._collect_registrations(plugin, name)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register *plugin* and collect its loaders and suffixes now."""
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        self._collect_registrations(plugin, name)
        logger.debug("Registered plugin: %s", name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has run."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._name_of(p) for p in self._pm.get_plugins()]

    def loader_for(self, fmt: str) -> DocumentLoader | None:
        return self._loaders.get(fmt)

    def formats(self) -> list[str]:
        """Format names with a registered loader, sorted."""
        return sorted(self._loaders)

    def suffixes(self) -> dict[str, str]:
        """Copy of the lower-cased suffix -> format table."""
        return dict(self._suffixes)

    def _name_of(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or type(plugin).__name__

    # -- discovery -----------------------------------------------------

    def _register_local_file(self, path: Path) -> None:
        """Import *path* and register each hook-carrying class it defines.

        A file that fails to import or a class that fails to instantiate is
        logged and skipped.
        """
        module = self._import_local(path)
        if module is None:
            return
        for cls in self._plugin_classes(module):
            try:
                self.register_plugin(cls(), name=module.__name__)
            except Exception:
                logger.warning("Failed to instantiate plugin class %s from %s", cls.__name__, path, exc_info=True)

    @staticmethod
    def _import_local(path: Path) -> ModuleType | None:
        module_name = f"{LOCAL_MODULE_PREFIX}{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            logger.warning("Could not create module spec for %s", path)
            return None
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            logger.warning("Failed to load local plugin %s", path, exc_info=True)
            return None
        return module

    @classmethod
    def _plugin_classes(cls, module: ModuleType) -> Iterator[type]:
        for _name, obj in inspect.getmembers(module, inspect.isclass):
            if obj.__module__ == module.__name__ and cls._has_hook_impls(obj):
                yield obj

    def _instantiate_class_plugins(self) -> None:
        """Swap entry points that registered a class for an instance of it.

        Hooks called on a class object would run with ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue
            name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Failed to instantiate entry-point plugin %s", name, exc_info=True)
                continue
            self._pm.register(instance, name=name)
            logger.debug("Instantiated entry-point plugin: %s", name)

    # -- format tables -------------------------------------------------

    def _collect_registrations(self, plugin: object, plugin_name: str) -> None:
        self._collected.add(plugin_name)
        for fmt, loader in self._call_setup_hook(plugin, plugin_name, "register_document_loaders").items():
            if isinstance(fmt, str) and callable(loader):
                self._loaders[fmt] = loader
            else:
                logger.warning("Skipping loader registration %r from plugin %s", fmt, plugin_name)
        for suffix, fmt in self._call_setup_hook(plugin, plugin_name, "register_format_suffixes").items():
            if isinstance(suffix, str) and isinstance(fmt, str):
                self._suffixes[suffix.lower()] = fmt
            else:
                logger.warning("Skipping suffix registration %r from plugin %s", suffix, plugin_name)

    @staticmethod
    def _call_setup_hook(plugin: object, plugin_name: str, hook_name: str) -> dict[object, object]:
        """Call one setup hook on *plugin* alone; problems become warnings."""
        hook = getattr(plugin, hook_name, None)
        if hook is None:
            return {}
        try:
            mapping = hook()
        except Exception:
            logger.warning("Failed to collect %s from plugin %s", hook_name, plugin_name, exc_info=True)
            return {}
        if mapping is None:
            return {}
        if not isinstance(mapping, dict):
            logger.warning("Plugin %s returned non-dict from %s", plugin_name, hook_name)
            return {}
        return mapping

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether any public method of *cls* carries ``@hookimpl``.

        ``HookimplMarker("structcheck")`` tags decorated functions with a
        ``structcheck_impl`` attribute.
        """
        return any(
            callable(member) and getattr(member, f"{PROJECT_NAME}_impl", None)
            for name, member in inspect.getmembers(cls)
            if not name.startswith("_")
        )
