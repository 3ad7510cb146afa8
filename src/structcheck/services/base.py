"""BaseService — shared foundation for structcheck services.

Every service receives the resolved settings and a plugin manager at
construction time. Services never print; they return ServiceResult.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from structcheck.config.settings import StructcheckSettings
    from structcheck.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CheckService(BaseService):
            def check(self, paths: list[Path], schema_ref: str | None) -> ServiceResult:
                ...
    """

    def __init__(self, settings: StructcheckSettings, plugins: PluginManager) -> None:
        self._settings = settings
        self._plugins = plugins

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call *hook_name* on every plugin.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        hook = getattr(self._plugins.hook, hook_name)
        try:
            hook(**payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")
