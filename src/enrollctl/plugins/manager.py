"""PluginManager — a thin wrapper over ``pluggy.PluginManager``.

Plugins are found by pluggy's entry-point loader under the
``enrollctl.plugins`` group. An entry point may name a plugin object or a
plugin class; classes are swapped for an instance after loading so their
hook methods are bound.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from enrollctl.plugins.hookspecs import EnrollctlHookSpec

PROJECT_NAME = "enrollctl"
ENTRY_POINT_GROUP = "enrollctl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Registers plugins and exposes the hook relay services dispatch through."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(EnrollctlHookSpec)
        self._loaded = False

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    @property
    def is_loaded(self) -> bool:
        """True once :meth:`discover_and_load` has run."""
        return self._loaded

    def discover_and_load(self) -> list[str]:
        """Register every installed entry-point plugin; return all plugin names."""
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d entry-point plugin(s)", count)
        self._instantiate_plugin_classes()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    def _instantiate_plugin_classes(self) -> None:
        """Replace registered plugin classes with instances of them.

        Hooks called on a class leave ``self`` unbound. A class whose
        constructor fails is logged and dropped.
        """
        for plugin in self.get_plugins():
            if not inspect.isclass(plugin) or not self._pm.get_hookcallers(plugin):
                continue
            name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Dropping plugin %s: failed to instantiate", name, exc_info=True)
                continue
            self.register_plugin(instance, name=name)
