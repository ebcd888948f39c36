"""Extension layer — plugin system via pluggy.

Plugins are installed packages exposing an ``enrollctl.plugins`` entry point.
INVARIANT: Plugin failures are warnings, never errors.
"""

from enrollctl.plugins.hookspecs import hookimpl
from enrollctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
