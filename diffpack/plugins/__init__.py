"""Lifecycle plugin subsystem for diffkit comparisons."""

from diffpack.plugins.base import (
    PLUGIN_API_VERSION,
    PLUGIN_CONFIG_ENV_VAR,
    PLUGIN_CONFIG_VERSION,
    AssertionEndEvent,
    CompareEndEvent,
    CompareStartEvent,
    LifecyclePlugin,
)
from diffpack.plugins.exceptions import PluginConfigError, PluginError, PluginLoadError
from diffpack.plugins.loader import load_plugin_manager, load_plugin_manager_from_file
from diffpack.plugins.manager import PluginDiagnostic, PluginManager
from diffpack.plugins.reference import LifecycleTracePlugin
from diffpack.plugins.runtime import (
    get_active_plugin_manager,
    reset_plugin_runtime_cache,
    use_plugin_manager,
    use_plugins_from_config,
)

__all__ = [
    "PLUGIN_API_VERSION",
    "PLUGIN_CONFIG_VERSION",
    "PLUGIN_CONFIG_ENV_VAR",
    "PluginError",
    "PluginConfigError",
    "PluginLoadError",
    "CompareStartEvent",
    "CompareEndEvent",
    "AssertionEndEvent",
    "LifecyclePlugin",
    "PluginDiagnostic",
    "PluginManager",
    "LifecycleTracePlugin",
    "load_plugin_manager",
    "load_plugin_manager_from_file",
    "get_active_plugin_manager",
    "use_plugin_manager",
    "use_plugins_from_config",
    "reset_plugin_runtime_cache",
]
