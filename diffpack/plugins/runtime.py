"""Activation of lifecycle plugins for the current context."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
import os
from pathlib import Path
from typing import Iterator
import warnings

from diffpack.plugins.base import PLUGIN_CONFIG_ENV_VAR
from diffpack.plugins.exceptions import PluginError
from diffpack.plugins.loader import load_plugin_manager_from_file
from diffpack.plugins.manager import PluginManager

_CONTEXT_MANAGER: ContextVar[PluginManager | None] = ContextVar(
    "diffkit_plugin_manager",
    default=None,
)
_NO_PLUGINS = PluginManager(plugins=())
_env_managers: dict[str, PluginManager] = {}


def get_active_plugin_manager() -> PluginManager:
    """Plugins set for this context, else those named by the env config, else none."""
    manager = _CONTEXT_MANAGER.get()
    if manager is not None:
        return manager

    config_path = os.getenv(PLUGIN_CONFIG_ENV_VAR, "").strip()
    if not config_path:
        return _NO_PLUGINS

    cached = _env_managers.get(config_path)
    if cached is None:
        cached = _load_env_manager(config_path)
        _env_managers[config_path] = cached
    return cached


def _load_env_manager(config_path: str) -> PluginManager:
    # A broken env config disables plugins for that path; comparisons go on.
    try:
        return load_plugin_manager_from_file(config_path)
    except (OSError, UnicodeDecodeError, PluginError) as error:
        warnings.warn(
            (
                f"diffkit plugin config ignored: {PLUGIN_CONFIG_ENV_VAR}={config_path} "
                f"error={error.__class__.__name__}: {error}"
            ),
            RuntimeWarning,
            stacklevel=3,
        )
        return _NO_PLUGINS


@contextmanager
def use_plugin_manager(manager: PluginManager) -> Iterator[PluginManager]:
    token = _CONTEXT_MANAGER.set(manager)
    try:
        yield manager
    finally:
        _CONTEXT_MANAGER.reset(token)


@contextmanager
def use_plugins_from_config(path: str | Path) -> Iterator[PluginManager]:
    with use_plugin_manager(load_plugin_manager_from_file(path)) as manager:
        yield manager


def reset_plugin_runtime_cache() -> None:
    """Forget env-configured managers (for tests)."""
    _env_managers.clear()
