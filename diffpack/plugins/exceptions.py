"""Errors raised while activating lifecycle plugins."""


class PluginError(Exception):
    """Base class for plugin errors."""


class PluginConfigError(PluginError):
    """The plugin config file is not valid JSON or does not follow the schema."""


class PluginLoadError(PluginError):
    """A configured entrypoint cannot be imported or instantiated."""
