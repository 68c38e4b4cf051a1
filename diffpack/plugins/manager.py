"""Fan-out of lifecycle events to plugins, isolating plugin failures."""

from __future__ import annotations

from dataclasses import dataclass, field
import warnings

from diffpack.plugins.base import AssertionEndEvent, CompareEndEvent, CompareStartEvent


@dataclass(frozen=True, slots=True)
class PluginDiagnostic:
    """A hook call that raised; comparison went on without it."""

    plugin_name: str
    hook: str
    error_type: str
    message: str

    @classmethod
    def from_error(cls, plugin: object, hook: str, error: Exception) -> PluginDiagnostic:
        return cls(
            plugin_name=str(getattr(plugin, "name", plugin.__class__.__name__)),
            hook=hook,
            error_type=error.__class__.__name__,
            message=str(error),
        )

    def describe(self) -> str:
        return (
            f"diffkit plugin failure: plugin={self.plugin_name} hook={self.hook} "
            f"error={self.error_type}: {self.message}"
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "plugin_name": self.plugin_name,
            "hook": self.hook,
            "error_type": self.error_type,
            "message": self.message,
        }


@dataclass(slots=True)
class PluginManager:
    """Calls every plugin that implements a hook; failures become diagnostics."""

    plugins: tuple[object, ...] = ()
    diagnostics: list[PluginDiagnostic] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.diagnostics)

    def clear_diagnostics(self) -> None:
        self.diagnostics.clear()

    def on_compare_start(self, event: CompareStartEvent) -> None:
        self._notify("on_compare_start", event)

    def on_compare_end(self, event: CompareEndEvent) -> None:
        self._notify("on_compare_end", event)

    def on_assertion_end(self, event: AssertionEndEvent) -> None:
        self._notify("on_assertion_end", event)

    def _notify(self, hook: str, event: object) -> None:
        for plugin in self.plugins:
            handler = getattr(plugin, hook, None)
            if not callable(handler):
                continue
            try:
                handler(event)
            except Exception as error:
                diagnostic = PluginDiagnostic.from_error(plugin, hook, error)
                self.diagnostics.append(diagnostic)
                # Caller of the public hook, i.e. the comparison code.
                warnings.warn(diagnostic.describe(), RuntimeWarning, stacklevel=3)
