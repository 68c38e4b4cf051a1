"""Reference lifecycle plugin that appends hook records to an NDJSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from diffpack.plugins.base import (
    AssertionEndEvent,
    CompareEndEvent,
    CompareStartEvent,
    LifecyclePlugin,
)


@dataclass(slots=True)
class LifecycleTracePlugin(LifecyclePlugin):
    output_path: str = "diffkit-trace.ndjson"
    name: str = "lifecycle-trace"

    def on_compare_start(self, event: CompareStartEvent) -> None:
        self._write("on_compare_start", event.to_dict())

    def on_compare_end(self, event: CompareEndEvent) -> None:
        self._write("on_compare_end", event.to_dict())

    def on_assertion_end(self, event: AssertionEndEvent) -> None:
        self._write("on_assertion_end", event.to_dict())

    def _write(self, hook: str, event: dict[str, object]) -> None:
        path = Path(self.output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        record = json.dumps(
            {"hook": hook, "plugin": self.name, "event": event},
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
        with path.open("a", encoding="utf-8") as handle:
            handle.write(record + "\n")
