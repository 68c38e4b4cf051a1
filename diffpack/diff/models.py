"""Comparison result and rendering options."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from diffpack.core.models import Hunk
from diffpack.diff.hunks import DEFAULT_CONTEXT_LINES

DEFAULT_EXPECTED_LABEL = "expected"
DEFAULT_ACTUAL_LABEL = "actual"


@dataclass(frozen=True, slots=True)
class CompareOptions:
    """Knobs for a single comparison."""

    context_lines: int = DEFAULT_CONTEXT_LINES

    def __post_init__(self) -> None:
        if self.context_lines < 0:
            object.__setattr__(self, "context_lines", 0)


@dataclass(frozen=True, slots=True)
class AnnotatedOptions:
    """Options for the console-oriented annotated report.

    ``offset`` shifts every displayed line number, which helps when the
    compared texts are slices of larger files. ``styles`` overrides the
    per-kind style mapping (keys: header, equal, delete, insert, marker;
    values: keyword arguments for ``typer.style``).
    """

    color: bool = False
    offset: int = 0
    message: str | None = None
    styles: Mapping[str, Mapping[str, Any]] | None = None


@dataclass(frozen=True, slots=True)
class PatchOptions:
    """Options for unified patch output."""

    expected_label: str = DEFAULT_EXPECTED_LABEL
    actual_label: str = DEFAULT_ACTUAL_LABEL
    expected_timestamp: str | None = None
    actual_timestamp: str | None = None
    offset: int = 0


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Immutable outcome of comparing two texts."""

    hunks: tuple[Hunk, ...]
    expected_line_count: int
    actual_line_count: int
    context_lines: int = DEFAULT_CONTEXT_LINES

    def is_empty(self) -> bool:
        return not self.hunks

    @property
    def hunk_count(self) -> int:
        return len(self.hunks)

    @property
    def total_lines(self) -> int:
        return self.expected_line_count + self.actual_line_count

    @property
    def inserted(self) -> int:
        return sum(hunk.inserted for hunk in self.hunks)

    @property
    def deleted(self) -> int:
        return sum(hunk.deleted for hunk in self.hunks)

    @property
    def expected_empty(self) -> bool:
        return self.expected_line_count == 0

    @property
    def actual_empty(self) -> bool:
        return self.actual_line_count == 0

    def summary(self) -> dict[str, int]:
        return {
            "hunks": self.hunk_count,
            "inserted": self.inserted,
            "deleted": self.deleted,
            "expected_lines": self.expected_line_count,
            "actual_lines": self.actual_line_count,
        }

    def render_annotated(
        self,
        options: AnnotatedOptions | None = None,
        *,
        color: bool | None = None,
    ) -> str:
        from diffpack.diff.formatting import render_annotated

        resolved = options or AnnotatedOptions()
        if color is not None:
            resolved = replace(resolved, color=color)
        return render_annotated(self, resolved)

    def render_patch(
        self,
        options: PatchOptions | None = None,
        *,
        expected_label: str | None = None,
        actual_label: str | None = None,
    ) -> str:
        from diffpack.diff.formatting import render_patch

        resolved = options or PatchOptions()
        if expected_label is not None or actual_label is not None:
            resolved = replace(
                resolved,
                expected_label=(
                    expected_label if expected_label is not None else resolved.expected_label
                ),
                actual_label=actual_label if actual_label is not None else resolved.actual_label,
            )
        return render_patch(self, resolved)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identical": self.is_empty(),
            "context_lines": self.context_lines,
            "expected_empty": self.expected_empty,
            "actual_empty": self.actual_empty,
            "total_lines": self.total_lines,
            "summary": self.summary(),
            "hunks": [hunk.to_dict() for hunk in self.hunks],
        }
