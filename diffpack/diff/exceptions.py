"""Diff subsystem exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diffpack.diff.models import ComparisonResult


class DiffError(Exception):
    """Base class for diff errors."""


class DiffAssertionError(DiffError, AssertionError):
    """Two texts expected to be equal differ; the message is the rendered report."""

    def __init__(self, report: str, *, result: ComparisonResult) -> None:
        super().__init__(report)
        self.report = report
        self.result = result
