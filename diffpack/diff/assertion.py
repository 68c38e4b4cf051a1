"""Assertion helpers for equality checks with diff diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pprint import pformat
from typing import Any

from diffpack.diff.engine import compare
from diffpack.diff.exceptions import DiffAssertionError
from diffpack.diff.hunks import DEFAULT_CONTEXT_LINES
from diffpack.diff.models import AnnotatedOptions, CompareOptions, ComparisonResult
from diffpack.plugins import AssertionEndEvent, get_active_plugin_manager

DEFAULT_MESSAGE = "Found differences"
COLOR_ENV_VAR = "DIFFKIT_COLOR"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class AssertionResult:
    """Outcome of an expected vs actual equality check."""

    comparison: ComparisonResult
    message: str
    report: str = ""

    @property
    def passed(self) -> bool:
        return self.comparison.is_empty()

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "pass" if self.passed else "fail",
            "exit_code": self.exit_code,
            "message": self.message,
            "summary": self.comparison.summary(),
            "report": self.report,
        }


def resolve_color(color: bool | None) -> bool:
    """Explicit flag wins; otherwise NO_COLOR disables and DIFFKIT_COLOR enables."""
    if color is not None:
        return color
    if os.getenv("NO_COLOR"):
        return False
    return os.getenv(COLOR_ENV_VAR, "").strip().lower() in _TRUTHY


def try_diff(
    expected: str,
    actual: str,
    message: str = DEFAULT_MESSAGE,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    color: bool | None = None,
    offset: int = 0,
) -> AssertionResult:
    """Compare two texts and return the outcome instead of raising."""
    comparison = compare(expected, actual, CompareOptions(context_lines=context_lines))
    report = ""
    if not comparison.is_empty():
        report = comparison.render_annotated(
            AnnotatedOptions(color=resolve_color(color), offset=offset, message=message)
        )

    result = AssertionResult(comparison=comparison, message=message, report=report)
    get_active_plugin_manager().on_assertion_end(
        AssertionEndEvent(
            passed=result.passed,
            message=message,
            hunk_count=comparison.hunk_count,
        )
    )
    return result


def assert_diff(
    expected: str,
    actual: str,
    message: str = DEFAULT_MESSAGE,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    color: bool | None = None,
    offset: int = 0,
) -> None:
    """Raise :class:`DiffAssertionError` carrying the report if the texts differ."""
    result = try_diff(
        expected,
        actual,
        message,
        context_lines=context_lines,
        color=color,
        offset=offset,
    )
    if not result.passed:
        raise DiffAssertionError(result.report, result=result.comparison)


def try_repr(
    expected: Any,
    actual: Any,
    message: str = DEFAULT_MESSAGE,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    color: bool | None = None,
    offset: int = 0,
) -> AssertionResult:
    """Like :func:`try_diff` over the pretty-printed form of two objects."""
    return try_diff(
        pformat(expected),
        pformat(actual),
        message,
        context_lines=context_lines,
        color=color,
        offset=offset,
    )


def assert_repr(
    expected: Any,
    actual: Any,
    message: str = DEFAULT_MESSAGE,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    color: bool | None = None,
    offset: int = 0,
) -> None:
    assert_diff(
        pformat(expected),
        pformat(actual),
        message,
        context_lines=context_lines,
        color=color,
        offset=offset,
    )
