"""Stable public API surface for diffkit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from pathlib import Path

from diffpack.diff import (
    DEFAULT_CONTEXT_LINES,
    AnnotatedOptions,
    AssertionResult,
    CompareOptions,
    ComparisonResult,
    DiffAssertionError,
    PatchOptions,
    assert_diff,
    assert_repr,
    try_diff,
    try_repr,
)
from diffpack.diff import compare as _compare

__version__ = "0.1.0"


def compare(
    expected: str,
    actual: str,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> ComparisonResult:
    """Compare two texts line by line.

    Args:
        expected: Reference text.
        actual: Text under test.
        context_lines: Unchanged lines kept around each change.

    Returns:
        Immutable comparison result; ``is_empty()`` is true when no line differs.
    """
    return _compare(expected, actual, CompareOptions(context_lines=context_lines))


def compare_files(
    expected: str | Path,
    actual: str | Path,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    encoding: str = "utf-8",
) -> ComparisonResult:
    """Compare two text files, keeping their line endings as written.

    Args:
        expected: Path of the reference file.
        actual: Path of the file under test.
        context_lines: Unchanged lines kept around each change.
        encoding: Text encoding used for both files.

    Returns:
        Immutable comparison result.
    """
    return compare(
        _read_text(Path(expected), encoding),
        _read_text(Path(actual), encoding),
        context_lines=context_lines,
    )


def _read_text(path: Path, encoding: str) -> str:
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


__all__ = [
    "__version__",
    "ComparisonResult",
    "AssertionResult",
    "DiffAssertionError",
    "AnnotatedOptions",
    "PatchOptions",
    "compare",
    "compare_files",
    "try_diff",
    "assert_diff",
    "try_repr",
    "assert_repr",
]
