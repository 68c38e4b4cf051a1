"""Line diff subsystem for diffkit."""

from diffpack.diff.assertion import (
    AssertionResult,
    assert_diff,
    assert_repr,
    resolve_color,
    try_diff,
    try_repr,
)
from diffpack.diff.engine import compare
from diffpack.diff.exceptions import DiffAssertionError, DiffError
from diffpack.diff.formatting import (
    NO_NEWLINE_MARKER,
    hunk_header,
    render_annotated,
    render_patch,
    render_summary,
)
from diffpack.diff.hunks import DEFAULT_CONTEXT_LINES, build_hunks
from diffpack.diff.models import AnnotatedOptions, CompareOptions, ComparisonResult, PatchOptions
from diffpack.diff.patience import diff_lines

__all__ = [
    "DEFAULT_CONTEXT_LINES",
    "NO_NEWLINE_MARKER",
    "CompareOptions",
    "AnnotatedOptions",
    "PatchOptions",
    "ComparisonResult",
    "diff_lines",
    "build_hunks",
    "compare",
    "hunk_header",
    "render_annotated",
    "render_patch",
    "render_summary",
    "DiffError",
    "DiffAssertionError",
    "AssertionResult",
    "try_diff",
    "assert_diff",
    "try_repr",
    "assert_repr",
    "resolve_color",
]
