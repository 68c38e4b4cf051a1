"""Renderers for comparison results: annotated console report and unified patch."""

from __future__ import annotations

from typing import Any, Mapping

import typer

from diffpack.core.models import Delete, EditOp, Equal, Hunk, Line
from diffpack.diff.models import AnnotatedOptions, ComparisonResult, PatchOptions

NO_NEWLINE_MARKER = "\\ No newline at end of file"

DEFAULT_STYLES: dict[str, dict[str, Any]] = {
    "header": {"fg": "blue", "dim": True},
    "equal": {},
    "delete": {"fg": "red"},
    "insert": {"fg": "green"},
    "marker": {"dim": True},
}


def render_summary(result: ComparisonResult) -> str:
    summary = result.summary()
    return (
        f"identical={str(result.is_empty()).lower()} hunks={summary['hunks']} "
        f"deleted={summary['deleted']} inserted={summary['inserted']} "
        f"expected_lines={summary['expected_lines']} actual_lines={summary['actual_lines']}"
    )


def hunk_header(hunk: Hunk, *, offset: int = 0) -> str:
    """Unified ``@@ -start,len +start,len @@`` header (1-based)."""
    expected_start = _header_start(hunk.expected_start, hunk.expected_len, offset)
    actual_start = _header_start(hunk.actual_start, hunk.actual_len, offset)
    return (
        f"@@ -{expected_start},{hunk.expected_len} "
        f"+{actual_start},{hunk.actual_len} @@"
    )


def render_annotated(result: ComparisonResult, options: AnnotatedOptions | None = None) -> str:
    """Render hunks with line-number gutters and -/+ markers.

    Returns an empty string for an empty result.
    """
    options = options or AnnotatedOptions()
    if result.is_empty():
        return ""

    styles: dict[str, Mapping[str, Any]] = dict(DEFAULT_STYLES)
    if options.styles:
        styles.update(options.styles)
    width = _gutter_width(result, options.offset)

    blocks = [_annotated_hunk(hunk, options, styles, width) for hunk in result.hunks]
    body = "\n".join(blocks)
    if options.message:
        return f"{options.message}\n\n{body}"
    return body


def _annotated_hunk(
    hunk: Hunk,
    options: AnnotatedOptions,
    styles: Mapping[str, Mapping[str, Any]],
    width: int,
) -> str:
    def paint(text: str, kind: str) -> str:
        style = styles.get(kind) or {}
        if not options.color or not style:
            return text
        return typer.style(text, **style)

    blank = " " * width
    placeholder = "...".ljust(width)
    header = hunk_header(hunk, offset=options.offset)
    rendered = [paint(f"{placeholder} {placeholder}   {header}", "header")]

    for op in hunk.ops:
        if isinstance(op, Equal):
            line = op.expected
            expected_no = op.expected.index + 1 + options.offset
            actual_no = op.actual.index + 1 + options.offset
            rendered.append(
                paint(f"{expected_no:0{width}d} {actual_no:0{width}d}   {line.text}", "equal")
            )
        elif isinstance(op, Delete):
            line = op.expected
            expected_no = line.index + 1 + options.offset
            rendered.append(paint(f"{expected_no:0{width}d} {blank}  -{line.text}", "delete"))
        else:
            line = op.actual
            actual_no = line.index + 1 + options.offset
            rendered.append(paint(f"{blank} {actual_no:0{width}d}  +{line.text}", "insert"))

        if not line.has_newline:
            rendered.append(paint(f"{blank} {blank}   {NO_NEWLINE_MARKER}", "marker"))

    return "\n".join(rendered) + "\n"


def render_patch(result: ComparisonResult, options: PatchOptions | None = None) -> str:
    """Render a unified diff that ``patch`` can apply to the expected text.

    Returns an empty string for an empty result, like ``diff -u``.

    Changed lines keep their own line endings; context lines are written
    with the expected side's ending. CRLF and LF lines compare equal, so
    applying the patch to ``expected`` does not restore an actual-side
    ending that differs only on an unchanged line.
    """
    options = options or PatchOptions()
    if result.is_empty():
        return ""

    parts = [
        _file_header("---", options.expected_label, options.expected_timestamp),
        _file_header("+++", options.actual_label, options.actual_timestamp),
    ]
    for hunk in result.hunks:
        parts.append(hunk_header(hunk, offset=options.offset) + "\n")
        parts.extend(_patch_line(op) for op in hunk.ops)
    return "".join(parts)


def _patch_line(op: EditOp) -> str:
    if isinstance(op, Equal):
        return _terminated(" ", op.expected)
    if isinstance(op, Delete):
        return _terminated("-", op.expected)
    return _terminated("+", op.actual)


def _terminated(prefix: str, line: Line) -> str:
    if line.has_newline:
        return f"{prefix}{line.text}{line.ending}"
    return f"{prefix}{line.text}\n{NO_NEWLINE_MARKER}\n"


def _file_header(marker: str, label: str, timestamp: str | None) -> str:
    if timestamp:
        return f"{marker} {label}\t{timestamp}\n"
    return f"{marker} {label}\n"


def _header_start(start: int, length: int, offset: int) -> int:
    # An empty range names the line before it, as in diff -u.
    if length == 0:
        return start + offset
    return start + 1 + offset


def _gutter_width(result: ComparisonResult, offset: int) -> int:
    highest = max(result.expected_line_count, result.actual_line_count) + offset
    return max(3, len(str(highest)))
