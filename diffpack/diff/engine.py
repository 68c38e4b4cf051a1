"""Text comparison pipeline: tokenize, diff, group into hunks."""

from __future__ import annotations

from diffpack.core.tokenizer import split_lines
from diffpack.diff.hunks import build_hunks
from diffpack.diff.models import CompareOptions, ComparisonResult
from diffpack.diff.patience import diff_lines
from diffpack.plugins import CompareEndEvent, CompareStartEvent, get_active_plugin_manager


def compare(
    expected: str,
    actual: str,
    options: CompareOptions | None = None,
    *,
    context_lines: int | None = None,
) -> ComparisonResult:
    """Compare two texts line by line.

    ``context_lines`` overrides ``options.context_lines`` when given.
    """
    resolved = options or CompareOptions()
    if context_lines is not None:
        resolved = CompareOptions(context_lines=context_lines)

    expected_lines = split_lines(expected)
    actual_lines = split_lines(actual)

    plugin_manager = get_active_plugin_manager()
    plugin_manager.on_compare_start(
        CompareStartEvent(
            expected_lines=len(expected_lines),
            actual_lines=len(actual_lines),
            context_lines=resolved.context_lines,
        )
    )

    try:
        ops = diff_lines(expected_lines, actual_lines)
        result = ComparisonResult(
            hunks=tuple(build_hunks(ops, resolved.context_lines)),
            expected_line_count=len(expected_lines),
            actual_line_count=len(actual_lines),
            context_lines=resolved.context_lines,
        )
    except Exception as error:
        plugin_manager.on_compare_end(
            CompareEndEvent(
                status="error",
                error_type=error.__class__.__name__,
                error_message=str(error),
            )
        )
        raise

    plugin_manager.on_compare_end(
        CompareEndEvent(
            status="ok",
            identical=result.is_empty(),
            hunk_count=result.hunk_count,
            inserted=result.inserted,
            deleted=result.deleted,
        )
    )
    return result

