"""Group a flat edit script into context hunks."""

from __future__ import annotations

from typing import Sequence

from diffpack.core.models import Delete, EditOp, Equal, Hunk, Insert

DEFAULT_CONTEXT_LINES = 3


def build_hunks(
    ops: Sequence[EditOp],
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> list[Hunk]:
    """Build hunks with up to ``context_lines`` equal lines on each side.

    Change runs separated by at most ``2 * context_lines`` equal lines
    share one hunk, so emitted hunks never overlap or touch.
    """
    context = max(0, context_lines)
    changed = [index for index, op in enumerate(ops) if not isinstance(op, Equal)]
    if not changed:
        return []

    windows: list[tuple[int, int]] = []
    first = last = changed[0]
    for index in changed[1:]:
        if index - last - 1 <= 2 * context:
            last = index
            continue
        windows.append((first, last))
        first = last = index
    windows.append((first, last))

    expected_positions, actual_positions = _positions(ops)

    hunks: list[Hunk] = []
    for first, last in windows:
        lo = max(0, first - context)
        hi = min(len(ops), last + context + 1)
        hunks.append(
            Hunk(
                expected_start=expected_positions[lo],
                actual_start=actual_positions[lo],
                ops=tuple(ops[lo:hi]),
            )
        )
    return hunks


def _positions(ops: Sequence[EditOp]) -> tuple[list[int], list[int]]:
    """Expected/actual line offsets reached before each op."""
    expected_positions = [0]
    actual_positions = [0]
    expected_at = actual_at = 0

    for op in ops:
        if isinstance(op, Equal):
            expected_at += 1
            actual_at += 1
        elif isinstance(op, Delete):
            expected_at += 1
        elif isinstance(op, Insert):
            actual_at += 1
        expected_positions.append(expected_at)
        actual_positions.append(actual_at)

    return expected_positions, actual_positions
