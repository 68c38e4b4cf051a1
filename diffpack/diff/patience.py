"""Patience diff producing a flat edit script over tokenized lines.

Lines unique to both sides of a range anchor the alignment; the longest
increasing run of anchors is matched and every gap between anchors is
diffed again on its own. Gaps without unique lines fall back to a
quadratic LCS table.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Hashable, Sequence

from diffpack.core.models import Delete, EditOp, Equal, Insert, Line

LCS_CELL_LIMIT = 4_000_000

_Key = Hashable
_Task = tuple[int, int, int, int]


def diff_lines(
    expected: Sequence[Line],
    actual: Sequence[Line],
    *,
    lcs_cell_limit: int = LCS_CELL_LIMIT,
) -> list[EditOp]:
    """Compute the edit script turning ``expected`` into ``actual``.

    Deterministic and total; within every run of changes deletions are
    ordered before insertions.
    """
    a_keys = [line.key for line in expected]
    b_keys = [line.key for line in actual]
    ops: list[EditOp] = []

    # A task with a_lo == -1 is a single anchor match at (a_hi, b_hi).
    stack: list[_Task] = [(0, len(expected), 0, len(actual))]
    while stack:
        a_lo, a_hi, b_lo, b_hi = stack.pop()
        if a_lo == -1:
            ops.append(Equal(expected[a_hi], actual[b_hi]))
            continue

        while a_lo < a_hi and b_lo < b_hi and a_keys[a_lo] == b_keys[b_lo]:
            ops.append(Equal(expected[a_lo], actual[b_lo]))
            a_lo += 1
            b_lo += 1

        while a_lo < a_hi and b_lo < b_hi and a_keys[a_hi - 1] == b_keys[b_hi - 1]:
            a_hi -= 1
            b_hi -= 1
            stack.append((-1, a_hi, -1, b_hi))

        if a_lo == a_hi or b_lo == b_hi:
            _emit_block(expected, actual, a_lo, a_hi, b_lo, b_hi, ops)
            continue

        anchors = _unique_anchors(a_keys, b_keys, a_lo, a_hi, b_lo, b_hi)
        if not anchors:
            _lcs_fallback(
                expected,
                actual,
                a_keys,
                b_keys,
                (a_lo, a_hi, b_lo, b_hi),
                ops,
                lcs_cell_limit,
            )
            continue

        tasks: list[_Task] = []
        prev_a, prev_b = a_lo, b_lo
        for i, j in anchors:
            tasks.append((prev_a, i, prev_b, j))
            tasks.append((-1, i, -1, j))
            prev_a, prev_b = i + 1, j + 1
        tasks.append((prev_a, a_hi, prev_b, b_hi))
        stack.extend(reversed(tasks))

    return _delete_before_insert(ops)


def _emit_block(
    expected: Sequence[Line],
    actual: Sequence[Line],
    a_lo: int,
    a_hi: int,
    b_lo: int,
    b_hi: int,
    ops: list[EditOp],
) -> None:
    for i in range(a_lo, a_hi):
        ops.append(Delete(expected[i]))
    for j in range(b_lo, b_hi):
        ops.append(Insert(actual[j]))


def _unique_anchors(
    a_keys: Sequence[_Key],
    b_keys: Sequence[_Key],
    a_lo: int,
    a_hi: int,
    b_lo: int,
    b_hi: int,
) -> list[tuple[int, int]]:
    a_positions: dict[_Key, int] = {}
    for i in range(a_lo, a_hi):
        key = a_keys[i]
        a_positions[key] = -1 if key in a_positions else i

    b_positions: dict[_Key, int] = {}
    for j in range(b_lo, b_hi):
        key = b_keys[j]
        if a_positions.get(key, -1) == -1:
            continue
        b_positions[key] = -1 if key in b_positions else j

    pairs = sorted(
        (a_positions[key], j) for key, j in b_positions.items() if j != -1
    )
    return _longest_increasing(pairs)


def _longest_increasing(pairs: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Patience sorting: longest run of pairs increasing on both sides."""
    if not pairs:
        return []

    tails: list[int] = []
    tail_positions: list[int] = []
    back: list[int] = [-1] * len(pairs)

    for position, (_, b_index) in enumerate(pairs):
        pile = bisect_left(tails, b_index)
        if pile > 0:
            back[position] = tail_positions[pile - 1]
        if pile == len(tails):
            tails.append(b_index)
            tail_positions.append(position)
        else:
            tails[pile] = b_index
            tail_positions[pile] = position

    chain: list[tuple[int, int]] = []
    cursor = tail_positions[-1]
    while cursor != -1:
        chain.append(pairs[cursor])
        cursor = back[cursor]
    chain.reverse()
    return chain


def _lcs_fallback(
    expected: Sequence[Line],
    actual: Sequence[Line],
    a_keys: Sequence[_Key],
    b_keys: Sequence[_Key],
    bounds: _Task,
    ops: list[EditOp],
    cell_limit: int,
) -> None:
    a_lo, a_hi, b_lo, b_hi = bounds
    n = a_hi - a_lo
    m = b_hi - b_lo
    if n * m > cell_limit:
        _emit_block(expected, actual, a_lo, a_hi, b_lo, b_hi, ops)
        return

    # lengths[i][j] is the LCS length of a[i:] and b[j:] inside the gap.
    lengths = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row = lengths[i]
        below = lengths[i + 1]
        a_key = a_keys[a_lo + i]
        for j in range(m - 1, -1, -1):
            if a_key == b_keys[b_lo + j]:
                row[j] = below[j + 1] + 1
            elif below[j] >= row[j + 1]:
                row[j] = below[j]
            else:
                row[j] = row[j + 1]

    i = j = 0
    while i < n and j < m:
        if a_keys[a_lo + i] == b_keys[b_lo + j]:
            ops.append(Equal(expected[a_lo + i], actual[b_lo + j]))
            i += 1
            j += 1
        elif lengths[i + 1][j] >= lengths[i][j + 1]:
            ops.append(Delete(expected[a_lo + i]))
            i += 1
        else:
            ops.append(Insert(actual[b_lo + j]))
            j += 1

    _emit_block(expected, actual, a_lo + i, a_hi, b_lo + j, b_hi, ops)


def _delete_before_insert(ops: list[EditOp]) -> list[EditOp]:
    ordered: list[EditOp] = []
    deletes: list[EditOp] = []
    inserts: list[EditOp] = []

    for op in ops:
        if isinstance(op, Equal):
            ordered.extend(deletes)
            ordered.extend(inserts)
            deletes.clear()
            inserts.clear()
            ordered.append(op)
        elif isinstance(op, Delete):
            deletes.append(op)
        else:
            inserts.append(op)

    ordered.extend(deletes)
    ordered.extend(inserts)
    return ordered
