"""Core data models for line diffs: lines, edit operations and hunks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

EditKind = Literal["equal", "delete", "insert"]


@dataclass(frozen=True, slots=True)
class Line:
    """A single tokenized line of text."""

    index: int
    text: str
    ending: str = "\n"

    @property
    def has_newline(self) -> bool:
        return self.ending != ""

    @property
    def key(self) -> tuple[str, bool]:
        """Identity used for matching; CRLF and LF compare equal."""
        return (self.text, self.has_newline)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "text": self.text,
            "has_newline": self.has_newline,
        }


@dataclass(frozen=True, slots=True)
class Equal:
    """Line present on both sides."""

    expected: Line
    actual: Line

    @property
    def kind(self) -> EditKind:
        return "equal"


@dataclass(frozen=True, slots=True)
class Delete:
    """Line present only on the expected side."""

    expected: Line

    @property
    def kind(self) -> EditKind:
        return "delete"


@dataclass(frozen=True, slots=True)
class Insert:
    """Line present only on the actual side."""

    actual: Line

    @property
    def kind(self) -> EditKind:
        return "insert"


EditOp = Union[Equal, Delete, Insert]


def op_to_dict(op: EditOp) -> dict[str, Any]:
    if isinstance(op, Equal):
        return {
            "kind": op.kind,
            "expected": op.expected.to_dict(),
            "actual": op.actual.to_dict(),
        }
    if isinstance(op, Delete):
        return {"kind": op.kind, "expected": op.expected.to_dict(), "actual": None}
    return {"kind": op.kind, "expected": None, "actual": op.actual.to_dict()}


@dataclass(frozen=True, slots=True)
class Hunk:
    """Contiguous window of edit operations with surrounding context.

    Offsets are zero-based positions into the expected and actual line
    sequences where the window begins.
    """

    expected_start: int
    actual_start: int
    ops: tuple[EditOp, ...]

    @property
    def expected_len(self) -> int:
        return sum(1 for op in self.ops if not isinstance(op, Insert))

    @property
    def actual_len(self) -> int:
        return sum(1 for op in self.ops if not isinstance(op, Delete))

    @property
    def deleted(self) -> int:
        return sum(1 for op in self.ops if isinstance(op, Delete))

    @property
    def inserted(self) -> int:
        return sum(1 for op in self.ops if isinstance(op, Insert))

    def to_dict(self) -> dict[str, Any]:
        return {
            "expected_start": self.expected_start,
            "expected_len": self.expected_len,
            "actual_start": self.actual_start,
            "actual_len": self.actual_len,
            "deleted": self.deleted,
            "inserted": self.inserted,
            "ops": [op_to_dict(op) for op in self.ops],
        }
