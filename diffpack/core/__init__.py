"""Core models and tokenization for diffkit."""

from diffpack.core.models import Delete, EditKind, EditOp, Equal, Hunk, Insert, Line, op_to_dict
from diffpack.core.tokenizer import join_lines, split_lines

__all__ = [
    "Line",
    "Equal",
    "Delete",
    "Insert",
    "EditOp",
    "EditKind",
    "Hunk",
    "op_to_dict",
    "split_lines",
    "join_lines",
]
