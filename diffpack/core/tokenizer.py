"""Split raw text into line records."""

from __future__ import annotations

from diffpack.core.models import Line


def split_lines(text: str) -> list[Line]:
    """Tokenize text on LF / CRLF boundaries.

    Empty input yields no lines. A final line without a terminator gets
    an empty ``ending`` so a missing trailing newline stays visible to the
    diff.
    """
    lines: list[Line] = []
    start = 0
    length = len(text)

    while start < length:
        newline_at = text.find("\n", start)
        if newline_at == -1:
            lines.append(Line(index=len(lines), text=text[start:], ending=""))
            break

        if newline_at > start and text[newline_at - 1] == "\r":
            content, ending = text[start : newline_at - 1], "\r\n"
        else:
            content, ending = text[start:newline_at], "\n"
        lines.append(Line(index=len(lines), text=content, ending=ending))
        start = newline_at + 1

    return lines


def join_lines(lines: list[Line]) -> str:
    """Inverse of :func:`split_lines`."""
    return "".join(line.text + line.ending for line in lines)
