# Path: xml_validator/engine/position.py
"""
Position resolution over raw document bytes.

Maps byte offsets to 1-based (line, column) pairs and recovers the text of a
line. Lines are split on b'\\n' everywhere; a trailing '\\r' is dropped from
extracted text so CRLF documents report the same text as LF documents.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple


class Position(NamedTuple):
    line: int
    column: int
    line_text: str


def decode_line(raw: bytes) -> str:
    """Decode one physical line; invalid UTF-8 becomes U+FFFD, never an error."""
    if raw.endswith(b'\r'):
        raw = raw[:-1]
    return raw.decode('utf-8', errors='replace')


def iter_lines(content: bytes) -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, text) for every physical line, 1-based.

    A final line terminator does not start another (empty) line.
    """
    raw_lines = content.split(b'\n')
    if raw_lines and raw_lines[-1] == b'':
        raw_lines.pop()
    for index, raw in enumerate(raw_lines, start=1):
        yield index, decode_line(raw)


def line_text(content: bytes, line_number: int) -> str:
    """Text of the given 1-based line, or '' if there is no such line."""
    if line_number < 1:
        return ''
    for index, text in iter_lines(content):
        if index == line_number:
            return text
    return ''


def resolve_position(content: bytes, offset: int) -> Position:
    """
    Resolve a 0-based byte offset to a Position.

    Offsets outside the buffer (negative, or >= len(content)) resolve to
    (1, 1, '') rather than raising.
    """
    if offset < 0 or offset >= len(content):
        return Position(1, 1, '')

    head = content[:offset]
    line = head.count(b'\n') + 1
    line_start = head.rfind(b'\n') + 1
    # Columns count characters, matching the line-oriented checkers
    column = len(head[line_start:].decode('utf-8', errors='replace')) + 1

    return Position(line, column, line_text(content, line))


def offset_for(content: bytes, line: int, column: int) -> int:
    """
    Byte offset of a 1-based line/column, or -1 if the line does not exist.

    Columns past the end of the line are clamped to the line terminator.
    """
    if line < 1:
        return -1

    start = 0
    for _ in range(line - 1):
        newline = content.find(b'\n', start)
        if newline == -1:
            return -1
        start = newline + 1

    end = content.find(b'\n', start)
    if end == -1:
        end = len(content)

    prefix = content[start:end].decode('utf-8', errors='replace')[:max(column, 1) - 1]
    return min(start + len(prefix.encode('utf-8')), end)


__all__ = [
    'Position',
    'decode_line',
    'iter_lines',
    'line_text',
    'resolve_position',
    'offset_for',
]
