# Path: xml_validator/tests/test_position.py
"""
Unit tests for position resolution.

Tests:
- resolve_position: line/column arithmetic and defensive defaults
- line_text: second-pass line extraction
- offset_for: line/column back to byte offset
- iter_lines: splitting rules shared by all checkers
"""

from xml_validator.engine.position import (
    Position,
    iter_lines,
    line_text,
    offset_for,
    resolve_position,
)

DOC = b"<root>\n  <child/>\n</root>"


def test_resolve_first_byte():
    assert resolve_position(DOC, 0) == Position(1, 1, "<root>")


def test_resolve_second_line():
    # offset of '<' in "  <child/>"
    offset = DOC.index(b"<child")
    position = resolve_position(DOC, offset)
    assert position.line == 2
    assert position.column == 3
    assert position.line_text == "  <child/>"


def test_resolve_newline_byte_belongs_to_its_line():
    offset = DOC.index(b"\n")
    assert resolve_position(DOC, offset) == Position(1, 7, "<root>")


def test_resolve_offset_equal_to_length_is_default():
    assert resolve_position(DOC, len(DOC)) == Position(1, 1, "")


def test_resolve_negative_and_past_end_offsets():
    assert resolve_position(DOC, -1) == Position(1, 1, "")
    assert resolve_position(DOC, 10_000) == Position(1, 1, "")
    assert resolve_position(b"", 0) == Position(1, 1, "")


def test_resolve_counts_characters_not_bytes():
    content = "<a>é<b/></a>".encode("utf-8")
    offset = content.index(b"<b")
    assert resolve_position(content, offset).column == 5


def test_crlf_line_text_has_no_carriage_return():
    content = b"<a>\r\n<b/>\r\n</a>"
    position = resolve_position(content, content.index(b"<b"))
    assert position == Position(2, 1, "<b/>")


def test_line_text_out_of_range():
    assert line_text(DOC, 0) == ""
    assert line_text(DOC, 4) == ""
    assert line_text(DOC, 3) == "</root>"


def test_offset_for_round_trips_with_resolve():
    offset = offset_for(DOC, 2, 3)
    assert DOC[offset:offset + 6] == b"<child"
    assert resolve_position(DOC, offset)[:2] == (2, 3)


def test_offset_for_missing_line_and_clamped_column():
    assert offset_for(DOC, 9, 1) == -1
    assert offset_for(DOC, 0, 1) == -1
    # Column past the end lands on the line terminator
    assert offset_for(DOC, 1, 99) == DOC.index(b"\n")


def test_iter_lines_ignores_final_terminator():
    assert list(iter_lines(b"a\nb\n")) == [(1, "a"), (2, "b")]
    assert list(iter_lines(b"a\nb")) == [(1, "a"), (2, "b")]
    assert list(iter_lines(b"")) == []


def test_iter_lines_tolerates_invalid_utf8():
    lines = list(iter_lines(b"ok\n\xff\xfe bad\n"))
    assert lines[0] == (1, "ok")
    assert lines[1][0] == 2
    assert lines[1][1].endswith(" bad")
