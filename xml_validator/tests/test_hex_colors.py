# Path: xml_validator/tests/test_hex_colors.py
"""
Unit tests for the hex color checker.
"""

from xml_validator.engine.checkers.hex_colors import HexColorChecker, is_valid_hex_color
from xml_validator.engine.models import IssueKind


def _check(text: str, budget: int = 0):
    return HexColorChecker().check(text.encode("utf-8"), budget)


def test_length_boundaries_each_on_its_own_line():
    cases = {
        "#12": True,
        "#123": False,
        "#1234": True,
        "#123456": False,
        "#1234567": True,
    }
    for literal, invalid in cases.items():
        issues = _check(f'<p style="color: {literal};">x</p>')
        assert bool(issues) == invalid, f"{literal}: expected invalid={invalid}"
        if invalid:
            assert issues[0].highlight == literal
            assert issues[0].kind == IssueKind.INVALID_HEX_COLOR


def test_eight_digits_with_alpha_is_valid():
    assert _check('<rect fill="#11223344"/>') == []


def test_highlight_excludes_delimiter_and_column_is_hash():
    issues = _check("color:#ab;")
    assert len(issues) == 1
    assert issues[0].highlight == "#ab"
    assert issues[0].column == 7
    assert "#ab" in issues[0].message


def test_match_at_end_of_line():
    issues = _check("background #12345")
    assert [i.highlight for i in issues] == ["#12345"]


def test_several_on_one_line_in_order():
    issues = _check("#1 #fff #12345 #abcdef #abcdefabc")
    assert [i.highlight for i in issues] == ["#1", "#12345", "#abcdefabc"]
    assert [i.column for i in issues] == [1, 9, 24]


def test_non_hex_after_hash_is_ignored():
    assert _check('<a href="#top">up</a> #xyz') == []


def test_numeric_character_references_are_not_colors():
    assert _check("<p>It&#8217;s &#38; more</p>") == []


def test_budget_across_lines():
    text = "\n".join(["#12 #34"] * 5)
    issues = _check(text, budget=3)
    assert len(issues) == 4
    assert issues[-1].line == 2


def test_is_valid_hex_color():
    assert is_valid_hex_color("fff")
    assert is_valid_hex_color("A0B1C2")
    assert is_valid_hex_color("A0B1C2FF")
    assert not is_valid_hex_color("A0B1C2F")


def test_same_digits_without_ampersand_are_checked():
    issues = _check('<p style="color:#8217">x</p>')
    assert [i.highlight for i in issues] == ["#8217"]
