# Path: xml_validator/tests/test_pipeline.py
"""
Pipeline tests for the validation engine.

Tests the stage ordering (Well-formedness -> CDATA -> Control characters ->
Hex colors -> SVG) and the issue budget:
1. Clean documents produce no issues from any stage
2. A well-formedness failure skips every other stage
3. The budget caps the issue list and stops later stages
4. total_found reports everything discovered before the cutoff
"""

from typing import Iterator

from xml_validator.engine.checkers import (
    CDATASectionChecker,
    ControlCharacterChecker,
    HexColorChecker,
    LineChecker,
    SVGSyntaxChecker,
    default_checkers,
)
from xml_validator.engine.models import (
    Issue,
    IssueKind,
    ValidationOptions,
    ValidationPhase,
)
from xml_validator.engine.pipeline import ValidationPipeline, validate_content
from xml_validator.engine.wellformedness import WellFormednessChecker


SAMPLE = b"""<root>
<a><![CDATA[!-- one -->]]></a>
<b><![CDATA[!-- two -->]]></b>
<c style="color:#12"/>
<rect width="2">
</rect>
</root>
"""


class SpyChecker(LineChecker):
    """Counts invocations and reports nothing."""

    phase = ValidationPhase.SVG
    description = 'spy'

    def __init__(self):
        self.calls = 0
        self.lines_seen = 0

    def collect(self, content, collector):
        self.calls += 1
        super().collect(content, collector)

    def check_line(self, line_number: int, line: str) -> Iterator[Issue]:
        self.lines_seen += 1
        return iter(())


def _kinds(result):
    return [issue.kind for issue in result.issues]


def test_minimal_document_is_clean_in_every_stage():
    content = b"<a/>"
    assert WellFormednessChecker().check(content) == []
    for checker in default_checkers():
        assert checker.check(content) == [], repr(checker)

    result = validate_content(content, ValidationOptions(max_issues=5))
    assert result.is_valid
    assert result.issues == []
    assert result.total_found == 0
    assert result.phases_completed == list(ValidationPhase)


def test_empty_document_is_valid():
    for content in (b"", b"\n\n"):
        result = validate_content(content, ValidationOptions(max_issues=5))
        assert result.is_valid, f"Expected {content!r} to be valid"
        assert result.total_found == 0
        assert result.phases_completed == list(ValidationPhase)


def test_default_checker_order():
    checkers = ValidationPipeline().checkers
    assert [type(c) for c in checkers] == [
        CDATASectionChecker,
        ControlCharacterChecker,
        HexColorChecker,
        SVGSyntaxChecker,
    ]


def test_wellformedness_failure_skips_secondary_checkers():
    spies = [SpyChecker(), SpyChecker()]
    pipeline = ValidationPipeline(checkers=spies)

    result = pipeline.run(b"<a><![CDATA[!x]]><b></a>", ValidationOptions(max_issues=5))

    assert _kinds(result) == [IssueKind.XML_SYNTAX]
    assert result.total_found == 1
    assert all(spy.calls == 0 for spy in spies), "Secondary checkers must not run"
    assert result.phases_completed == [ValidationPhase.WELLFORMEDNESS]


def test_secondary_checkers_run_on_clean_document():
    spies = [SpyChecker(), SpyChecker()]
    result = ValidationPipeline(checkers=spies).run(SAMPLE)

    assert result.is_valid
    assert [spy.calls for spy in spies] == [1, 1]
    assert spies[0].lines_seen == 7


def test_unbounded_run_orders_by_phase():
    result = validate_content(SAMPLE, ValidationOptions(max_issues=0))

    assert _kinds(result) == [
        IssueKind.CDATA_SPECIAL_CHAR,
        IssueKind.CDATA_EXCLAMATION,
        IssueKind.CDATA_SPECIAL_CHAR,
        IssueKind.CDATA_EXCLAMATION,
        IssueKind.INVALID_HEX_COLOR,
        IssueKind.SVG_SELF_CLOSING,
    ]
    assert [issue.line for issue in result.issues] == [2, 2, 3, 3, 4, 5]
    assert result.total_found == 6
    assert not result.truncated


def test_budget_reached_inside_phase_stops_pipeline():
    spy = SpyChecker()
    checkers = [CDATASectionChecker(), spy]
    result = ValidationPipeline(checkers=checkers).run(SAMPLE, ValidationOptions(max_issues=3))

    assert len(result.issues) == 3
    # Line 3 finished before the cutoff took effect
    assert result.total_found == 4
    assert result.truncated
    assert result.hidden_count == 1
    assert spy.calls == 0
    assert result.phases_completed == [ValidationPhase.WELLFORMEDNESS, ValidationPhase.CDATA]


def test_budget_reached_in_later_phase():
    result = validate_content(SAMPLE, ValidationOptions(max_issues=5))

    assert len(result.issues) == 5
    assert result.total_found == 5
    assert IssueKind.SVG_SELF_CLOSING not in _kinds(result)
    assert ValidationPhase.SVG not in result.phases_completed
    assert result.phases_completed[-1] == ValidationPhase.HEX_COLORS


def test_budget_equal_to_total_keeps_everything():
    result = validate_content(SAMPLE, ValidationOptions(max_issues=6))
    assert len(result.issues) == 6
    assert result.total_found == 6
    assert not result.truncated


def test_budget_never_exceeded():
    content = b"<root>\n" + b'<p style="color:#12">x</p>\n' * 40 + b"</root>"
    for budget in (1, 2, 7, 39):
        result = validate_content(content, ValidationOptions(max_issues=budget))
        assert len(result.issues) == budget
        assert result.total_found == budget
        assert [issue.line for issue in result.issues] == list(range(2, budget + 2))


def test_budget_of_one_with_syntax_error():
    result = validate_content(b"<a>", ValidationOptions(max_issues=1))
    assert len(result.issues) == 1
    assert result.issues[0].kind in (IssueKind.XML_SYNTAX, IssueKind.XML_ERROR)


def test_source_is_recorded():
    result = validate_content(b"<a/>", source="export.xml")
    assert result.source == "export.xml"


def test_content_is_not_modified():
    content = bytes(SAMPLE)
    validate_content(content)
    assert content == SAMPLE
