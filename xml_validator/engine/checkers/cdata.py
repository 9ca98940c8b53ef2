# Path: xml_validator/engine/checkers/cdata.py
"""
CDATA section checks.

Six independent rules, each evaluated against every physical line. A line
can produce one issue per matching rule. The rules only see one line, so a
CDATA section whose ']]>' is on a later line is reported as unclosed on its
opening line.
"""

from __future__ import annotations

import re
from typing import Iterator

from xml_validator.engine.checkers.base import LineChecker
from xml_validator.engine.models import Issue, IssueKind, ValidationPhase
from xml_validator.constants import CDATA_CLOSE, CDATA_OPEN

_OPEN = re.escape(CDATA_OPEN)
_CLOSE = re.escape(CDATA_CLOSE)

SPECIAL_CHAR_RE = re.compile(_OPEN + r'([^a-zA-Z0-9 ])')
EXCLAMATION_RE = re.compile(_OPEN + r'!')
UNCLOSED_RE = re.compile(_OPEN + r'(?:(?!' + _CLOSE + r').)*$')
NESTED_RE = re.compile(_OPEN + r'.*' + _OPEN)
MULTIPLE_CLOSE_RE = re.compile(_OPEN + r'.*' + _CLOSE + r'.*' + _CLOSE)
EMPTY_RE = re.compile(_OPEN + _CLOSE)


class CDATASectionChecker(LineChecker):
    """Finds malformed CDATA sections, one line at a time."""

    phase = ValidationPhase.CDATA
    description = 'CDATA sections'

    def check_line(self, line_number: int, line: str) -> Iterator[Issue]:
        if CDATA_OPEN not in line:
            return

        # The character right after the marker, as a 1-based column
        match = SPECIAL_CHAR_RE.search(line)
        if match:
            char = match.group(1)
            yield Issue(
                line=line_number,
                column=match.start(1) + 1,
                line_text=line,
                kind=IssueKind.CDATA_SPECIAL_CHAR,
                message=f"Special character {char!r} found immediately after CDATA opening",
                highlight=char,
            )

        # Usually an HTML comment pasted straight after the marker
        match = EXCLAMATION_RE.search(line)
        if match:
            yield Issue(
                line=line_number,
                column=match.start() + len(CDATA_OPEN) + 1,
                line_text=line,
                kind=IssueKind.CDATA_EXCLAMATION,
                message="Exclamation mark found immediately after CDATA opening",
                highlight='!',
            )

        match = UNCLOSED_RE.search(line)
        if match:
            yield Issue(
                line=line_number,
                column=match.start() + 1,
                line_text=line,
                kind=IssueKind.CDATA_UNCLOSED,
                message="CDATA section is not properly closed with ]]>",
                highlight=match.group(0),
            )

        match = NESTED_RE.search(line)
        if match:
            yield Issue(
                line=line_number,
                column=match.start() + 1,
                line_text=line,
                kind=IssueKind.CDATA_NESTED,
                message="CDATA sections cannot be nested",
                highlight=match.group(0),
            )

        match = MULTIPLE_CLOSE_RE.search(line)
        if match:
            yield Issue(
                line=line_number,
                column=match.start() + 1,
                line_text=line,
                kind=IssueKind.CDATA_MULTIPLE_CLOSE,
                message="Found multiple ']]>' sequences in a single CDATA block",
                highlight=match.group(0),
            )

        match = EMPTY_RE.search(line)
        if match:
            yield Issue(
                line=line_number,
                column=match.start() + 1,
                line_text=line,
                kind=IssueKind.CDATA_EMPTY,
                message="CDATA section is empty",
                highlight=match.group(0),
            )


__all__ = ['CDATASectionChecker']
