# Path: xml_validator/engine/checkers/control_chars.py
"""
Control character check.

Reports the first character below 0x20 (other than tab, CR and LF) on each
line. Further control characters on the same line are not reported.
"""

from __future__ import annotations

from typing import Iterator

from xml_validator.engine.checkers.base import LineChecker
from xml_validator.engine.models import Issue, IssueKind, ValidationPhase
from xml_validator.constants import ALLOWED_CONTROL_CHARS


def is_forbidden_control(char: str) -> bool:
    return ord(char) < 0x20 and char not in ALLOWED_CONTROL_CHARS


class ControlCharacterChecker(LineChecker):
    """At most one issue per line: the first stray control character."""

    phase = ValidationPhase.CONTROL_CHARS
    description = 'control characters'

    def check_line(self, line_number: int, line: str) -> Iterator[Issue]:
        for index, char in enumerate(line):
            if is_forbidden_control(char):
                yield Issue(
                    line=line_number,
                    column=index + 1,
                    line_text=line,
                    kind=IssueKind.CONTROL_CHARACTER,
                    message=f"Control character (hex 0x{ord(char):02X}) found",
                    highlight=char,
                )
                return


__all__ = ['ControlCharacterChecker', 'is_forbidden_control']
