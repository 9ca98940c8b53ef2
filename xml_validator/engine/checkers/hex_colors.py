# Path: xml_validator/engine/checkers/hex_colors.py
"""
Hex color code check.

A '#' followed by a run of hex digits is a color literal. Only #RGB,
#RRGGBB and #RRGGBBAA are valid; any other run length is reported.
Numeric character references such as '&#8217;' are not colors: a '#'
right after '&' is skipped, which goes beyond a plain scan of every
'#'-prefixed run on purpose. Exported posts are full of such references.
"""

from __future__ import annotations

import re
from typing import Iterator

from xml_validator.engine.checkers.base import LineChecker
from xml_validator.engine.models import Issue, IssueKind, ValidationPhase
from xml_validator.constants import VALID_HEX_COLOR_LENGTHS

# Greedy run, so the match never stops in front of another hex digit
HEX_RUN_RE = re.compile(r'(?<!&)#([0-9a-fA-F]+)')


def is_valid_hex_color(digits: str) -> bool:
    return len(digits) in VALID_HEX_COLOR_LENGTHS


class HexColorChecker(LineChecker):
    """Reports every malformed color literal on a line, left to right."""

    phase = ValidationPhase.HEX_COLORS
    description = 'hex color codes'

    def check_line(self, line_number: int, line: str) -> Iterator[Issue]:
        if '#' not in line:
            return

        for match in HEX_RUN_RE.finditer(line):
            if is_valid_hex_color(match.group(1)):
                continue
            hex_code = match.group(0)
            yield Issue(
                line=line_number,
                column=match.start() + 1,
                line_text=line,
                kind=IssueKind.INVALID_HEX_COLOR,
                message=(
                    f"Invalid hex color code: {hex_code} "
                    f"(should be #RGB, #RRGGBB, or #RRGGBBAA)"
                ),
                highlight=hex_code,
            )


__all__ = ['HexColorChecker', 'is_valid_hex_color']
