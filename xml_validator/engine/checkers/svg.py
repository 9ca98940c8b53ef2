# Path: xml_validator/engine/checkers/svg.py
"""
SVG syntax checks.

Two per-line heuristics:
- shape elements (path, rect, ...) written as open tags with no closing
  tag later on the same line
- width/height/viewBox on an <svg> tag with an unquoted value

Closing tags on later lines are not seen.
"""

from __future__ import annotations

import re
from typing import Iterator

from xml_validator.engine.checkers.base import LineChecker
from xml_validator.engine.models import Issue, IssueKind, ValidationPhase
from xml_validator.constants import SVG_VOID_ELEMENTS, SVG_SIZE_ATTRIBUTES

VOID_ELEMENT_RE = re.compile(
    r'<(' + '|'.join(SVG_VOID_ELEMENTS) + r')(?=[\s/>])[^>]*>'
)
SVG_TAG_RE = re.compile(r'<svg(?=[\s/>]|$)[^>]*')
UNQUOTED_ATTR_RE = re.compile(
    r'(?<![\w:.-])(' + '|'.join(SVG_SIZE_ATTRIBUTES) + r')'
    r'=([^"\'\s>/][^\s>]*?)(?=\s|/?>|/?$)'
)


def _has_closing_tag(line: str, tag: str, start: int) -> bool:
    return re.search(rf'</{tag}\s*>', line[start:]) is not None


class SVGSyntaxChecker(LineChecker):
    """Flags non-self-closed shape elements and unquoted <svg> sizes."""

    phase = ValidationPhase.SVG
    description = 'SVG syntax'

    def check_line(self, line_number: int, line: str) -> Iterator[Issue]:
        if '<' not in line:
            return

        for match in VOID_ELEMENT_RE.finditer(line):
            text = match.group(0)
            tag = match.group(1)
            if text.endswith('/>') or _has_closing_tag(line, tag, match.end()):
                continue
            yield Issue(
                line=line_number,
                column=match.start() + 1,
                line_text=line,
                kind=IssueKind.SVG_SELF_CLOSING,
                message=f"SVG <{tag}> tag should be self-closing with />",
                highlight=text,
            )

        for tag_match in SVG_TAG_RE.finditer(line):
            for match in UNQUOTED_ATTR_RE.finditer(line, tag_match.start(), tag_match.end()):
                name, value = match.group(1), match.group(2)
                yield Issue(
                    line=line_number,
                    column=match.start() + 1,
                    line_text=line,
                    kind=IssueKind.SVG_UNQUOTED_ATTRIBUTE,
                    message=f'SVG attribute {name}={value} should use quotes: {name}="{value}"',
                    highlight=f"{name}={value}",
                )


__all__ = ['SVGSyntaxChecker']
