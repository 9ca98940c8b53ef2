# Path: xml_validator/output/context.py
"""
Source context around an issue: a few numbered lines and a pointer under
the offending text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from xml_validator.engine.models import Issue
from xml_validator.engine.position import iter_lines
from xml_validator.constants import DEFAULT_CONTEXT_LINES

LINE_NUMBER_WIDTH = 4
# "%4d: " prefix in front of every context line
GUTTER_WIDTH = LINE_NUMBER_WIDTH + 2


@dataclass
class ContextLine:
    number: int
    text: str
    is_issue_line: bool = False

    @property
    def rendered(self) -> str:
        return f"{self.number:{LINE_NUMBER_WIDTH}d}: {self.text}"


@dataclass
class ContextBlock:
    lines: list[ContextLine] = field(default_factory=list)
    pointer: Optional[str] = None

    def render(self) -> list[str]:
        """Plain-text lines, pointer placed right after the issue line."""
        rendered = []
        for line in self.lines:
            rendered.append(line.rendered)
            if line.is_issue_line and self.pointer:
                rendered.append(self.pointer)
        return rendered


def pointer_for(column: int, highlight: str) -> str:
    """Caret under ``column`` followed by '~' for the rest of ``highlight``."""
    pointer = " " * (column + GUTTER_WIDTH - 1) + "^"
    if len(highlight) > 1:
        pointer += "~" * (len(highlight) - 1)
    return pointer


class ContextRenderer:
    """
    Builds the context window shown for each issue.

    Example:
        block = ContextRenderer(context_lines=2).render(content, issue)
        print("\\n".join(block.render()))
    """

    def __init__(self, context_lines: int = DEFAULT_CONTEXT_LINES):
        self.context_lines = context_lines

    def render(self, content: bytes, issue: Issue) -> ContextBlock:
        block = ContextBlock()
        if not issue.has_position:
            return block

        first = max(issue.line - self.context_lines, 1)
        last = issue.line + self.context_lines

        for number, text in iter_lines(content):
            if number < first:
                continue
            if number > last:
                break
            block.lines.append(ContextLine(number, text, number == issue.line))

        if issue.column > 0:
            block.pointer = pointer_for(issue.column, issue.highlight)

        return block


__all__ = ['ContextLine', 'ContextBlock', 'ContextRenderer', 'pointer_for']
