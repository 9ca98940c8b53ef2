# Path: xml_validator/engine/wellformedness.py
"""
Well-formedness check (Stage 1).

Drives lxml's pull parser over the document and reports the first
structural error, if any. Never reports more than one issue.
"""

from __future__ import annotations

from typing import Optional

from lxml import etree
from lxml.etree import XMLSyntaxError

from xml_validator.core.logger import get_logger
from xml_validator.engine.models import Issue, IssueKind, ValidationPhase
from xml_validator.engine.position import (
    Position,
    line_text,
    offset_for,
    resolve_position,
)
from xml_validator.constants import DEFAULT_PARSE_CHUNK_SIZE, LOG_PROCESS

logger = get_logger(__name__, 'engine')


class WellFormednessChecker:
    """
    Validates XML well-formedness with a streaming lxml parser.

    Entity expansion and network access are disabled: the document is only
    checked, never resolved.

    Example:
        issues = WellFormednessChecker().check(b'<a><b></a>')
        issues[0].kind  # IssueKind.XML_SYNTAX
    """

    phase = ValidationPhase.WELLFORMEDNESS

    def __init__(self, chunk_size: int = DEFAULT_PARSE_CHUNK_SIZE):
        self.chunk_size = chunk_size

    def _new_parser(self) -> etree.XMLPullParser:
        return etree.XMLPullParser(
            events=('start', 'end'),
            resolve_entities=False,
            no_network=True,
            load_dtd=False,
            huge_tree=True,
        )

    def check(self, content: bytes) -> list[Issue]:
        """
        Check document well-formedness.

        Args:
            content: Raw document bytes

        Returns:
            Empty list if well-formed, else exactly one Issue
        """
        # A document with no tokens at all has nothing malformed in it
        if not content.strip():
            logger.debug(f"{LOG_PROCESS} Empty document, nothing to parse")
            return []

        parser = self._new_parser()

        try:
            for start in range(0, len(content), self.chunk_size):
                parser.feed(content[start:start + self.chunk_size])
                for _event, _element in parser.read_events():
                    pass
            parser.close()
            for _event, _element in parser.read_events():
                pass

        except XMLSyntaxError as e:
            issue = self._syntax_issue(content, e)
            logger.info(f"{LOG_PROCESS} XML syntax error: {issue.message}")
            return [issue]

        except etree.LxmlError as e:
            logger.info(f"{LOG_PROCESS} XML error without position: {e}")
            return [Issue(
                line=0,
                column=0,
                line_text='',
                kind=IssueKind.XML_ERROR,
                message=str(e),
            )]

        logger.debug(f"{LOG_PROCESS} Document is well-formed")
        return []

    def _syntax_issue(self, content: bytes, error: XMLSyntaxError) -> Issue:
        line = error.lineno or 0
        if line <= 0:
            return Issue(
                line=0,
                column=0,
                line_text='',
                kind=IssueKind.XML_ERROR,
                message=str(error),
            )

        column = _error_column(error)
        position = _locate(content, line, column)

        return Issue(
            line=position.line,
            column=position.column,
            line_text=position.line_text,
            kind=IssueKind.XML_SYNTAX,
            message=str(error),
        )


def _error_column(error: XMLSyntaxError) -> int:
    position: Optional[tuple] = getattr(error, 'position', None)
    if position and len(position) > 1 and position[1]:
        return int(position[1])
    return 1


def _locate(content: bytes, line: int, column: int) -> Position:
    """
    Turn the parser's line/column into a Position.

    The parser reports real line/column values, so they are converted to a
    byte offset and resolved. Errors at end of input point past the last
    byte; those keep the parser's values and look the line up directly.
    """
    offset = offset_for(content, line, column)
    if 0 <= offset < len(content):
        return resolve_position(content, offset)
    return Position(line, column, line_text(content, line))


__all__ = ['WellFormednessChecker']
