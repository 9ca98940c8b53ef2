# Path: xml_validator/engine/checkers/base.py
"""
Base class for line-oriented checkers.

Each checker inspects one physical line at a time and yields issues in
left-to-right order. The budget is enforced between lines.
"""

from __future__ import annotations

from typing import Iterator

from xml_validator.core.logger import get_logger
from xml_validator.engine.models import Issue, IssueCollector, ValidationPhase
from xml_validator.engine.position import iter_lines
from xml_validator.constants import LOG_PROCESS

logger = get_logger(__name__, 'engine')


class LineChecker:
    """
    Scans a document line by line.

    Subclasses set ``phase``/``description`` and implement check_line().

    Example:
        issues = HexColorChecker().check(content, budget=5)
    """

    phase: ValidationPhase
    description: str = ''

    def check_line(self, line_number: int, line: str) -> Iterator[Issue]:
        raise NotImplementedError

    def collect(self, content: bytes, collector: IssueCollector) -> None:
        """
        Feed this checker's issues into a shared collector.

        Stops after the line on which the collector becomes full.
        """
        before = collector.found
        for line_number, line in iter_lines(content):
            for issue in self.check_line(line_number, line):
                collector.add(issue)
            if collector.is_full:
                logger.debug(
                    f"{LOG_PROCESS} {self.phase.value}: budget reached at line {line_number}"
                )
                break
        logger.debug(
            f"{LOG_PROCESS} {self.phase.value}: {collector.found - before} issue(s)"
        )

    def check(self, content: bytes, budget: int = 0) -> list[Issue]:
        """
        Run this checker on its own.

        Args:
            content: Raw document bytes
            budget: Stop once this many issues were found (0 = unbounded)

        Returns:
            Issues in scan order; may exceed ``budget`` by the issues of the
            line that reached it
        """
        issues: list[Issue] = []
        for line_number, line in iter_lines(content):
            issues.extend(self.check_line(line_number, line))
            if budget > 0 and len(issues) >= budget:
                break
        return issues

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ['LineChecker']
