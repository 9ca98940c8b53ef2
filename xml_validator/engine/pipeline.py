# Path: xml_validator/engine/pipeline.py
"""
Validation pipeline orchestrator.

Coordinates the validation stages:
1. Well-formedness (lxml)
2. CDATA sections
3. Control characters
4. Hex color codes
5. SVG syntax

Stages 2-5 only run on a well-formed document. One bounded collector is
shared by all stages; once it is full the current stage stops after its
current line and no later stage runs.
"""

from __future__ import annotations

from typing import Optional, Sequence

from xml_validator.core.logger import get_logger
from xml_validator.engine.checkers import LineChecker, default_checkers
from xml_validator.engine.models import (
    IssueCollector,
    PipelineResult,
    ValidationOptions,
)
from xml_validator.engine.wellformedness import WellFormednessChecker
from xml_validator.constants import LOG_INPUT, LOG_PROCESS, LOG_OUTPUT

logger = get_logger(__name__, 'engine')


class ValidationPipeline:
    """
    Runs the checkers in a fixed order under an issue budget.

    Example:
        pipeline = ValidationPipeline()
        result = pipeline.run(content, ValidationOptions(max_issues=5))
        for issue in result.issues:
            print(issue)
        if result.truncated:
            print(f"{result.hidden_count} more")
    """

    def __init__(
        self,
        wellformedness: Optional[WellFormednessChecker] = None,
        checkers: Optional[Sequence[LineChecker]] = None
    ):
        """
        Initialize pipeline.

        Args:
            wellformedness: Stage 1 checker (default: WellFormednessChecker())
            checkers: Secondary checkers in run order (default: all four)
        """
        self.wellformedness = wellformedness or WellFormednessChecker()
        self.checkers = list(checkers) if checkers is not None else default_checkers()

    def run(
        self,
        content: bytes,
        options: Optional[ValidationOptions] = None,
        source: str = '(bytes input)'
    ) -> PipelineResult:
        """
        Validate a document.

        Args:
            content: Raw document bytes, never modified
            options: Issue budget and debug flag
            source: Where the content came from, for reporting

        Returns:
            PipelineResult with at most options.max_issues issues
        """
        options = options or ValidationOptions()
        collector = IssueCollector(options.max_issues)
        result = PipelineResult(source=source)

        logger.info(f"{LOG_INPUT} Validating {len(content)} bytes from {source}")

        logger.info(f"{LOG_PROCESS} Checking well-formedness...")
        basic_issues = self.wellformedness.check(content)
        collector.extend(basic_issues)
        result.phases_completed.append(self.wellformedness.phase)

        if basic_issues:
            logger.info(f"{LOG_PROCESS} Well-formedness failed, skipping additional checks")
            return self._finish(result, collector)

        logger.info(f"{LOG_PROCESS} Basic XML validation passed. Performing additional checks...")

        for checker in self.checkers:
            if collector.is_full:
                break
            logger.info(f"{LOG_PROCESS} Checking {checker.description}...")
            checker.collect(content, collector)
            result.phases_completed.append(checker.phase)

        return self._finish(result, collector)

    def _finish(self, result: PipelineResult, collector: IssueCollector) -> PipelineResult:
        result.issues = collector.issues
        result.total_found = collector.found
        logger.info(
            f"{LOG_OUTPUT} {collector.found} issue(s) found, {len(result.issues)} kept"
        )
        return result


def validate_content(
    content: bytes,
    options: Optional[ValidationOptions] = None,
    source: str = '(bytes input)'
) -> PipelineResult:
    """Validate with the default pipeline."""
    return ValidationPipeline().run(content, options, source)


__all__ = ['ValidationPipeline', 'validate_content']
