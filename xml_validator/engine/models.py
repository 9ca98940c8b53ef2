# Path: xml_validator/engine/models.py
"""
Data models for the validation engine.

Contains:
- ValidationPhase: fixed pipeline stages, in execution order
- IssueKind: tag of each kind of finding
- Issue: a single finding pinned to a source location
- ValidationOptions: per-run settings
- IssueCollector: bounded, order-preserving accumulator
- PipelineResult: what a run hands to the reporting layer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable


# ============================================================================
# ENUMS
# ============================================================================


class ValidationPhase(str, Enum):
    """Pipeline stages in the order they run."""

    WELLFORMEDNESS = "wellformedness"
    CDATA = "cdata"
    CONTROL_CHARS = "control_chars"
    HEX_COLORS = "hex_colors"
    SVG = "svg"


class IssueKind(str, Enum):
    """Kinds of findings. Values are the labels shown to users."""

    XML_SYNTAX = "Basic XML Syntax Error"
    XML_ERROR = "XML Error"
    CDATA_SPECIAL_CHAR = "Special character after CDATA opening"
    CDATA_EXCLAMATION = "Exclamation mark after CDATA opening"
    CDATA_UNCLOSED = "Unclosed CDATA section"
    CDATA_NESTED = "Nested CDATA sections"
    CDATA_MULTIPLE_CLOSE = "Multiple CDATA closing sequences"
    CDATA_EMPTY = "Empty CDATA section"
    CONTROL_CHARACTER = "Control character"
    INVALID_HEX_COLOR = "Invalid hex color"
    SVG_SELF_CLOSING = "SVG self-closing tag issue"
    SVG_UNQUOTED_ATTRIBUTE = "SVG unquoted attribute"

    @property
    def phase(self) -> ValidationPhase:
        return _KIND_PHASES[self]


_KIND_PHASES = {
    IssueKind.XML_SYNTAX: ValidationPhase.WELLFORMEDNESS,
    IssueKind.XML_ERROR: ValidationPhase.WELLFORMEDNESS,
    IssueKind.CDATA_SPECIAL_CHAR: ValidationPhase.CDATA,
    IssueKind.CDATA_EXCLAMATION: ValidationPhase.CDATA,
    IssueKind.CDATA_UNCLOSED: ValidationPhase.CDATA,
    IssueKind.CDATA_NESTED: ValidationPhase.CDATA,
    IssueKind.CDATA_MULTIPLE_CLOSE: ValidationPhase.CDATA,
    IssueKind.CDATA_EMPTY: ValidationPhase.CDATA,
    IssueKind.CONTROL_CHARACTER: ValidationPhase.CONTROL_CHARS,
    IssueKind.INVALID_HEX_COLOR: ValidationPhase.HEX_COLORS,
    IssueKind.SVG_SELF_CLOSING: ValidationPhase.SVG,
    IssueKind.SVG_UNQUOTED_ATTRIBUTE: ValidationPhase.SVG,
}


# ============================================================================
# DATA MODELS
# ============================================================================


@dataclass(frozen=True)
class Issue:
    """
    A single validation finding.

    Attributes:
        line: 1-based line number, 0 when the position is unknown
        column: 1-based column, 0 when unknown
        line_text: literal text of the line (no line terminator)
        kind: what was found
        message: human-readable explanation
        highlight: exact text to underline; its length is the underline width
    """

    line: int
    column: int
    line_text: str
    kind: IssueKind
    message: str
    highlight: str = ""

    @property
    def has_position(self) -> bool:
        return self.line > 0

    def __str__(self) -> str:
        location = f"Line {self.line}, Column {self.column}" if self.line else "Unknown location"
        return f"[{self.kind.phase.value.upper()}] {location}: {self.kind.value}: {self.message}"

    def to_dict(self) -> dict:
        return {
            'line': self.line,
            'column': self.column,
            'line_text': self.line_text,
            'kind': self.kind.value,
            'phase': self.kind.phase.value,
            'message': self.message,
            'highlight': self.highlight,
        }


@dataclass(frozen=True)
class ValidationOptions:
    """Settings for one run. max_issues == 0 means unbounded."""

    max_issues: int = 0
    debug: bool = False

    def __post_init__(self):
        if self.max_issues < 0:
            raise ValueError(f"max_issues must be >= 0, got {self.max_issues}")


class IssueCollector:
    """
    Bounded accumulator for issues, in discovery order.

    Every candidate passed to add() is counted in ``found``; only the first
    ``capacity`` are kept. Scanners check ``is_full`` after each line and the
    pipeline checks it after each phase, so ``found`` may exceed
    ``capacity`` by the issues of the line that crossed the limit.

    Example:
        collector = IssueCollector(capacity=5)
        for issue in candidates:
            collector.add(issue)
            ...
        if collector.is_full:
            stop scanning
    """

    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self.found = 0
        self._issues: list[Issue] = []

    @property
    def bounded(self) -> bool:
        return self.capacity > 0

    @property
    def issues(self) -> list[Issue]:
        return list(self._issues)

    @property
    def is_full(self) -> bool:
        return self.bounded and self.found >= self.capacity

    def would_overflow(self, count: int = 1) -> bool:
        """True when ``count`` more issues would exceed the capacity."""
        return self.bounded and self.found + count > self.capacity

    def add(self, issue: Issue) -> bool:
        """Count an issue; return True if it was kept."""
        kept = not self.would_overflow()
        if kept:
            self._issues.append(issue)
        self.found += 1
        return kept

    def extend(self, issues: Iterable[Issue]) -> None:
        for issue in issues:
            self.add(issue)

    def __len__(self) -> int:
        return len(self._issues)


@dataclass
class PipelineResult:
    """Outcome of one validation run."""

    source: str
    issues: list[Issue] = field(default_factory=list)
    total_found: int = 0
    phases_completed: list[ValidationPhase] = field(default_factory=list)
    validation_time: datetime = field(default_factory=datetime.now)

    @property
    def is_valid(self) -> bool:
        return self.total_found == 0

    @property
    def truncated(self) -> bool:
        return self.total_found > len(self.issues)

    @property
    def hidden_count(self) -> int:
        return self.total_found - len(self.issues)

    def to_dict(self) -> dict:
        return {
            'source': self.source,
            'is_valid': self.is_valid,
            'total_found': self.total_found,
            'shown': len(self.issues),
            'truncated': self.truncated,
            'phases_completed': [phase.value for phase in self.phases_completed],
            'validation_time': self.validation_time.isoformat(),
            'issues': [issue.to_dict() for issue in self.issues],
        }


__all__ = [
    'ValidationPhase',
    'IssueKind',
    'Issue',
    'ValidationOptions',
    'IssueCollector',
    'PipelineResult',
]
