# Path: xml_validator/engine/__init__.py
"""
Validation engine.

Contains:
- models: Issue, options, bounded collector, result
- position: byte offset to line/column resolution
- wellformedness: lxml-based well-formedness check
- checkers: line-oriented content checks
- pipeline: ordering and issue budget
"""

from .models import (
    ValidationPhase,
    IssueKind,
    Issue,
    ValidationOptions,
    IssueCollector,
    PipelineResult,
)
from .position import Position, resolve_position, line_text, offset_for, iter_lines
from .wellformedness import WellFormednessChecker
from .checkers import (
    LineChecker,
    CDATASectionChecker,
    ControlCharacterChecker,
    HexColorChecker,
    SVGSyntaxChecker,
    default_checkers,
)
from .pipeline import ValidationPipeline, validate_content

__all__ = [
    'ValidationPhase',
    'IssueKind',
    'Issue',
    'ValidationOptions',
    'IssueCollector',
    'PipelineResult',
    'Position',
    'resolve_position',
    'line_text',
    'offset_for',
    'iter_lines',
    'WellFormednessChecker',
    'LineChecker',
    'CDATASectionChecker',
    'ControlCharacterChecker',
    'HexColorChecker',
    'SVGSyntaxChecker',
    'default_checkers',
    'ValidationPipeline',
    'validate_content',
]
