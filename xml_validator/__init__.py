"""
XML Validation Module
=====================
Well-formedness and content checks for XML exports (WordPress WXR feeds
and similar): CDATA sections, control characters, hex colors, SVG syntax.
"""
from .engine import (
ValidationPipeline,
ValidationOptions,
PipelineResult,
Issue,
IssueKind,
ValidationPhase,
IssueCollector,
WellFormednessChecker,
CDATASectionChecker,
ControlCharacterChecker,
HexColorChecker,
SVGSyntaxChecker,
resolve_position,
validate_content
)
from .constants import VERSION
__all__ = [
'ValidationPipeline',
'ValidationOptions',
'PipelineResult',
'Issue',
'IssueKind',
'ValidationPhase',
'IssueCollector',
'WellFormednessChecker',
'CDATASectionChecker',
'ControlCharacterChecker',
'HexColorChecker',
'SVGSyntaxChecker',
'resolve_position',
'validate_content'
]
__version__ = VERSION
