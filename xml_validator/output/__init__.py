# Path: xml_validator/output/__init__.py
"""
Presentation of validation results.

Contains:
- context: numbered source lines with a pointer under the issue
- reporters: console (rich) and JSON reporters
- tips: correction tips shown after failures
"""

from .context import ContextRenderer, ContextBlock, ContextLine, pointer_for
from .reporters import (
    FormatterConfig,
    Reporter,
    ConsoleReporter,
    JsonReporter,
    create_reporter,
    OUTPUT_FORMATS,
)

__all__ = [
    'ContextRenderer',
    'ContextBlock',
    'ContextLine',
    'pointer_for',
    'FormatterConfig',
    'Reporter',
    'ConsoleReporter',
    'JsonReporter',
    'create_reporter',
    'OUTPUT_FORMATS',
]
