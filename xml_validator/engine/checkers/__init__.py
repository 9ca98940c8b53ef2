# Path: xml_validator/engine/checkers/__init__.py
"""
Line-oriented content checkers.

Contains:
- cdata: malformed CDATA sections
- control_chars: stray control characters
- hex_colors: malformed color literals
- svg: SVG element and attribute syntax
"""

from .base import LineChecker
from .cdata import CDATASectionChecker
from .control_chars import ControlCharacterChecker
from .hex_colors import HexColorChecker
from .svg import SVGSyntaxChecker


def default_checkers() -> list[LineChecker]:
    """Secondary checkers in pipeline order."""
    return [
        CDATASectionChecker(),
        ControlCharacterChecker(),
        HexColorChecker(),
        SVGSyntaxChecker(),
    ]


__all__ = [
    'LineChecker',
    'CDATASectionChecker',
    'ControlCharacterChecker',
    'HexColorChecker',
    'SVGSyntaxChecker',
    'default_checkers',
]
