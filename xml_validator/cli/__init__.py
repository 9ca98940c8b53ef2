# Path: xml_validator/cli/__init__.py
"""
Command-line entry point.
"""

from .main import main, build_parser, run

__all__ = ['main', 'build_parser', 'run']
