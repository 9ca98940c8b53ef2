# Path: xml_validator/core/__init__.py
"""
Core infrastructure: configuration, logging and exceptions.
"""

from .exceptions import (
    XMLValidatorError,
    ContentAcquisitionError,
    ConfigurationError,
)
from .config_loader import ConfigLoader
from .logger import get_logger, configure_logging

__all__ = [
    'XMLValidatorError',
    'ContentAcquisitionError',
    'ConfigurationError',
    'ConfigLoader',
    'get_logger',
    'configure_logging',
]
