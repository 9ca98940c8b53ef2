# Path: xml_validator/core/exceptions.py
"""
Exceptions for the XML validator.

Validation findings are never raised; they are returned as Issue values.
Only failures that end a run (acquisition, configuration) are exceptions.
"""

from typing import Optional


class XMLValidatorError(Exception):
    """Base class for all fatal validator errors."""


class ContentAcquisitionError(XMLValidatorError):
    """Document could not be read from disk or fetched over HTTP."""

    def __init__(self, source: str, reason: str, status: Optional[int] = None):
        self.source = source
        self.reason = reason
        self.status = status
        super().__init__(f"{reason} ({source})")


class ConfigurationError(XMLValidatorError):
    """A configuration value is present but unusable."""


__all__ = [
    'XMLValidatorError',
    'ContentAcquisitionError',
    'ConfigurationError',
]
