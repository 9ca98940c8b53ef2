# Path: xml_validator/constants.py
"""
XML Validator Module Constants

Module-wide constants for validation, acquisition and reporting.

No hardcoded paths - all paths come from .env via config_loader.
"""

# ============================================================================
# VERSION
# ============================================================================
VERSION: str = '1.1.0'

# ============================================================================
# VALIDATION DEFAULTS
# ============================================================================
DEFAULT_MAX_ERRORS: int = 5
DEFAULT_CONTEXT_LINES: int = 2
DEFAULT_PARSE_CHUNK_SIZE: int = 64 * 1024  # bytes fed to the pull parser per step

# ============================================================================
# XML MARKERS
# ============================================================================
CDATA_OPEN: str = '<![CDATA['
CDATA_CLOSE: str = ']]>'

# Elements that never carry children in the SVG documents we see
SVG_VOID_ELEMENTS: tuple = (
    'path',
    'rect',
    'circle',
    'ellipse',
    'line',
    'polyline',
    'polygon',
    'image',
    'use',
)
SVG_SIZE_ATTRIBUTES: tuple = ('width', 'height', 'viewBox')

# Hex color digit counts: #RGB, #RRGGBB, #RRGGBBAA
VALID_HEX_COLOR_LENGTHS: frozenset = frozenset({3, 6, 8})

# Control characters allowed by XML 1.0 below 0x20
ALLOWED_CONTROL_CHARS: frozenset = frozenset({'\t', '\r', '\n'})

# ============================================================================
# ACQUISITION
# ============================================================================
REMOTE_PREFIXES: tuple = ('http://', 'https://')
HTTP_OK: int = 200
DEFAULT_REQUEST_TIMEOUT: float = 0.0  # 0 disables the client timeout
DEFAULT_USER_AGENT: str = f'xml-validator/{VERSION}'

# ============================================================================
# IPO LOGGING PREFIXES
# ============================================================================
LOG_INPUT: str = '[INPUT]'
LOG_PROCESS: str = '[PROCESS]'
LOG_OUTPUT: str = '[OUTPUT]'

# ============================================================================
# LOGGING COMPONENTS
# ============================================================================
LOGGER_ROOT: str = 'xml_validator'
LOGGER_CORE: str = 'xml_validator.core'
LOGGER_ENGINE: str = 'xml_validator.engine'
LOGGER_LOADERS: str = 'xml_validator.loaders'
LOGGER_OUTPUT: str = 'xml_validator.output'
LOGGER_CLI: str = 'xml_validator.cli'

# ============================================================================
# LOG FORMAT
# ============================================================================
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
LOG_ACTIVITY_FILENAME: str = 'validator_activity.log'
LOG_ERRORS_FILENAME: str = 'errors.log'

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================
ENV_MAX_ERRORS: str = 'XML_VALIDATOR_MAX_ERRORS'
ENV_DEBUG: str = 'XML_VALIDATOR_DEBUG'
ENV_LOG_LEVEL: str = 'XML_VALIDATOR_LOG_LEVEL'
ENV_LOG_DIR: str = 'XML_VALIDATOR_LOG_DIR'
ENV_LOG_CONSOLE: str = 'XML_VALIDATOR_LOG_CONSOLE'
ENV_COLOR: str = 'XML_VALIDATOR_COLOR'
ENV_CONTEXT_LINES: str = 'XML_VALIDATOR_CONTEXT_LINES'
ENV_REQUEST_TIMEOUT: str = 'XML_VALIDATOR_REQUEST_TIMEOUT'
ENV_USER_AGENT: str = 'XML_VALIDATOR_USER_AGENT'

# ============================================================================
# EXIT CODES
# ============================================================================
EXIT_OK: int = 0
EXIT_ISSUES: int = 1
EXIT_INTERRUPTED: int = 130


__all__ = [
    'VERSION',
    'DEFAULT_MAX_ERRORS',
    'DEFAULT_CONTEXT_LINES',
    'DEFAULT_PARSE_CHUNK_SIZE',
    'CDATA_OPEN',
    'CDATA_CLOSE',
    'SVG_VOID_ELEMENTS',
    'SVG_SIZE_ATTRIBUTES',
    'VALID_HEX_COLOR_LENGTHS',
    'ALLOWED_CONTROL_CHARS',
    'REMOTE_PREFIXES',
    'HTTP_OK',
    'DEFAULT_REQUEST_TIMEOUT',
    'DEFAULT_USER_AGENT',
    'LOG_INPUT',
    'LOG_PROCESS',
    'LOG_OUTPUT',
    'LOGGER_ROOT',
    'LOGGER_CORE',
    'LOGGER_ENGINE',
    'LOGGER_LOADERS',
    'LOGGER_OUTPUT',
    'LOGGER_CLI',
    'LOG_FORMAT',
    'LOG_DATE_FORMAT',
    'LOG_ACTIVITY_FILENAME',
    'LOG_ERRORS_FILENAME',
    'ENV_MAX_ERRORS',
    'ENV_DEBUG',
    'ENV_LOG_LEVEL',
    'ENV_LOG_DIR',
    'ENV_LOG_CONSOLE',
    'ENV_COLOR',
    'ENV_CONTEXT_LINES',
    'ENV_REQUEST_TIMEOUT',
    'ENV_USER_AGENT',
    'EXIT_OK',
    'EXIT_ISSUES',
    'EXIT_INTERRUPTED',
]
