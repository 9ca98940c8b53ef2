# Path: xml_validator/core/config_loader.py
"""
Configuration Loader for XML Validator

Loads configuration from .env file for the validator.
Singleton pattern ensures consistent configuration across all components.

NO hardcoded paths, NO magic numbers.
All configuration comes from environment variables; command-line flags
override these values at startup.
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from xml_validator.core.exceptions import ConfigurationError
from xml_validator.constants import (
    DEFAULT_MAX_ERRORS,
    DEFAULT_CONTEXT_LINES,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_USER_AGENT,
    ENV_MAX_ERRORS,
    ENV_DEBUG,
    ENV_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_CONSOLE,
    ENV_COLOR,
    ENV_CONTEXT_LINES,
    ENV_REQUEST_TIMEOUT,
    ENV_USER_AGENT,
)


class ConfigLoader:
    """
    Singleton configuration loader for the XML validator.

    Loads configuration from environment variables with validation,
    type conversion, and sensible defaults.

    Example:
        config = ConfigLoader()
        max_errors = config.get('max_errors')  # Returns int
        log_dir = config.get('log_dir')  # Returns Path or None
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        and validates all configuration on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # xml_validator/core/config_loader.py -> go up 3 levels to the project root
        current_file = Path(__file__).resolve()
        project_root = current_file.parent.parent.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, any]:
        """
        Load and validate all configuration from environment.

        Returns:
            Dictionary of validated configuration values with proper types

        Raises:
            ConfigurationError: If a value is present but out of range
        """
        config = {
            # ================================================================
            # VALIDATION
            # ================================================================
            'max_errors': self._get_int(ENV_MAX_ERRORS, DEFAULT_MAX_ERRORS),
            'debug': self._get_bool(ENV_DEBUG, False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_level': self._get_env(ENV_LOG_LEVEL, 'INFO'),
            'log_dir': self._get_path(ENV_LOG_DIR),
            'log_console': self._get_bool(ENV_LOG_CONSOLE, True),

            # ================================================================
            # REPORTING
            # ================================================================
            'color': self._get_bool(ENV_COLOR, True),
            'context_lines': self._get_int(ENV_CONTEXT_LINES, DEFAULT_CONTEXT_LINES),

            # ================================================================
            # ACQUISITION
            # ================================================================
            'request_timeout': self._get_float(ENV_REQUEST_TIMEOUT, DEFAULT_REQUEST_TIMEOUT),
            'user_agent': self._get_env(ENV_USER_AGENT, DEFAULT_USER_AGENT),
        }

        if config['max_errors'] < 0:
            raise ConfigurationError(
                f"{ENV_MAX_ERRORS} must be >= 0, got {config['max_errors']}"
            )
        if config['context_lines'] < 0:
            raise ConfigurationError(
                f"{ENV_CONTEXT_LINES} must be >= 0, got {config['context_lines']}"
            )

        return config

    def _get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get string environment variable."""
        value = os.getenv(key)

        if value is None:
            return default

        return value.strip()

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default

        return value.strip().lower() in ('true', '1', 'yes', 'on')

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value.strip())
        except ValueError:
            return default

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable."""
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return float(value.strip())
        except ValueError:
            return default

    def _get_path(self, key: str) -> Optional[Path]:
        """Get path environment variable."""
        value = os.getenv(key)

        if value is None or not value.strip():
            return None

        return Path(value.strip())

    def get(self, key: str, default: any = None) -> any:
        """Get configuration value."""
        return self._config.get(key, default)

    def __getitem__(self, key: str) -> any:
        """Get configuration value using dictionary syntax."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if configuration key exists."""
        return key in self._config

    @classmethod
    def reset(cls):
        """Reset singleton for testing purposes."""
        cls._instance = None
        cls._initialized = False


__all__ = ['ConfigLoader']
