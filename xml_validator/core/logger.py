# Path: xml_validator/core/logger.py
"""
XML Validator Logger

Centralized logging configuration for the validator.

Architecture:
- Component-based logging (core, engine, loaders, output, cli)
- Rich console output, optional file output
- Configurable log levels
- IPO (Input-Process-Output) structured logging
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from xml_validator.core.config_loader import ConfigLoader
from xml_validator.constants import (
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_ACTIVITY_FILENAME,
    LOG_ERRORS_FILENAME,
    LOGGER_ROOT,
    LOGGER_CORE,
    LOGGER_ENGINE,
    LOGGER_LOADERS,
    LOGGER_OUTPUT,
    LOGGER_CLI,
)


_COMPONENT_LOGGERS = {
    'core': LOGGER_CORE,
    'engine': LOGGER_ENGINE,
    'loaders': LOGGER_LOADERS,
    'output': LOGGER_OUTPUT,
    'cli': LOGGER_CLI,
}


class ValidatorLogger:
    """
    Centralized logger for the validator.

    Provides component-specific loggers with unified configuration.
    Loggers obtained before configure() simply propagate to the root logger.

    Example:
        logger = get_logger(__name__, 'engine')
        logger.info("[INPUT] Received 2048 bytes")
        logger.info("[PROCESS] Checking CDATA sections...")
        logger.info("[OUTPUT] 3 issues collected")
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize validator logger.

        Args:
            config: Optional ConfigLoader instance (resolved lazily)
        """
        self._config = config
        self._configured = False

    @property
    def config(self) -> ConfigLoader:
        if self._config is None:
            self._config = ConfigLoader()
        return self._config

    def configure(
        self,
        level: Optional[str] = None,
        console: Optional[Console] = None
    ) -> None:
        """
        Configure logging system for the validator.

        Args:
            level: Overrides the configured log level (e.g. 'DEBUG')
            console: Rich console for the console handler (stderr by default)
        """
        log_dir = self.config.get('log_dir')
        log_level = (level or self.config.get('log_level', 'INFO')).upper()
        console_output = self.config.get('log_console', True)
        numeric_level = getattr(logging, log_level, logging.INFO)

        logger = logging.getLogger(LOGGER_ROOT)
        logger.setLevel(numeric_level)

        # Clear any existing handlers
        logger.handlers.clear()

        if log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_dir / LOG_ACTIVITY_FILENAME)
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(
                logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
            )
            logger.addHandler(file_handler)

            # Error-only log file
            error_handler = logging.FileHandler(log_dir / LOG_ERRORS_FILENAME)
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(
                logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
            )
            logger.addHandler(error_handler)

        if console_output:
            console_handler = RichHandler(
                console=console or Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
            logger.addHandler(console_handler)

        logger.propagate = False
        self._configured = True

    @property
    def configured(self) -> bool:
        return self._configured

    def get_logger(self, name: str, component: str = 'core') -> logging.Logger:
        """
        Get logger for specific component.

        Args:
            name: Module name (typically __name__)
            component: Component type ('core', 'engine', 'loaders', 'output', 'cli')

        Returns:
            Logger instance under the validator namespace
        """
        prefix = _COMPONENT_LOGGERS.get(component, LOGGER_ROOT)
        return logging.getLogger(f"{prefix}.{name}")


# Global logger instance
_validator_logger = ValidatorLogger()


def get_logger(name: str, component: str = 'core') -> logging.Logger:
    """
    Get logger for a validator component.

    Example:
        from xml_validator.core.logger import get_logger

        logger = get_logger(__name__, 'engine')
        logger.info("[PROCESS] Checking SVG syntax...")
    """
    return _validator_logger.get_logger(name, component)


def configure_logging(
    config: Optional[ConfigLoader] = None,
    level: Optional[str] = None,
    console: Optional[Console] = None
) -> None:
    """
    Configure validator logging system.

    Call this once at startup (the CLI does).

    Args:
        config: Optional ConfigLoader instance
        level: Optional level override, e.g. 'DEBUG' for --debug
        console: Optional rich console for log output
    """
    global _validator_logger

    if config:
        _validator_logger = ValidatorLogger(config)

    _validator_logger.configure(level=level, console=console)


__all__ = ['get_logger', 'configure_logging', 'ValidatorLogger']
