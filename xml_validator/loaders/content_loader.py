# Path: xml_validator/loaders/content_loader.py
"""
Content Loader

Reads the document to validate from a local path or an http(s) URL.

Architecture:
- Local files read in one call
- Remote files fetched with aiohttp, driven synchronously via asyncio.run
- Any failure raises ContentAcquisitionError; nothing is retried
"""

import asyncio
from pathlib import Path
from typing import Optional

import aiohttp

from xml_validator.core.config_loader import ConfigLoader
from xml_validator.core.exceptions import ContentAcquisitionError
from xml_validator.core.logger import get_logger
from xml_validator.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_USER_AGENT,
    HTTP_OK,
    LOG_INPUT,
    REMOTE_PREFIXES,
)

logger = get_logger(__name__, 'loaders')


def is_remote(source: str) -> bool:
    """True for http:// and https:// sources."""
    return source.lower().startswith(REMOTE_PREFIXES)


class ContentLoader:
    """
    Loads document bytes for validation.

    Example:
        loader = ContentLoader()
        content = loader.load('https://example.com/export.xml')
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize content loader.

        Args:
            config: Optional ConfigLoader instance
        """
        self.config = config if config else ConfigLoader()

        self.timeout = self.config.get('request_timeout', DEFAULT_REQUEST_TIMEOUT)
        self.user_agent = self.config.get('user_agent', DEFAULT_USER_AGENT)

    def load(self, source: str) -> bytes:
        """
        Load a document.

        Args:
            source: Local path or http(s) URL

        Returns:
            Raw document bytes

        Raises:
            ContentAcquisitionError: If the document cannot be obtained
        """
        if is_remote(source):
            logger.info(f"{LOG_INPUT} Downloading from URL: {source}")
            return asyncio.run(self.fetch(source))

        logger.info(f"{LOG_INPUT} Reading local file: {source}")
        return self.read_file(Path(source))

    def read_file(self, path: Path) -> bytes:
        if not path.exists():
            raise ContentAcquisitionError(str(path), "File not found")
        if not path.is_file():
            raise ContentAcquisitionError(str(path), "Not a regular file")

        try:
            content = path.read_bytes()
        except OSError as e:
            raise ContentAcquisitionError(str(path), f"Failed to read file: {e}") from e

        logger.debug(f"{LOG_INPUT} Read {len(content)} bytes from {path}")
        return content

    async def fetch(self, url: str) -> bytes:
        """
        Fetch a remote document.

        Raises:
            ContentAcquisitionError: On network failure or non-200 status
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout if self.timeout > 0 else None)
        headers = {'User-Agent': self.user_agent}

        try:
            async with aiohttp.ClientSession(timeout=timeout, headers=headers) as session:
                async with session.get(url) as response:
                    if response.status != HTTP_OK:
                        raise ContentAcquisitionError(
                            url,
                            f"HTTP error: {response.status} {response.reason or ''}".rstrip(),
                            status=response.status,
                        )
                    content = await response.read()

        except aiohttp.ClientError as e:
            raise ContentAcquisitionError(url, f"Failed to download file: {e}") from e
        except asyncio.TimeoutError as e:
            raise ContentAcquisitionError(url, "Timed out downloading file") from e

        logger.debug(f"{LOG_INPUT} Downloaded {len(content)} bytes from {url}")
        return content


__all__ = ['ContentLoader', 'is_remote']
