# Path: xml_validator/loaders/__init__.py
"""
Document acquisition (local files and http(s) URLs).
"""

from .content_loader import ContentLoader, is_remote

__all__ = ['ContentLoader', 'is_remote']
