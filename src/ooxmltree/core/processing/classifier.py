from __future__ import annotations

"""
Content Classifier.

Maps archive paths to content categories by case-insensitive suffix
matching. Every function is total: a path that matches no table is simply
binary content, never an error.
"""

from enum import Enum
from typing import Optional

from ooxmltree.domain.constants import (
    IMAGE_MIME_TYPES,
    IMAGE_SUFFIXES,
    TEXT_SUFFIXES,
    XML_SUFFIXES,
)

# -----------------------------------------------------------------------------
# CATEGORIES
# -----------------------------------------------------------------------------

class ContentKind(str, Enum):
    """Presentation category of an archive member."""
    XML = "xml"
    TEXT = "text"
    IMAGE = "image"
    BINARY = "binary"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_text(path: str) -> bool:
    """Check whether the member is decoded as UTF-8 text on ingest."""
    return _has_suffix(path, TEXT_SUFFIXES)


def is_xml_like(path: str) -> bool:
    """Check whether the member goes through the format/minify transform."""
    return _has_suffix(path, XML_SUFFIXES)


def is_image(path: str) -> bool:
    return _has_suffix(path, IMAGE_SUFFIXES)


def image_mime_type(path: str) -> Optional[str]:
    """
    Resolve the MIME type of a previewable image.

    Args:
        path: Archive path of the member.

    Returns:
        Optional[str]: Standard MIME type, or None if not a known image.
    """
    lower = (path or "").lower()
    for suffix, mime in IMAGE_MIME_TYPES.items():
        if lower.endswith(suffix):
            return mime
    return None


def classify(path: str) -> ContentKind:
    """
    Resolve the presentation category of a member.

    XML-like takes precedence over plain text since every XML-like suffix
    is also a text suffix.
    """
    if is_xml_like(path):
        return ContentKind.XML
    if is_text(path):
        return ContentKind.TEXT
    if is_image(path):
        return ContentKind.IMAGE
    return ContentKind.BINARY

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _has_suffix(path: str, suffixes: tuple) -> bool:
    return (path or "").lower().endswith(suffixes)
