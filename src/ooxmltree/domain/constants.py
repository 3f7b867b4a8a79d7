from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the suffix tables that drive content
classification, the MIME mapping for previewable media, and the package
types accepted by the front end.
"""

from typing import Dict, Tuple

APP_VERSION = "0.1.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# Fallback name used when an exported package has no source file name
DEFAULT_EXPORT_NAME = "document.zip"

# Suffix appended to the package file name when exploding to disk
EXPLODED_DIR_SUFFIX = ".d"

# -----------------------------------------------------------------------------
# CLASSIFICATION TABLES
# -----------------------------------------------------------------------------

TEXT_SUFFIXES: Tuple[str, ...] = (".xml", ".rels", ".txt", ".json")

XML_SUFFIXES: Tuple[str, ...] = (".xml", ".rels")

IMAGE_MIME_TYPES: Dict[str, str] = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
}

IMAGE_SUFFIXES: Tuple[str, ...] = tuple(IMAGE_MIME_TYPES)

# -----------------------------------------------------------------------------
# PACKAGE TYPES
# -----------------------------------------------------------------------------

ACCEPTED_PACKAGE_SUFFIXES: Tuple[str, ...] = (".docx", ".xlsx", ".pptx", ".zip")

# Display-form indentation unit
INDENT_UNIT = "  "
