from __future__ import annotations

"""
Package Service Facade.

Exposes the conversion engine to front ends: open an archive as a tree,
apply a content edit, export the tree back into archive bytes, and the
file-level helpers built on top of them. Front ends are expected to call
only this module.
"""

import logging
import os
from typing import Any, Dict, Iterable, Optional, Sequence

from ooxmltree.core.analysis.tree_builder import build_tree
from ooxmltree.core.analysis.tree_mutator import replace_content
from ooxmltree.core.archive.packer import pack_tree
from ooxmltree.domain.constants import ACCEPTED_PACKAGE_SUFFIXES, DEFAULT_EXPORT_NAME
from ooxmltree.domain.errors import UnsupportedPackageError
from ooxmltree.domain.tree_models import Tree
from ooxmltree.infra.archive_codec import ArchiveCodec, ArchiveMember, ZipArchiveCodec

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CORE FACADE
# -----------------------------------------------------------------------------

def build_tree_from_archive(data: bytes, codec: Optional[ArchiveCodec] = None) -> Tree:
    """
    Decode archive bytes and build the display tree.

    Raises:
        ArchiveDecodeError: The container could not be decoded.
        TextDecodeError: A text member is not valid UTF-8.
    """
    codec = codec or ZipArchiveCodec()
    return build_tree(codec.decode_archive(data))


def build_tree_from_entries(entries: Iterable[ArchiveMember], reformat: bool = True) -> Tree:
    """Build a tree from members already extracted by other means."""
    return build_tree(entries, reformat=reformat)


def mutate(tree: Tree, path: str, text: str) -> Tree:
    """Replace one member's display content (no-op for unknown paths)."""
    return replace_content(tree, path, text)


def export_archive(tree: Tree, codec: Optional[ArchiveCodec] = None) -> bytes:
    """
    Serialize the tree into archive bytes.

    Raises:
        ArchiveEncodeError: The container could not be written.
    """
    return pack_tree(tree, codec)


def codec_from_config(config: Dict[str, Any]) -> ZipArchiveCodec:
    """Instantiate the ZIP codec described by a validated configuration."""
    return ZipArchiveCodec(
        compression=config.get("compression", "deflated"),
        compress_level=config.get("compress_level"),
    )

# -----------------------------------------------------------------------------
# FILE HELPERS
# -----------------------------------------------------------------------------

def is_supported_package(
        file_name: str,
        accepted: Sequence[str] = ACCEPTED_PACKAGE_SUFFIXES,
) -> bool:
    """Check a file name against the accepted package suffixes."""
    lower = (file_name or "").lower()
    return any(lower.endswith(s.lower()) for s in accepted)


def default_export_name(file_name: Optional[str]) -> str:
    """Name of the exported file, falling back when the source is unnamed."""
    base = os.path.basename(file_name or "")
    return base or DEFAULT_EXPORT_NAME


def open_package(
        file_path: str,
        codec: Optional[ArchiveCodec] = None,
        accepted: Sequence[str] = ACCEPTED_PACKAGE_SUFFIXES,
) -> Tree:
    """
    Read a package file from disk and build its tree.

    Raises:
        UnsupportedPackageError: The suffix is not an accepted package type.
        OSError: The file could not be read.
        ArchiveDecodeError, TextDecodeError: See build_tree_from_archive.
    """
    if not is_supported_package(file_path, accepted):
        raise UnsupportedPackageError(
            f"Unsupported package type: {file_path} (expected {', '.join(accepted)})"
        )

    with open(file_path, "rb") as f:
        data = f.read()

    logger.info(f"Opening package: {file_path} ({len(data):,} bytes)")
    return build_tree_from_archive(data, codec)


def save_package(tree: Tree, file_path: str, codec: Optional[ArchiveCodec] = None) -> str:
    """
    Export a tree and write it to disk.

    The archive is fully encoded before the destination is opened, so an
    encoding failure never truncates an existing file.

    Returns:
        str: Absolute path of the written package.
    """
    data = export_archive(tree, codec)

    out_path = os.path.abspath(file_path)
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(out_path, "wb") as f:
        f.write(data)

    logger.info(f"Package saved to: {out_path}")
    return out_path
