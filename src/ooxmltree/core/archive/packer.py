from __future__ import annotations

"""
Archive Packer.

Inverse of the tree builder: walks a package tree in stored order and
hands the members to the archive codec. XML-like text is minified back to
its compact form, other text is UTF-8 encoded as-is, and raw bytes are
written untouched. Directories are implied by member paths and are never
written as records.
"""

import logging
from typing import List, Optional, Tuple

from ooxmltree.core.processing.classifier import is_xml_like
from ooxmltree.core.processing.xml_normalizer import minify_xml
from ooxmltree.domain.tree_models import DirEntry, FileEntry, Tree
from ooxmltree.infra.archive_codec import ArchiveCodec, ZipArchiveCodec

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def pack_tree(tree: Tree, codec: Optional[ArchiveCodec] = None) -> bytes:
    """
    Serialize a package tree into archive bytes.

    Args:
        tree: Root-level nodes. Never modified.
        codec: Container encoder; a deflating ZIP codec when omitted.

    Returns:
        bytes: The encoded archive.

    Raises:
        ArchiveEncodeError: The codec failed to serialize the members.
    """
    codec = codec or ZipArchiveCodec()
    entries = collect_entries(tree)

    data = codec.encode_archive(entries)
    logger.info(f"Packed {len(entries)} members into {len(data):,} bytes")
    return data


def collect_entries(tree: Tree) -> List[Tuple[str, bytes]]:
    """
    Flatten a tree into the (path, bytes) members handed to the codec.
    """
    entries: List[Tuple[str, bytes]] = []
    _collect(tree, entries)
    return entries

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _collect(nodes: Tree, entries: List[Tuple[str, bytes]]) -> None:
    for node in nodes:
        if isinstance(node, DirEntry):
            _collect(node.children, entries)
        elif isinstance(node, FileEntry):
            entries.append((node.path, _encode_content(node)))
        else:
            raise TypeError(f"Unexpected tree node: {node!r}")


def _encode_content(node: FileEntry) -> bytes:
    content = node.content
    if isinstance(content, str):
        if is_xml_like(node.path):
            content = minify_xml(content)
        return content.encode("utf-8")
    return bytes(content)
