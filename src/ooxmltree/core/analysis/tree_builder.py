from __future__ import annotations

"""
Package Tree Builder.

Constructs the hierarchical representation of an archive from the flat
member list produced by the archive codec. Directories are inferred from
member paths, text members are decoded (and XML-like members formatted for
display) on ingest, and every level is ordered directories-first.
"""

import logging
from typing import Dict, Iterable, List, Tuple, Union

from ooxmltree.core.processing.classifier import is_text, is_xml_like
from ooxmltree.core.processing.xml_normalizer import format_xml
from ooxmltree.domain.errors import ArchiveDecodeError, TextDecodeError
from ooxmltree.domain.tree_models import DirEntry, FileEntry, Tree, TreeNode

logger = logging.getLogger(__name__)

# Mutable stand-in for a directory while its children are still arriving
_DirDraft = Dict[str, Union[str, List[object]]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(entries: Iterable[Tuple[str, bytes]], reformat: bool = True) -> Tree:
    """
    Build an ordered package tree from (path, raw bytes) pairs.

    Args:
        entries: Every non-directory member of a decoded archive.
        reformat: Apply the display formatter to XML-like members. Disabled
            when the bytes are already display form (exploded directories).

    Returns:
        Tree: Root-level nodes, directories first, each group sorted by name.

    Raises:
        TextDecodeError: A text member is not valid UTF-8.
        ArchiveDecodeError: Two members share a path, or a member path is
            also used as a directory.
    """
    ordered = sorted(entries, key=lambda pair: pair[0])

    # Build-scope index; discarded once the final tree is frozen
    dirs: Dict[str, _DirDraft] = {}
    files: Dict[str, FileEntry] = {}
    roots: List[object] = []

    for path, raw in ordered:
        if path in files:
            raise ArchiveDecodeError(f"Duplicate archive member: {path}")

        parts = path.split("/")
        siblings = _ensure_parents(parts[:-1], dirs, files, roots)

        if path in dirs:
            raise ArchiveDecodeError(f"Member path is also a directory: {path}")

        node = FileEntry(name=parts[-1], path=path, content=_decode_content(path, raw, reformat))
        files[path] = node
        siblings.append(node)

    tree = _freeze(roots)
    logger.info(f"Built package tree: {len(files)} files, {len(dirs)} directories")
    return tree

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _decode_content(path: str, raw: bytes, reformat: bool) -> Union[str, bytes]:
    """Decode a member according to its classification."""
    if not is_text(path):
        return bytes(raw)

    try:
        text = bytes(raw).decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Text member '{path}' failed UTF-8 decoding: {e}")
        raise TextDecodeError(path, str(e)) from e

    if reformat and is_xml_like(path):
        return format_xml(text)
    return text


def _ensure_parents(
        dir_parts: List[str],
        dirs: Dict[str, _DirDraft],
        files: Dict[str, FileEntry],
        roots: List[object],
) -> List[object]:
    """
    Create missing ancestor directories and return the children list of the
    immediate parent (the root list for top-level members).
    """
    siblings = roots
    current_path = ""

    for dir_name in dir_parts:
        current_path = f"{current_path}/{dir_name}" if current_path else dir_name

        if current_path in files:
            raise ArchiveDecodeError(f"Member path is also a directory: {current_path}")

        draft = dirs.get(current_path)
        if draft is None:
            draft = {"name": dir_name, "path": current_path, "children": []}
            dirs[current_path] = draft
            siblings.append(draft)

        siblings = draft["children"]  # type: ignore[assignment]

    return siblings


def _freeze(drafts: List[object]) -> Tree:
    """Convert draft directories into DirEntry values and order every level."""
    nodes: List[TreeNode] = []
    for item in drafts:
        if isinstance(item, FileEntry):
            nodes.append(item)
        elif isinstance(item, dict):
            nodes.append(DirEntry(
                name=str(item["name"]),
                path=str(item["path"]),
                children=_freeze(item["children"]),  # type: ignore[arg-type]
            ))
        else:
            raise TypeError(f"Unexpected draft node: {item!r}")
    return tuple(sorted(nodes, key=_sort_key))


def _sort_key(node: TreeNode) -> Tuple[int, str, str]:
    """Directories first, then locale-style name order (lowercase wins ties)."""
    return (0 if isinstance(node, DirEntry) else 1, node.name.casefold(), node.name.swapcase())
