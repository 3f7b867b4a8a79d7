from __future__ import annotations

"""
Tree Renderer.

Converts package trees into visual ASCII representations. Handles the
connector indentation and optional per-member content annotations.
"""

from typing import List

from ooxmltree.core.processing.classifier import ContentKind, classify, image_mime_type
from ooxmltree.domain.tree_models import DirEntry, FileEntry, Tree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(
        tree: Tree,
        lines: List[str],
        prefix: str = "",
        show_details: bool = False,
) -> None:
    """
    Recursively transform a package tree into a list of strings.

    Uses standard ASCII connectors (├──, └──) and keeps the stored order
    of every level.

    Args:
        tree: Current level to process.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        show_details: Append content kind and size to file entries.
    """
    total = len(tree)

    for i, node in enumerate(tree):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        # Scenario A: Directory
        if isinstance(node, DirEntry):
            lines.append(f"{prefix}{connector}{node.name}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(node.children, lines, prefix=new_prefix, show_details=show_details)
            continue

        # Scenario B: File
        if isinstance(node, FileEntry):
            label = node.name
            if show_details:
                label = f"{label}  [{describe_entry(node)}]"
            lines.append(f"{prefix}{connector}{label}")
            continue

        raise TypeError(f"Unexpected tree node: {node!r}")


def describe_entry(node: FileEntry) -> str:
    """One-line summary of a member's content kind and size."""
    kind = classify(node.path)
    if kind is ContentKind.IMAGE:
        return f"{image_mime_type(node.path)}, {node.size:,} bytes"
    if isinstance(node.content, str):
        return f"{kind.value}, {node.content.count(chr(10)) + 1:,} lines"
    return f"{kind.value}, {node.size:,} bytes"
