from __future__ import annotations

"""
Package Tree Mutation and Lookup.

Editing never touches an existing node: replacing a member's content
rebuilds only the directories on the route to that member and shares
every other subtree with the previous tree.
"""

import logging
from dataclasses import replace
from typing import Iterator, Optional, Tuple

from ooxmltree.domain.tree_models import DirEntry, FileEntry, Tree, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def replace_content(tree: Tree, path: str, new_text: str) -> Tree:
    """
    Return a tree in which the file at 'path' holds 'new_text'.

    The text is stored verbatim (it is already display form). When no file
    matches, the input tree object itself is returned.

    Args:
        tree: Current root-level nodes.
        path: Archive path of the edited member.
        new_text: Replacement content.

    Returns:
        Tree: The updated tree, or 'tree' unchanged when nothing matched.
    """
    updated, changed = _replace_in(tree, path, new_text)
    if not changed:
        logger.debug(f"No file at '{path}'; tree left unchanged")
        return tree
    return updated


def find_node(tree: Optional[Tree], path: Optional[str]) -> Optional[TreeNode]:
    """Locate a file or directory by its full path."""
    if not tree or not path:
        return None

    for node in tree:
        if node.path == path:
            return node
        if isinstance(node, DirEntry):
            if path.startswith(node.path + "/"):
                return find_node(node.children, path)
        elif not isinstance(node, FileEntry):
            raise TypeError(f"Unexpected tree node: {node!r}")
    return None


def iter_files(tree: Tree) -> Iterator[FileEntry]:
    """Yield every file depth-first, in stored order."""
    for node in tree:
        if isinstance(node, FileEntry):
            yield node
        elif isinstance(node, DirEntry):
            yield from iter_files(node.children)
        else:
            raise TypeError(f"Unexpected tree node: {node!r}")

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _replace_in(nodes: Tree, path: str, new_text: str) -> Tuple[Tree, bool]:
    for index, node in enumerate(nodes):
        if isinstance(node, FileEntry):
            if node.path != path:
                continue
            updated: TreeNode = replace(node, content=new_text)
        elif isinstance(node, DirEntry):
            if not path.startswith(node.path + "/"):
                continue
            children, changed = _replace_in(node.children, path, new_text)
            if not changed:
                return nodes, False
            updated = replace(node, children=children)
        else:
            raise TypeError(f"Unexpected tree node: {node!r}")

        return nodes[:index] + (updated,) + nodes[index + 1:], True

    return nodes, False
