from __future__ import annotations

"""
Package Tree Search.

Keyword lookups over a package tree: narrowing the tree to matching
member paths, and scanning display-form text for matching lines.
"""

from dataclasses import dataclass
from typing import List

from ooxmltree.domain.tree_models import DirEntry, FileEntry, Tree, TreeNode


@dataclass(frozen=True)
class SearchHit:
    """
    A single matching display line.

    Attributes:
        path: Archive path of the member.
        line_number: 1-based line index in the display form.
        line: The matching line, without indentation.
    """
    path: str
    line_number: int
    line: str


def filter_tree(tree: Tree, keyword: str) -> Tree:
    """
    Keep files whose path contains 'keyword' (case-insensitive) and the
    directories leading to them. An empty keyword keeps everything.
    """
    if not keyword:
        return tree

    needle = keyword.lower()
    kept: List[TreeNode] = []
    for node in tree:
        if isinstance(node, DirEntry):
            children = filter_tree(node.children, keyword)
            if children:
                kept.append(DirEntry(name=node.name, path=node.path, children=children))
        elif isinstance(node, FileEntry):
            if needle in node.path.lower():
                kept.append(node)
        else:
            raise TypeError(f"Unexpected tree node: {node!r}")
    return tuple(kept)


def search_content(tree: Tree, keyword: str) -> List[SearchHit]:
    """
    Find display lines containing 'keyword' (case-insensitive) across all
    text members. Binary members are skipped.
    """
    if not keyword:
        return []

    needle = keyword.lower()
    hits: List[SearchHit] = []
    for node in tree:
        if isinstance(node, DirEntry):
            hits.extend(search_content(node.children, keyword))
        elif isinstance(node, FileEntry):
            if not isinstance(node.content, str):
                continue
            for number, line in enumerate(node.content.splitlines(), start=1):
                if needle in line.lower():
                    hits.append(SearchHit(path=node.path, line_number=number, line=line.strip()))
        else:
            raise TypeError(f"Unexpected tree node: {node!r}")
    return hits
