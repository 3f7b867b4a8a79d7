from __future__ import annotations

"""
Package Tree Data Models.

Provides the recursive node types used to represent an opened archive as
a hierarchy. Nodes are frozen and children are held in tuples, so a tree
is a plain value: editing produces a new tree that shares every untouched
subtree with the old one.
"""

from dataclasses import dataclass
from typing import Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileEntry:
    """
    Represents a leaf entry (archive member) in the package tree.

    Attributes:
        name: Final path segment.
        path: Full slash-joined archive path.
        content: Display-form text for text entries, raw bytes otherwise.
    """
    name: str
    path: str
    content: Union[str, bytes]

    kind = "file"

    @property
    def is_text(self) -> bool:
        return isinstance(self.content, str)

    @property
    def size(self) -> int:
        """Size of the held content (characters for text, bytes otherwise)."""
        return len(self.content)


@dataclass(frozen=True)
class DirEntry:
    """
    Represents a directory inferred from member paths.

    Attributes:
        name: Final path segment.
        path: Full slash-joined directory path.
        children: Ordered child nodes (directories first, then files).
    """
    name: str
    path: str
    children: Tuple["TreeNode", ...] = ()

    kind = "dir"


TreeNode = Union[FileEntry, DirEntry]

Tree = Tuple[TreeNode, ...]
