from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides user data directory resolution and the on-disk representation of
a package tree: exploding a tree into a directory hierarchy for external
editing, and collecting such a hierarchy back into archive members.
"""

import logging
import os
import shutil
from typing import List, Optional, Tuple

from ooxmltree.domain.constants import EXPLODED_DIR_SUFFIX
from ooxmltree.domain.tree_models import DirEntry, FileEntry, Tree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "OoxmlTree"
UNIX_APP_DIR_NAME = ".ooxmltree"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/OoxmlTree
    - Linux/Mac: ~/.ooxmltree

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion and user home shortcuts (~/).
    Reverts to fallback if the input is empty.
    """
    p = (path or "").strip() or fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def default_explode_dir(package_path: str) -> str:
    """Directory created beside a package when exploding it (report.docx.d)."""
    return os.path.abspath(package_path) + EXPLODED_DIR_SUFFIX


def default_pack_path(directory: str) -> str:
    """Package file produced from an exploded directory."""
    directory = os.path.abspath(directory).rstrip(os.sep)
    if directory.endswith(EXPLODED_DIR_SUFFIX):
        return directory[:-len(EXPLODED_DIR_SUFFIX)]
    return directory + ".zip"

# -----------------------------------------------------------------------------
# TREE MATERIALIZATION API
# -----------------------------------------------------------------------------

def write_tree_to_directory(tree: Tree, directory: str, clean: bool = False) -> int:
    """
    Write every member of a tree below 'directory'.

    Text members are written as UTF-8 display form, binary members as-is.

    Args:
        tree: Root-level nodes.
        directory: Target root; created if missing.
        clean: Remove the existing contents of 'directory' first.

    Returns:
        int: Number of files written.

    Raises:
        ValueError: A member path would escape the target directory.
        OSError: Filesystem write failure.
    """
    root = os.path.abspath(directory)
    if clean and os.path.isdir(root):
        logger.info(f"Cleaning {root}")
        shutil.rmtree(root)
    os.makedirs(root, exist_ok=True)
    written = _write_nodes(tree, root)
    logger.info(f"Exploded {written} members into {root}")
    return written


def read_directory_entries(directory: str) -> List[Tuple[str, bytes]]:
    """
    Collect every file below 'directory' as (posix relative path, bytes).

    Raises:
        NotADirectoryError: 'directory' is not a directory.
    """
    root = os.path.abspath(directory)
    if not os.path.isdir(root):
        raise NotADirectoryError(f"Not a directory: {root}")

    entries: List[Tuple[str, bytes]] = []
    for current, dirs, files in os.walk(root):
        dirs.sort()
        for file_name in sorted(files):
            full_path = os.path.join(current, file_name)
            rel = os.path.relpath(full_path, root).replace(os.sep, "/")
            with open(full_path, "rb") as f:
                entries.append((rel, f.read()))

    logger.debug(f"Collected {len(entries)} files from {root}")
    return entries

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _write_nodes(nodes: Tree, root: str) -> int:
    written = 0
    for node in nodes:
        if isinstance(node, DirEntry):
            written += _write_nodes(node.children, root)
        elif isinstance(node, FileEntry):
            target = _safe_join(root, node.path)
            os.makedirs(os.path.dirname(target), exist_ok=True)
            content = node.content
            data = content.encode("utf-8") if isinstance(content, str) else content
            with open(target, "wb") as f:
                f.write(data)
            written += 1
        else:
            raise TypeError(f"Unexpected tree node: {node!r}")
    return written


def _safe_join(root: str, member_path: str) -> str:
    """Resolve a member path below root, rejecting traversal."""
    target = os.path.abspath(os.path.join(root, *member_path.split("/")))
    if os.path.commonpath([root, target]) != root or target == root:
        raise ValueError(f"Unsafe member path: {member_path}")
    return target
