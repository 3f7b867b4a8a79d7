from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (global flags and one subcommand per
package operation) and translates parsed namespaces into configuration
overrides.
"""

import argparse
from typing import Any, Dict

from ooxmltree.domain.constants import APP_VERSION
from ooxmltree.infra.archive_codec import COMPRESSION_METHODS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the ooxmltree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="ooxmltree",
        description="Inspect, edit and repack OOXML packages (.docx, .xlsx, .pptx) as a file tree.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # --- Global runtime options ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--compression",
        choices=sorted(COMPRESSION_METHODS),
        default=None,
        help="ZIP compression used when writing packages.",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    # --- Inspection ---
    tree_p = sub.add_parser("tree", help="Print the package as a directory tree.")
    tree_p.add_argument("package", help="Path to the package file.")
    tree_p.add_argument("--filter", dest="filter_keyword", default="", help="Keep only members whose path contains KEYWORD.")
    tree_p.add_argument("--details", action="store_true", help="Show content kind and size for each member.")

    show_p = sub.add_parser("show", help="Print one member in display form.")
    show_p.add_argument("package", help="Path to the package file.")
    show_p.add_argument("entry", help="Archive path of the member, e.g. word/document.xml.")

    search_p = sub.add_parser("search", help="Find display lines containing a keyword.")
    search_p.add_argument("package", help="Path to the package file.")
    search_p.add_argument("keyword", help="Case-insensitive search text.")

    # --- Editing ---
    edit_p = sub.add_parser("edit", help="Replace one member's content and write the package.")
    edit_p.add_argument("package", help="Path to the package file.")
    edit_p.add_argument("entry", help="Archive path of the text member to replace.")
    edit_p.add_argument("--from", dest="source", required=True, help="UTF-8 file holding the new display-form content.")
    edit_p.add_argument("-o", "--output", default=None, help="Destination package (defaults to overwriting the input).")

    # --- Disk round trip ---
    explode_p = sub.add_parser("explode", help="Write the package tree to a directory.")
    explode_p.add_argument("package", help="Path to the package file.")
    explode_p.add_argument("-o", "--output", default=None, help="Target directory (defaults to PACKAGE.d).")
    explode_p.add_argument("--overwrite", action="store_true", help="Replace the contents of a non-empty target directory.")

    pack_p = sub.add_parser("pack", help="Build a package from an exploded directory.")
    pack_p.add_argument("directory", help="Exploded package directory.")
    pack_p.add_argument("-o", "--output", default=None, help="Destination package (defaults to the name before .d).")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.compression:
        overrides["compression"] = args.compression
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
