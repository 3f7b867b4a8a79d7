from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and overrides, dispatch to the package operation and result rendering.
Domain failures are reported on stderr and mapped to exit codes instead of
tracebacks.
"""

import argparse
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from ooxmltree.core.analysis.tree_mutator import find_node
from ooxmltree.core.analysis.tree_renderer import describe_entry, render_tree_structure
from ooxmltree.core.analysis.tree_search import filter_tree, search_content
from ooxmltree.core.services.package import (
    build_tree_from_entries,
    codec_from_config,
    mutate,
    open_package,
    save_package,
)
from ooxmltree.core.services.validator import validate_config
from ooxmltree.domain.config import get_default_config, load_config
from ooxmltree.domain.errors import OoxmlTreeError, UnsupportedPackageError
from ooxmltree.domain.tree_models import DirEntry, FileEntry, Tree
from ooxmltree.infra.fs import (
    default_explode_dir,
    default_pack_path,
    read_directory_entries,
    write_tree_to_directory,
)
from ooxmltree.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from ooxmltree.interface.cli import args as cli_args

logger = get_logger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration hierarchy (defaults < saved file < CLI flags)
    base_conf = get_default_config() if args.use_defaults else load_config()
    base_conf.update(cli_args.args_to_overrides(args))
    config, warnings = validate_config(base_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    log_file = get_default_log_path() if config["save_error_log"] else None
    configure_logging(LoggingConfig.from_app_config(config, log_file=log_file))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Command dispatch
    handler = _COMMANDS[args.command]
    logger.debug(f"Running command '{args.command}'")
    try:
        return handler(args, config)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except UnsupportedPackageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except (OoxmlTreeError, OSError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def cmd_tree(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    tree = _open(args.package, config)
    tree = filter_tree(tree, args.filter_keyword)

    lines: List[str] = []
    render_tree_structure(tree, lines, show_details=args.details)

    print(os.path.basename(args.package))
    for line in lines:
        print(line)
    return EXIT_OK


def cmd_show(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    tree = _open(args.package, config)
    node = find_node(tree, args.entry)

    if node is None:
        print(f"ERROR: No member '{args.entry}' in {args.package}", file=sys.stderr)
        return EXIT_FAILURE

    if isinstance(node, DirEntry):
        print(f"{node.path}/  ({len(node.children)} items)")
        return EXIT_OK

    if isinstance(node.content, str):
        print(node.content)
    else:
        print(f"{node.path}: {describe_entry(node)} (binary content not shown)")
    return EXIT_OK


def cmd_search(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    tree = _open(args.package, config)
    hits = search_content(tree, args.keyword)

    if not hits:
        print("No matches found.")
        return EXIT_OK

    for hit in hits:
        print(f"{hit.path}:{hit.line_number}: {hit.line}")
    return EXIT_OK


def cmd_edit(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    tree = _open(args.package, config)
    node = find_node(tree, args.entry)

    if not isinstance(node, FileEntry) or not isinstance(node.content, str):
        print(f"ERROR: '{args.entry}' is not a text member of {args.package}", file=sys.stderr)
        return EXIT_FAILURE

    with open(args.source, "r", encoding="utf-8", newline="") as f:
        new_text = f.read()

    updated = mutate(tree, args.entry, new_text)
    out_path = save_package(updated, args.output or args.package, codec_from_config(config))
    print(f"Saved: {out_path}")
    return EXIT_OK


def cmd_explode(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    tree = _open(args.package, config)
    out_dir = args.output or default_explode_dir(args.package)

    if os.path.isdir(out_dir) and os.listdir(out_dir) and not args.overwrite:
        print(f"ERROR: Directory is not empty: {out_dir} (use --overwrite)", file=sys.stderr)
        return EXIT_FAILURE

    written = write_tree_to_directory(tree, out_dir, clean=args.overwrite)
    print(f"Exploded: {args.package}")
    print(f"      To: {os.path.abspath(out_dir)}")
    print(f"   Files: {written}")
    return EXIT_OK


def cmd_pack(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    entries = read_directory_entries(args.directory)
    tree = build_tree_from_entries(entries, reformat=False)

    out_path = save_package(tree, args.output or default_pack_path(args.directory), codec_from_config(config))
    print(f"Packed: {os.path.abspath(args.directory)}")
    print(f"    To: {out_path}")
    print(f" Files: {len(entries)}")
    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _open(package: str, config: Dict[str, Any]) -> Tree:
    return open_package(package, codec_from_config(config), accepted=config["accepted_suffixes"])


_COMMANDS: Dict[str, Callable[[argparse.Namespace, Dict[str, Any]], int]] = {
    "tree": cmd_tree,
    "show": cmd_show,
    "search": cmd_search,
    "edit": cmd_edit,
    "explode": cmd_explode,
    "pack": cmd_pack,
}

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
