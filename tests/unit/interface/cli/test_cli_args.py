from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies that arguments map to command namespaces and configuration
overrides.
"""

import pytest

from ooxmltree.interface.cli.args import args_to_overrides, build_parser


@pytest.fixture
def parser():
    return build_parser()


def test_tree_command_defaults(parser):
    args = parser.parse_args(["tree", "report.docx"])

    assert args.command == "tree"
    assert args.package == "report.docx"
    assert args.filter_keyword == ""
    assert args.details is False
    assert args_to_overrides(args) == {}


def test_global_flags_map_to_overrides(parser):
    args = parser.parse_args(["--debug", "--compression", "stored", "show", "a.docx", "word/document.xml"])

    assert args.entry == "word/document.xml"
    assert args_to_overrides(args) == {"compression": "stored", "log_level": "DEBUG"}


def test_edit_requires_source(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["edit", "a.docx", "word/document.xml"])

    args = parser.parse_args(["edit", "a.docx", "word/document.xml", "--from", "new.xml", "-o", "b.docx"])
    assert args.source == "new.xml"
    assert args.output == "b.docx"


def test_explode_and_pack_options(parser):
    explode = parser.parse_args(["explode", "a.xlsx", "--overwrite"])
    assert explode.output is None and explode.overwrite is True

    pack = parser.parse_args(["pack", "a.xlsx.d", "--output", "b.xlsx"])
    assert pack.directory == "a.xlsx.d"
    assert pack.output == "b.xlsx"


def test_command_is_required(parser):
    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_invalid_compression_rejected(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["--compression", "bzip2", "tree", "a.docx"])
