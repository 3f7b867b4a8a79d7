from __future__ import annotations

"""
XML Normalization Utility.

Provides the reversible pair of text transforms applied to XML-like
package members: 'format_xml' breaks compact markup onto indented lines
for human editing, and 'minify_xml' collapses the inter-tag whitespace
again before the member is written back into the archive. Text nodes and
attribute values are never rewritten by either direction.
"""

import logging
import re
from typing import Final, Iterator

from ooxmltree.domain.constants import INDENT_UNIT

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# NORMALIZATION PATTERNS
# -----------------------------------------------------------------------------

# Zero-width split point at every tag boundary, swallowing the whitespace run
_TAG_BOUNDARY_PATTERN: Final[re.Pattern] = re.compile(r"(?<=>)\s*(?=<)")
_INTER_TAG_WHITESPACE_PATTERN: Final[re.Pattern] = re.compile(r">\s+<")
# An opening tag closed again on the same segment, e.g. <w:t>Hi</w:t>
_INLINE_ELEMENT_PATTERN: Final[re.Pattern] = re.compile(r"<[^/][^>]*>[^<]*</[^>]+>")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_xml(xml: str) -> str:
    """
    Convert archive-compact XML into the indented display form.

    Args:
        xml: Raw member text as stored in the archive.

    Returns:
        str: One tag per line, two-space indentation, no trailing newline.
    """
    if not xml:
        return ""

    result = "\n".join(format_xml_lines(xml))
    logger.debug(f"Formatted XML: {len(xml)} -> {len(result)} chars")
    return result


def format_xml_lines(xml: str) -> Iterator[str]:
    """
    Yield the indented display lines of an XML string.

    A single depth counter drives indentation: closing tags dedent before
    they are emitted, opening tags indent everything after them. Prolog
    lines (<?...?>, <!...>), self-closing tags and elements opened and
    closed on the same segment leave the depth untouched.

    Args:
        xml: Raw member text.

    Yields:
        str: Indented display lines.
    """
    depth = 0

    for segment in _TAG_BOUNDARY_PATTERN.split(xml):
        line = segment.strip()
        if not line:
            continue

        if line.startswith("</"):
            depth = max(0, depth - 1)

        yield INDENT_UNIT * depth + line

        if _is_opening_tag(line):
            depth += 1


def minify_xml(xml: str) -> str:
    """
    Convert display-form XML back into the archive-compact form.

    Only whitespace runs sitting strictly between a '>' and the next '<'
    are removed.

    Args:
        xml: Display-form text, possibly edited by the user.

    Returns:
        str: Compact markup ready to be encoded into the archive.
    """
    if not xml:
        return ""

    result = _INTER_TAG_WHITESPACE_PATTERN.sub("><", xml)

    original_len = len(xml)
    reduction = 100 - (len(result) * 100 / original_len)
    logger.debug(f"Minified XML: {original_len} -> {len(result)} chars ({reduction:.1f}% reduction)")

    return result

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_opening_tag(line: str) -> bool:
    """Decide whether a trimmed display line opens a new nesting level."""
    if not line.startswith("<") or line.startswith("</"):
        return False
    if line.endswith("/>"):
        return False
    if line.startswith("<?") or line.startswith("<!"):
        return False
    return _INLINE_ELEMENT_PATTERN.search(line) is None
