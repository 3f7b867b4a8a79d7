from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures describing a small Word package, both as a flat member
   list and as real ZIP bytes.
"""

import io
import os
import sys
import zipfile
from typing import Callable, List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

# -----------------------------------------------------------------------------
# Sample Package Content
# -----------------------------------------------------------------------------
CONTENT_TYPES_XML = (
    b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    b'<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    b'<Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
    b'<Default Extension="png" ContentType="image/png"/>'
    b'<Override PartName="/word/document.xml" '
    b'ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    b'</Types>'
)

ROOT_RELS = (
    b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    b'<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    b'<Relationship Id="rId1" '
    b'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument" '
    b'Target="word/document.xml"/>'
    b'</Relationships>'
)

DOCUMENT_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    '<w:body><w:p><w:r><w:t xml:space="preserve">Hello wörld</w:t></w:r></w:p>'
    '<w:p><w:r><w:t>Second paragraph</w:t></w:r></w:p><w:sectPr/></w:body></w:document>'
).encode("utf-8")

DOCUMENT_RELS = (
    b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    b'<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    b'<Relationship Id="rId5" '
    b'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/image" '
    b'Target="media/image1.png"/>'
    b'</Relationships>'
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256))

NOTES_TXT = "first line\n  indented second line\n".encode("utf-8")

VBA_BYTES = b"\x00\x01\x02binary\xff\xfe"


@pytest.fixture
def docx_members() -> List[Tuple[str, bytes]]:
    """
    Return the members of a minimal Word package in archive order.

    Structure:
      [Content_Types].xml
      _rels/.rels
      customXml/notes.txt
      word/document.xml
      word/_rels/document.xml.rels
      word/media/image1.png
      word/vbaProject.bin
    """
    return [
        ("[Content_Types].xml", CONTENT_TYPES_XML),
        ("_rels/.rels", ROOT_RELS),
        ("word/document.xml", DOCUMENT_XML),
        ("word/_rels/document.xml.rels", DOCUMENT_RELS),
        ("word/media/image1.png", PNG_BYTES),
        ("word/vbaProject.bin", VBA_BYTES),
        ("customXml/notes.txt", NOTES_TXT),
    ]


@pytest.fixture
def make_zip() -> Callable[..., bytes]:
    """
    Return a helper that encodes (path, bytes) pairs into ZIP bytes.

    Paths ending with '/' are written as explicit directory records.
    """
    def _make(members: List[Tuple[str, bytes]], compression: int = zipfile.ZIP_DEFLATED) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=compression) as zf:
            for name, data in members:
                zf.writestr(name, data)
        return buffer.getvalue()

    return _make


@pytest.fixture
def docx_bytes(docx_members, make_zip) -> bytes:
    """Real ZIP bytes of the sample Word package."""
    return make_zip(docx_members)


@pytest.fixture
def docx_file(tmp_path, docx_bytes) -> str:
    """The sample Word package written to disk as 'report.docx'."""
    path = tmp_path / "report.docx"
    path.write_bytes(docx_bytes)
    return str(path)
