from __future__ import annotations

"""
Integration tests for the ZIP Archive Codec.

Exercises the real 'zipfile' backend: directory records, compression
methods and the translation of container failures into domain errors.
"""

import io
import zipfile
from unittest.mock import patch

import pytest

from ooxmltree.domain.errors import ArchiveDecodeError, ArchiveEncodeError
from ooxmltree.infra.archive_codec import ZipArchiveCodec


def test_decode_returns_members_in_archive_order(docx_bytes, docx_members):
    assert ZipArchiveCodec().decode_archive(docx_bytes) == docx_members


def test_decode_skips_directory_records():
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        zf.writestr(zipfile.ZipInfo("word/"), b"")
        zf.writestr("word/document.xml", b"<w:document/>")

    members = ZipArchiveCodec().decode_archive(buffer.getvalue())
    assert members == [("word/document.xml", b"<w:document/>")]


@pytest.mark.parametrize("data", [b"", b"not a zip at all", b"PK\x03\x04truncated"])
def test_decode_corrupt_bytes_raise(data):
    with pytest.raises(ArchiveDecodeError):
        ZipArchiveCodec().decode_archive(data)


def test_decode_unsupported_compression_raises(make_zip):
    data = bytearray(make_zip([("a.txt", b"hello")], compression=zipfile.ZIP_STORED))

    # Rewrite the compression method in both the local and central headers
    data[8:10] = (99).to_bytes(2, "little")
    central = data.index(b"PK\x01\x02")
    data[central + 10:central + 12] = (99).to_bytes(2, "little")

    with pytest.raises(ArchiveDecodeError, match="Unsupported"):
        ZipArchiveCodec().decode_archive(bytes(data))


def test_encode_deflated_round_trip(docx_members):
    codec = ZipArchiveCodec()
    data = codec.encode_archive(docx_members)

    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert [i.compress_type for i in zf.infolist()] == [zipfile.ZIP_DEFLATED] * len(docx_members)
    assert codec.decode_archive(data) == docx_members


def test_encode_stored(docx_members):
    data = ZipArchiveCodec(compression="stored").encode_archive(docx_members)

    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert {i.compress_type for i in zf.infolist()} == {zipfile.ZIP_STORED}
        assert zf.namelist() == [p for p, _ in docx_members]


def test_encode_with_level(docx_members):
    data = ZipArchiveCodec(compress_level=9).encode_archive(docx_members)
    assert ZipArchiveCodec().decode_archive(data) == docx_members


def test_encode_failure_is_wrapped(docx_members):
    with patch("zipfile.ZipFile.writestr", side_effect=OSError("disk full")):
        with pytest.raises(ArchiveEncodeError, match="disk full"):
            ZipArchiveCodec().encode_archive(docx_members)


def test_unknown_compression_rejected():
    with pytest.raises(ValueError, match="bzip2"):
        ZipArchiveCodec(compression="bzip2")
