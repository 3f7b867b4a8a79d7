from __future__ import annotations

"""
Archive Codec Infrastructure.

Defines the boundary between the conversion engine and the raw container
format. The engine only ever sees flat (path, bytes) member lists; the
codec owns compression, directory records and container errors. The
default implementation is backed by the standard 'zipfile' module.
"""

import io
import logging
import zipfile
import zlib
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

from ooxmltree.domain.errors import ArchiveDecodeError, ArchiveEncodeError

logger = logging.getLogger(__name__)

ArchiveMember = Tuple[str, bytes]

# Mapping of config identifiers to zipfile compression constants
COMPRESSION_METHODS = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
}

# -----------------------------------------------------------------------------
# CODEC INTERFACE
# -----------------------------------------------------------------------------

class ArchiveCodec(ABC):
    """
    Abstract raw container encoder/decoder.
    """

    @abstractmethod
    def decode_archive(self, data: bytes) -> List[ArchiveMember]:
        """
        Decode a container into its non-directory members.

        Args:
            data: Complete archive bytes.

        Returns:
            List[ArchiveMember]: (path, raw bytes) pairs.

        Raises:
            ArchiveDecodeError: The container is corrupt or unsupported.
        """

    @abstractmethod
    def encode_archive(self, entries: Iterable[ArchiveMember]) -> bytes:
        """
        Encode members into a container.

        Args:
            entries: (path, bytes) pairs, written in iteration order.

        Returns:
            bytes: Complete archive bytes.

        Raises:
            ArchiveEncodeError: Serialization failed.
        """

# -----------------------------------------------------------------------------
# ZIP IMPLEMENTATION
# -----------------------------------------------------------------------------

class ZipArchiveCodec(ArchiveCodec):
    """
    ZIP codec over an in-memory buffer.

    Attributes:
        compression: Key of COMPRESSION_METHODS used when encoding.
        compress_level: Optional zlib level (0-9) for deflated output.
    """

    def __init__(self, compression: str = "deflated", compress_level: Optional[int] = None) -> None:
        if compression not in COMPRESSION_METHODS:
            raise ValueError(f"Unknown compression method: {compression}")
        self.compression = compression
        self.compress_level = compress_level

    def decode_archive(self, data: bytes) -> List[ArchiveMember]:
        members: List[ArchiveMember] = []
        try:
            with zipfile.ZipFile(io.BytesIO(data), "r") as zf:
                for info in zf.infolist():
                    if info.is_dir():
                        continue
                    members.append((info.filename, zf.read(info)))
        except (zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error, EOFError) as e:
            logger.error(f"Corrupt archive: {e}")
            raise ArchiveDecodeError(f"Corrupt archive: {e}") from e
        except (NotImplementedError, RuntimeError) as e:
            # Unsupported compression methods and encrypted members
            logger.error(f"Unsupported archive feature: {e}")
            raise ArchiveDecodeError(f"Unsupported archive feature: {e}") from e

        logger.debug(f"Decoded {len(members)} archive members")
        return members

    def encode_archive(self, entries: Iterable[ArchiveMember]) -> bytes:
        buffer = io.BytesIO()
        count = 0
        try:
            with zipfile.ZipFile(
                    buffer,
                    "w",
                    compression=COMPRESSION_METHODS[self.compression],
                    compresslevel=self.compress_level,
            ) as zf:
                for path, content in entries:
                    zf.writestr(path, content)
                    count += 1
        except (OSError, ValueError, MemoryError, zipfile.LargeZipFile, zlib.error) as e:
            logger.error(f"Archive serialization failed: {e}")
            raise ArchiveEncodeError(f"Archive serialization failed: {e}") from e

        logger.debug(f"Encoded {count} archive members ({self.compression})")
        return buffer.getvalue()
