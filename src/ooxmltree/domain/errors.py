from __future__ import annotations

"""
Domain Exceptions.

Every failure surfaced by the conversion engine derives from
OoxmlTreeError so callers can trap the whole family at once, while each
concrete class stays distinct and inspectable.
"""

from typing import Optional


class OoxmlTreeError(Exception):
    """Base class for all package conversion failures."""


class ArchiveDecodeError(OoxmlTreeError):
    """The container is corrupt, not a ZIP, or uses an unsupported feature."""


class ArchiveEncodeError(OoxmlTreeError):
    """Serializing the tree into an archive failed. The tree is unaffected."""


class TextDecodeError(OoxmlTreeError):
    """
    A text-classified entry is not valid UTF-8.

    Attributes:
        path: Archive path of the offending entry.
    """

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        msg = f"Entry '{path}' is not valid UTF-8 text"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class UnsupportedPackageError(OoxmlTreeError):
    """The file name does not carry one of the accepted package suffixes."""
