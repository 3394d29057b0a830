"""Fatal listing errors.

Every condition that stops a listing derives from ``ListingError`` so the CLI
can report it as one line of text. Unresolvable user/group IDs are not errors;
they are recovered where names are looked up.
"""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for conditions that abort a listing."""


class PathNotFoundError(ListingError):
    """The requested target path does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"cannot access '{path}': No such file or directory")


class MetadataQueryError(ListingError):
    """An OS metadata query failed for one entry."""

    def __init__(self, path: Path, reason: OSError) -> None:
        self.path = path
        self.reason = reason
        detail = reason.strerror or str(reason)
        super().__init__(f"cannot read metadata for '{path}': {detail}")


class MalformedNameError(ListingError):
    """A path component cannot be converted to displayable text."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"cannot display name of {str(path)!r}: not valid UTF-8")


__all__ = [
    "ListingError",
    "PathNotFoundError",
    "MetadataQueryError",
    "MalformedNameError",
]
