"""Domain datatype for one listed filesystem entry."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .kinds import KIND_DIRECTORY, kind_glyph


@dataclass(frozen=True)
class Entry:
    """Filesystem entry plus the metadata snapshot taken when it was built.

    Values are raw (bytes, mode bits, nanosecond timestamps). Display strings
    are produced by ``lazyls.render`` once ordering is final.
    """

    path: Path
    name: str
    kinds: tuple[str, ...]
    owner_user: str
    owner_group: str
    uid: int
    gid: int
    size: int
    mode: int
    modified_ns: int
    accessed_ns: int
    created_ns: int

    @property
    def is_dir(self) -> bool:
        return KIND_DIRECTORY in self.kinds

    @property
    def type_glyph(self) -> str:
        return kind_glyph(self.kinds)


__all__ = ["Entry"]
