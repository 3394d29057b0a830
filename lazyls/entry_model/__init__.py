"""Domain model for listed filesystem entries.

This package contains non-presentation primitives:
- the ``Entry`` datatype holding one raw metadata snapshot
- metadata queries with owner-name resolution
- kind classification and the type-glyph policy
- entry construction and directory reading
"""

from __future__ import annotations

from .types import Entry
from .kinds import (
    KIND_BLOCK_DEVICE,
    KIND_CHAR_DEVICE,
    KIND_DIRECTORY,
    KIND_GLYPH_RULES,
    KIND_PIPE,
    KIND_REGULAR,
    KIND_SOCKET,
    KIND_SYMLINK,
    classify_kinds,
    kind_glyph,
)
from .metadata import (
    UNRESOLVED_NAME,
    MetadataSnapshot,
    display_name,
    group_name,
    query_metadata,
    user_name,
)
from .fs import build_entry, list_directory_entries

__all__ = [
    "Entry",
    "KIND_DIRECTORY",
    "KIND_SYMLINK",
    "KIND_PIPE",
    "KIND_CHAR_DEVICE",
    "KIND_BLOCK_DEVICE",
    "KIND_SOCKET",
    "KIND_REGULAR",
    "KIND_GLYPH_RULES",
    "classify_kinds",
    "kind_glyph",
    "UNRESOLVED_NAME",
    "MetadataSnapshot",
    "query_metadata",
    "user_name",
    "group_name",
    "display_name",
    "build_entry",
    "list_directory_entries",
]
