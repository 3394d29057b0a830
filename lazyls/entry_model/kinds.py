"""Entry-kind classification and type-glyph policy.

Kind predicates are independent boolean tests over link-aware metadata, so an
entry may carry several tags. The glyph shown in permission strings is chosen
by ``KIND_GLYPH_RULES``: the first rule whose kind is present wins.
"""

from __future__ import annotations

import stat
from collections.abc import Callable

KIND_DIRECTORY = "directory"
KIND_SYMLINK = "symlink"
KIND_PIPE = "pipe"
KIND_CHAR_DEVICE = "char_device"
KIND_BLOCK_DEVICE = "block_device"
KIND_SOCKET = "socket"
KIND_REGULAR = "regular"

# Tags are recorded in this order.
KIND_PREDICATES: tuple[tuple[str, Callable[[int], bool]], ...] = (
    (KIND_DIRECTORY, stat.S_ISDIR),
    (KIND_SYMLINK, stat.S_ISLNK),
    (KIND_PIPE, stat.S_ISFIFO),
    (KIND_CHAR_DEVICE, stat.S_ISCHR),
    (KIND_BLOCK_DEVICE, stat.S_ISBLK),
    (KIND_SOCKET, stat.S_ISSOCK),
)

# Glyph policy, evaluated top to bottom. Pipes render as plain files.
KIND_GLYPH_RULES: tuple[tuple[str, str], ...] = (
    (KIND_DIRECTORY, "d"),
    (KIND_SYMLINK, "l"),
    (KIND_PIPE, "-"),
    (KIND_CHAR_DEVICE, "c"),
    (KIND_BLOCK_DEVICE, "b"),
    (KIND_SOCKET, "s"),
    (KIND_REGULAR, "-"),
)

DEFAULT_GLYPH = "-"


def classify_kinds(mode: int) -> tuple[str, ...]:
    """Return every kind tag matching ``mode``, falling back to ``regular``."""
    kinds = tuple(kind for kind, predicate in KIND_PREDICATES if predicate(mode))
    return kinds or (KIND_REGULAR,)


def kind_glyph(kinds: tuple[str, ...]) -> str:
    """Return the one-character type glyph for a kind tag set."""
    for kind, glyph in KIND_GLYPH_RULES:
        if kind in kinds:
            return glyph
    return DEFAULT_GLYPH


__all__ = [
    "KIND_DIRECTORY",
    "KIND_SYMLINK",
    "KIND_PIPE",
    "KIND_CHAR_DEVICE",
    "KIND_BLOCK_DEVICE",
    "KIND_SOCKET",
    "KIND_REGULAR",
    "KIND_PREDICATES",
    "KIND_GLYPH_RULES",
    "classify_kinds",
    "kind_glyph",
]
