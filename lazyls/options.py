"""Validated listing options and sort-criterion selection.

``ListingOptions`` is the read-only option bag handed to the sort engine and
formatter. It is built once by the CLI and never mutated afterward.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

SORT_NAME = "name"
SORT_CREATED = "created"
SORT_MODIFIED = "modified"
SORT_ACCESSED = "accessed"
SORT_SIZE = "size"
SORT_NONE = "none"

SORT_CRITERIA: tuple[str, ...] = (
    SORT_NAME,
    SORT_CREATED,
    SORT_MODIFIED,
    SORT_ACCESSED,
    SORT_SIZE,
    SORT_NONE,
)

DEFAULT_TIME_STYLE = "%Y-%m-%d %H:%M:%S"
DEFAULT_SORT = "create"

# Accepted ``--sort`` spellings.
_SORT_ALIASES: dict[str, str] = {
    "name": SORT_NAME,
    "create": SORT_CREATED,
    "created": SORT_CREATED,
    "ctime": SORT_CREATED,
    "time": SORT_MODIFIED,
    "modified": SORT_MODIFIED,
    "mtime": SORT_MODIFIED,
    "access": SORT_ACCESSED,
    "accessed": SORT_ACCESSED,
    "atime": SORT_ACCESSED,
    "size": SORT_SIZE,
    "none": SORT_NONE,
}


def normalize_sort_value(value: str) -> str | None:
    """Map a ``--sort`` spelling to its criterion, or ``None`` when unknown."""
    return _SORT_ALIASES.get(value.strip().lower())


def sort_value_choices() -> tuple[str, ...]:
    """Return accepted ``--sort`` spellings in stable order."""
    return tuple(_SORT_ALIASES)


@dataclass(frozen=True)
class ListingOptions:
    """Presentation and ordering choices for one listing run."""

    path: Path = Path(".")
    almost_all: bool = False
    all_entries: bool = False
    author: bool = False
    sort_created: bool = False
    directories_only: bool = False
    no_sort_f: bool = False
    human_readable: bool = False
    inode: bool = False
    long_format: bool = False
    comma_separated: bool = False
    sort_name: bool = False
    quote_name: bool = False
    reverse: bool = False
    recursive: bool = False
    display_size: bool = False
    sort_size: bool = False
    sort_modified: bool = False
    one_per_line: bool = False
    no_sort: bool = False
    time_style: str = DEFAULT_TIME_STYLE
    sort_accessed: bool = False
    sort: str = DEFAULT_SORT
    group_directories_first: bool = False

    def sort_criterion(self) -> str:
        """Resolve the single active sort criterion.

        Explicit criterion flags win in the fixed order name, created,
        modified, accessed, size. Without one, ``-f``/``-U`` disable sorting,
        and otherwise the ``--sort`` value decides.
        """
        flagged = (
            (self.sort_name, SORT_NAME),
            (self.sort_created, SORT_CREATED),
            (self.sort_modified, SORT_MODIFIED),
            (self.sort_accessed, SORT_ACCESSED),
            (self.sort_size, SORT_SIZE),
        )
        for enabled, criterion in flagged:
            if enabled:
                return criterion
        if self.no_sort or self.no_sort_f:
            return SORT_NONE
        return normalize_sort_value(self.sort) or SORT_NONE


__all__ = [
    "SORT_NAME",
    "SORT_CREATED",
    "SORT_MODIFIED",
    "SORT_ACCESSED",
    "SORT_SIZE",
    "SORT_NONE",
    "SORT_CRITERIA",
    "DEFAULT_TIME_STYLE",
    "DEFAULT_SORT",
    "ListingOptions",
    "normalize_sort_value",
    "sort_value_choices",
]
