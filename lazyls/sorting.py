"""Ordering of listed entries by a single criterion.

All orderings are stable, so ties keep listing order. Reversal is applied to
the sorted sequence afterward instead of inverting the key, which keeps a
reversed unsorted listing the exact mirror of directory order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .entry_model import Entry
from .options import (
    SORT_ACCESSED,
    SORT_CREATED,
    SORT_MODIFIED,
    SORT_NAME,
    SORT_NONE,
    SORT_SIZE,
    ListingOptions,
)

logger = logging.getLogger(__name__)

SortKey = Callable[[Entry], object]

SORT_KEYS: dict[str, SortKey] = {
    SORT_NAME: lambda entry: entry.name.lower(),
    SORT_CREATED: lambda entry: entry.created_ns,
    SORT_MODIFIED: lambda entry: entry.modified_ns,
    SORT_ACCESSED: lambda entry: entry.accessed_ns,
    SORT_SIZE: lambda entry: entry.size,
}


def order_entries(entries: Sequence[Entry], criterion: str, reverse: bool = False) -> list[Entry]:
    """Return ``entries`` ordered by ``criterion`` then optionally reversed."""
    if criterion == SORT_NONE:
        ordered = list(entries)
    else:
        try:
            key = SORT_KEYS[criterion]
        except KeyError:
            raise ValueError(f"unknown sort criterion: {criterion!r}") from None
        ordered = sorted(entries, key=key)
    if reverse:
        ordered.reverse()
    return ordered


def partition_directories(entries: Sequence[Entry]) -> tuple[list[Entry], list[Entry]]:
    """Split entries into ``(directories, non_directories)`` keeping order."""
    directories: list[Entry] = []
    others: list[Entry] = []
    for entry in entries:
        if entry.is_dir:
            directories.append(entry)
        else:
            others.append(entry)
    return directories, others


def sort_entries(entries: Sequence[Entry], options: ListingOptions) -> list[Entry]:
    """Order a listing according to ``options``.

    ``-d`` keeps only directories. ``--group-directories-first`` sorts both
    partitions independently and places directories ahead of the rest.
    Reversal happens inside each partition.
    """
    criterion = options.sort_criterion()
    logger.debug("sorting %d entries by %s (reverse=%s)", len(entries), criterion, options.reverse)

    if not (options.directories_only or options.group_directories_first):
        return order_entries(entries, criterion, options.reverse)

    directories, others = partition_directories(entries)
    if options.directories_only:
        others = []
    return order_entries(directories, criterion, options.reverse) + order_entries(
        others, criterion, options.reverse
    )


__all__ = [
    "SORT_KEYS",
    "order_entries",
    "partition_directories",
    "sort_entries",
]
