"""Human-readable field rendering for sizes, permissions, and timestamps."""

from __future__ import annotations

import stat
from datetime import datetime

from ..entry_model import Entry
from ..options import ListingOptions

SIZE_UNITS: tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
SIZE_STEP = 1024

_PERMISSION_TRIPLETS: tuple[tuple[int, int, int], ...] = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH),
)


def format_size(size_bytes: int) -> str:
    """Render a byte count with base-1024 units and one decimal place.

    Counts below one KiB are shown as whole bytes, e.g. ``"1000 B"``.
    """
    if size_bytes < SIZE_STEP:
        return f"{size_bytes} B"
    value = float(size_bytes)
    unit_idx = 0
    while value >= SIZE_STEP and unit_idx < len(SIZE_UNITS) - 1:
        value /= SIZE_STEP
        unit_idx += 1
    return f"{value:.1f} {SIZE_UNITS[unit_idx]}"


def format_permissions(entry: Entry) -> str:
    """Render the 10-character type glyph plus ``rwx`` string for ``entry``."""
    parts = [entry.type_glyph]
    for read_bit, write_bit, exec_bit in _PERMISSION_TRIPLETS:
        parts.append("r" if entry.mode & read_bit else "-")
        parts.append("w" if entry.mode & write_bit else "-")
        parts.append("x" if entry.mode & exec_bit else "-")
    return "".join(parts)


def format_timestamp(timestamp_ns: int, time_style: str) -> str:
    """Render a nanosecond timestamp in local time with a ``strftime`` template."""
    return datetime.fromtimestamp(timestamp_ns // 1_000_000_000).strftime(time_style)


def selected_timestamp_ns(entry: Entry, options: ListingOptions) -> int:
    """Return the timestamp shown in long form: created, modified, else accessed."""
    if options.sort_created:
        return entry.created_ns
    if options.sort_modified:
        return entry.modified_ns
    return entry.accessed_ns


__all__ = [
    "SIZE_UNITS",
    "format_size",
    "format_permissions",
    "format_timestamp",
    "selected_timestamp_ns",
]
