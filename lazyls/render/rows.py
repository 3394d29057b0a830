"""Per-entry and whole-listing text rendering.

Column widths are computed once per listing so the user, group, and size
fields line up on every row. Entries hidden by the leading-dot rule render as
empty text and are skipped when the listing is joined.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..entry_model import Entry
from ..options import ListingOptions
from ..text import display_width, pad_left, pad_right
from .fields import format_permissions, format_size, format_timestamp, selected_timestamp_ns


@dataclass(frozen=True)
class ColumnWidths:
    """Widest user, group, and size strings across one listing."""

    user: int = 0
    group: int = 0
    size: int = 0


def compute_column_widths(entries: Sequence[Entry]) -> ColumnWidths:
    """Measure every entry so padded columns align across the listing."""
    user = group = size = 0
    for entry in entries:
        user = max(user, display_width(entry.owner_user))
        group = max(group, display_width(entry.owner_group))
        size = max(size, display_width(format_size(entry.size)))
    return ColumnWidths(user=user, group=group, size=size)


def is_visible(name: str, options: ListingOptions) -> bool:
    """Apply the leading-dot rule for ``-a`` and ``-A``."""
    if not name.startswith("."):
        return True
    if options.all_entries:
        return True
    return options.almost_all and name not in {".", ".."}


def _size_field(entry: Entry, widths: ColumnWidths) -> str:
    return pad_left(format_size(entry.size), widths.size + 1)


def render_entry(entry: Entry, options: ListingOptions, widths: ColumnWidths | None = None) -> str:
    """Render one entry in short form.

    Modes are checked in precedence order: size-annotated, quoted, then the
    bare name used by one-per-line, comma, and default layouts.
    """
    if not is_visible(entry.name, options):
        return ""
    if options.display_size:
        widths = widths if widths is not None else compute_column_widths([entry])
        return f"{_size_field(entry, widths)} {entry.name}"
    if options.quote_name:
        return f'"{entry.name}"'
    return entry.name


def long_row_fields(entry: Entry, options: ListingOptions, widths: ColumnWidths) -> tuple[str, ...]:
    """Return padded long-form fields: permissions, size, user, group, time, name."""
    timestamp = format_timestamp(selected_timestamp_ns(entry, options), options.time_style)
    return (
        format_permissions(entry),
        _size_field(entry, widths),
        pad_right(entry.owner_user, widths.user + 1),
        pad_right(entry.owner_group, widths.group + 1),
        timestamp,
        entry.name,
    )


def render_long_entry(entry: Entry, options: ListingOptions, widths: ColumnWidths | None = None) -> str:
    """Render one entry as a long-form row, or empty text when hidden."""
    if not is_visible(entry.name, options):
        return ""
    widths = widths if widths is not None else compute_column_widths([entry])
    perms, size, user, group, timestamp, name = long_row_fields(entry, options, widths)
    return f"{perms} {size} {user}  {group}{timestamp} {name}"


def listing_separator(options: ListingOptions) -> str:
    """Return the text placed between short-form entries."""
    if options.display_size or options.quote_name:
        return " "
    if options.one_per_line:
        return "\n"
    if options.comma_separated:
        return ", "
    return " "


def render_listing(entries: Sequence[Entry], options: ListingOptions) -> str:
    """Render an ordered listing in long or short form."""
    widths = compute_column_widths(entries)
    if options.long_format:
        rows = (render_long_entry(entry, options, widths) for entry in entries)
        return "\n".join(row for row in rows if row)
    parts = (render_entry(entry, options, widths) for entry in entries)
    return listing_separator(options).join(part for part in parts if part)


__all__ = [
    "ColumnWidths",
    "compute_column_widths",
    "is_visible",
    "render_entry",
    "long_row_fields",
    "render_long_entry",
    "listing_separator",
    "render_listing",
]
