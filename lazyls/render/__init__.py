"""Text rendering for entries and listings.

Field helpers turn raw metadata into display strings; row helpers apply
column alignment, the leading-dot rule, and the selected layout.
"""

from __future__ import annotations

from .fields import (
    SIZE_UNITS,
    format_permissions,
    format_size,
    format_timestamp,
    selected_timestamp_ns,
)
from .rows import (
    ColumnWidths,
    compute_column_widths,
    is_visible,
    listing_separator,
    long_row_fields,
    render_entry,
    render_listing,
    render_long_entry,
)

__all__ = [
    "SIZE_UNITS",
    "format_size",
    "format_permissions",
    "format_timestamp",
    "selected_timestamp_ns",
    "ColumnWidths",
    "compute_column_widths",
    "is_visible",
    "render_entry",
    "long_row_fields",
    "render_long_entry",
    "listing_separator",
    "render_listing",
]
