"""Directory listing pipeline: read, sort, render.

A ``DirectoryListing`` owns its entries and the options it was built with.
Passes run sequentially; every entry is stat'ed before anything is sorted,
and nothing is rendered until the order is final.
"""

from __future__ import annotations

import logging
import stat
from dataclasses import dataclass, field

from .entry_model import Entry, build_entry, list_directory_entries
from .errors import MetadataQueryError, PathNotFoundError
from .options import ListingOptions
from .render import render_listing, render_long_entry, render_entry
from .sorting import sort_entries

logger = logging.getLogger(__name__)


@dataclass
class DirectoryListing:
    """Ordered entries for one target plus the options that shape them."""

    options: ListingOptions
    entries: list[Entry] = field(default_factory=list)
    single_entry: bool = False

    @classmethod
    def build(cls, options: ListingOptions) -> DirectoryListing:
        """Read the target named by ``options.path``.

        A target that is not a directory yields a one-entry listing that is
        rendered as-is, without sorting.
        """
        target = options.path
        try:
            target_mode = target.stat().st_mode
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise PathNotFoundError(target) from exc
        except OSError as exc:
            raise MetadataQueryError(target, exc) from exc
        if not stat.S_ISDIR(target_mode):
            logger.debug("listing single entry %s", target)
            return cls(options=options, entries=[build_entry(target)], single_entry=True)
        return cls(options=options, entries=list_directory_entries(target))

    def sort(self) -> None:
        """Reorder entries in place according to the options."""
        if self.single_entry:
            return
        self.entries = sort_entries(self.entries, self.options)

    def render(self) -> str:
        """Render the listing as text without a trailing newline."""
        if self.single_entry:
            entry = self.entries[0]
            if self.options.long_format:
                return render_long_entry(entry, self.options)
            return render_entry(entry, self.options)
        return render_listing(self.entries, self.options)


def list_path(options: ListingOptions) -> str:
    """Build, sort, and render the listing for ``options.path``."""
    listing = DirectoryListing.build(options)
    listing.sort()
    return listing.render()


__all__ = [
    "DirectoryListing",
    "list_path",
]
