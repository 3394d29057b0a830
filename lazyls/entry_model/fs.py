"""Entry construction and directory reading."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import MetadataQueryError
from .kinds import classify_kinds
from .metadata import display_name, group_name, query_metadata, user_name
from .types import Entry

logger = logging.getLogger(__name__)


def build_entry(path: Path) -> Entry:
    """Build an ``Entry`` for ``path`` from one metadata snapshot."""
    snapshot = query_metadata(path)
    return Entry(
        path=path,
        name=display_name(path),
        kinds=classify_kinds(snapshot.mode),
        owner_user=user_name(snapshot.uid),
        owner_group=group_name(snapshot.gid),
        uid=snapshot.uid,
        gid=snapshot.gid,
        size=snapshot.size,
        mode=snapshot.mode,
        modified_ns=snapshot.modified_ns,
        accessed_ns=snapshot.accessed_ns,
        created_ns=snapshot.created_ns,
    )


def list_directory_entries(directory: Path) -> list[Entry]:
    """Build entries for every child of ``directory`` in directory order.

    The first failing child aborts the whole read; there is no partial result.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                entries.append(build_entry(directory / child.name))
    except OSError as exc:
        raise MetadataQueryError(directory, exc) from exc
    logger.debug("read %d entries from %s", len(entries), directory)
    return entries


__all__ = [
    "build_entry",
    "list_directory_entries",
]
