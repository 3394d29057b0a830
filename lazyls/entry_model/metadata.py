"""OS metadata queries for one path.

One link-aware ``lstat`` per path yields a ``MetadataSnapshot``. Numeric
owner IDs resolve to names through the system user and group databases.
IDs without a name resolve to ``UNRESOLVED_NAME``; every other failure is
fatal for the listing.
"""

from __future__ import annotations

import grp
import os
import pwd
from dataclasses import dataclass
from pathlib import Path

from ..errors import MalformedNameError, MetadataQueryError

UNRESOLVED_NAME = " "


@dataclass(frozen=True)
class MetadataSnapshot:
    """Raw attributes observed by one ``lstat`` call."""

    uid: int
    gid: int
    size: int
    mode: int
    modified_ns: int
    accessed_ns: int
    created_ns: int


def _creation_time_ns(stat_result: os.stat_result) -> int:
    """Return birth time when the platform reports it, else status-change time."""
    birth_ns = getattr(stat_result, "st_birthtime_ns", None)
    if birth_ns is not None:
        return int(birth_ns)
    birth = getattr(stat_result, "st_birthtime", None)
    if birth is not None:
        return int(birth * 1_000_000_000)
    return int(stat_result.st_ctime_ns)


def query_metadata(path: Path) -> MetadataSnapshot:
    """Snapshot ``path`` without following symlinks.

    Raises ``MetadataQueryError`` when the path cannot be stat'ed, for example
    when it vanished between the directory read and this call.
    """
    try:
        stat_result = path.lstat()
    except OSError as exc:
        raise MetadataQueryError(path, exc) from exc
    return MetadataSnapshot(
        uid=int(stat_result.st_uid),
        gid=int(stat_result.st_gid),
        size=int(stat_result.st_size),
        mode=int(stat_result.st_mode),
        modified_ns=int(stat_result.st_mtime_ns),
        accessed_ns=int(stat_result.st_atime_ns),
        created_ns=_creation_time_ns(stat_result),
    )


def user_name(uid: int) -> str:
    """Return the login name for ``uid`` or ``UNRESOLVED_NAME``."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return UNRESOLVED_NAME


def group_name(gid: int) -> str:
    """Return the group name for ``gid`` or ``UNRESOLVED_NAME``."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return UNRESOLVED_NAME


def display_name(path: Path) -> str:
    """Return the final path component as printable text.

    Undecodable filename bytes surface from ``os`` as surrogate escapes; such
    names raise ``MalformedNameError`` instead of being rendered lossily.
    """
    name = path.name or str(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedNameError(path) from exc
    return name


__all__ = [
    "UNRESOLVED_NAME",
    "MetadataSnapshot",
    "query_metadata",
    "user_name",
    "group_name",
    "display_name",
]
