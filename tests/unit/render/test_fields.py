"""Tests for size, permission, and timestamp field rendering."""

from __future__ import annotations

import stat
import unittest
from datetime import datetime
from pathlib import Path

from lazyls.entry_model import KIND_DIRECTORY, KIND_REGULAR, KIND_SYMLINK, Entry
from lazyls.options import ListingOptions
from lazyls.render import format_permissions, format_size, format_timestamp, selected_timestamp_ns


def _entry(kinds: tuple[str, ...], mode: int) -> Entry:
    return Entry(
        path=Path("x"),
        name="x",
        kinds=kinds,
        owner_user="user",
        owner_group="group",
        uid=1000,
        gid=1000,
        size=0,
        mode=mode,
        modified_ns=2_000_000_000,
        accessed_ns=3_000_000_000,
        created_ns=1_000_000_000,
    )


class FormatSizeTests(unittest.TestCase):
    def test_small_counts_render_as_whole_bytes(self) -> None:
        self.assertEqual(format_size(0), "0 B")
        self.assertEqual(format_size(10), "10 B")
        self.assertEqual(format_size(1000), "1000 B")
        self.assertEqual(format_size(1023), "1023 B")

    def test_larger_counts_use_base_1024_units_with_one_decimal(self) -> None:
        self.assertEqual(format_size(1024), "1.0 KiB")
        self.assertEqual(format_size(1536), "1.5 KiB")
        self.assertEqual(format_size(4096), "4.0 KiB")
        self.assertEqual(format_size(5 * 1024 * 1024), "5.0 MiB")
        self.assertEqual(format_size(1024**3), "1.0 GiB")


class FormatPermissionsTests(unittest.TestCase):
    def test_directory_permissions(self) -> None:
        entry = _entry((KIND_DIRECTORY,), stat.S_IFDIR | 0o755)
        self.assertEqual(format_permissions(entry), "drwxr-xr-x")

    def test_regular_file_permissions(self) -> None:
        entry = _entry((KIND_REGULAR,), stat.S_IFREG | 0o640)
        self.assertEqual(format_permissions(entry), "-rw-r-----")

    def test_symlink_and_sparse_bits(self) -> None:
        entry = _entry((KIND_SYMLINK,), stat.S_IFLNK | 0o351)
        self.assertEqual(format_permissions(entry), "l-wxr-x--x")
        self.assertEqual(len(format_permissions(entry)), 10)


class TimestampTests(unittest.TestCase):
    def test_format_timestamp_uses_local_time_and_template(self) -> None:
        expected = datetime.fromtimestamp(1_700_000_000).strftime("%Y-%m-%d %H:%M:%S")
        self.assertEqual(format_timestamp(1_700_000_000_123_456_789, "%Y-%m-%d %H:%M:%S"), expected)
        self.assertEqual(format_timestamp(1_700_000_000 * 10**9, "[%Y]"), datetime.fromtimestamp(1_700_000_000).strftime("[%Y]"))

    def test_selected_timestamp_precedence(self) -> None:
        entry = _entry((KIND_REGULAR,), stat.S_IFREG | 0o644)
        self.assertEqual(selected_timestamp_ns(entry, ListingOptions()), entry.accessed_ns)
        self.assertEqual(selected_timestamp_ns(entry, ListingOptions(sort_modified=True)), entry.modified_ns)
        self.assertEqual(
            selected_timestamp_ns(entry, ListingOptions(sort_modified=True, sort_created=True)),
            entry.created_ns,
        )


if __name__ == "__main__":
    unittest.main()
