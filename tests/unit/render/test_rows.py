"""Tests for column alignment, dot filtering, and layout modes."""

from __future__ import annotations

import stat
import unittest
from pathlib import Path

from lazyls.entry_model import KIND_REGULAR, Entry
from lazyls.options import ListingOptions
from lazyls.render import (
    ColumnWidths,
    compute_column_widths,
    is_visible,
    long_row_fields,
    render_entry,
    render_listing,
    render_long_entry,
)


def _entry(name: str, *, user: str = "user", group: str = "group", size: int = 0) -> Entry:
    return Entry(
        path=Path(name),
        name=name,
        kinds=(KIND_REGULAR,),
        owner_user=user,
        owner_group=group,
        uid=1000,
        gid=1000,
        size=size,
        mode=stat.S_IFREG | 0o644,
        modified_ns=1_700_000_000 * 10**9,
        accessed_ns=1_700_000_000 * 10**9,
        created_ns=1_700_000_000 * 10**9,
    )


class ColumnWidthTests(unittest.TestCase):
    def test_widths_are_maxima_across_entries(self) -> None:
        entries = [
            _entry("a", user="root", group="abc", size=10),
            _entry("b", user="al", group="wheel12", size=2048),
            _entry("c", user="x", group="g", size=0),
        ]
        self.assertEqual(compute_column_widths(entries), ColumnWidths(user=4, group=7, size=7))
        self.assertEqual(compute_column_widths([]), ColumnWidths())

    def test_group_field_has_uniform_width(self) -> None:
        entries = [
            _entry("a", group="abc"),
            _entry("b", group="defghij"),
            _entry("c", group="k"),
        ]
        widths = compute_column_widths(entries)
        options = ListingOptions(long_format=True)

        group_fields = [long_row_fields(entry, options, widths)[3] for entry in entries]

        self.assertEqual([len(field) for field in group_fields], [8, 8, 8])
        self.assertEqual(group_fields[0], "abc     ")

    def test_long_rows_align_timestamp_column(self) -> None:
        entries = [
            _entry("short", user="al", group="g", size=3),
            _entry("longer", user="administrator", group="developers", size=123456),
        ]
        widths = compute_column_widths(entries)
        options = ListingOptions(long_format=True, time_style="@%Y")
        rows = [render_long_entry(entry, options, widths) for entry in entries]

        self.assertEqual(rows[0].index("@"), rows[1].index("@"))
        size_fields = [long_row_fields(entry, options, widths)[1] for entry in entries]
        self.assertEqual(size_fields, ["       3 B", " 120.6 KiB"])

    def test_wide_characters_count_as_two_columns(self) -> None:
        entries = [_entry("a", user="漢字"), _entry("b", user="abcd")]
        widths = compute_column_widths(entries)
        self.assertEqual(widths.user, 4)
        user_fields = [long_row_fields(entry, ListingOptions(), widths)[2] for entry in entries]
        self.assertEqual(user_fields, ["漢字 ", "abcd "])


class VisibilityTests(unittest.TestCase):
    def test_leading_dot_rules(self) -> None:
        default = ListingOptions()
        all_entries = ListingOptions(all_entries=True)
        almost_all = ListingOptions(almost_all=True)

        self.assertTrue(is_visible("a.txt", default))
        self.assertFalse(is_visible(".hidden", default))
        self.assertTrue(is_visible(".hidden", all_entries))
        self.assertTrue(is_visible(".hidden", almost_all))
        self.assertTrue(is_visible(".", all_entries))
        self.assertTrue(is_visible("..", all_entries))
        self.assertFalse(is_visible(".", almost_all))
        self.assertFalse(is_visible("..", almost_all))

    def test_hidden_entries_render_as_empty_text(self) -> None:
        entry = _entry(".hidden")
        self.assertEqual(render_entry(entry, ListingOptions()), "")
        self.assertEqual(render_long_entry(entry, ListingOptions(long_format=True)), "")
        self.assertEqual(render_entry(entry, ListingOptions(all_entries=True)), ".hidden")


class ShortModeTests(unittest.TestCase):
    def test_mode_precedence(self) -> None:
        entry = _entry("a.txt", size=10)
        widths = ColumnWidths(size=4)
        self.assertEqual(render_entry(entry, ListingOptions(display_size=True, quote_name=True), widths), " 10 B a.txt")
        self.assertEqual(render_entry(entry, ListingOptions(quote_name=True, one_per_line=True)), '"a.txt"')
        self.assertEqual(render_entry(entry, ListingOptions(one_per_line=True)), "a.txt")
        self.assertEqual(render_entry(entry, ListingOptions()), "a.txt")

    def test_listing_separators_skip_hidden_entries(self) -> None:
        entries = [_entry("Sub"), _entry(".b"), _entry("a.txt")]
        self.assertEqual(render_listing(entries, ListingOptions()), "Sub a.txt")
        self.assertEqual(render_listing(entries, ListingOptions(one_per_line=True)), "Sub\na.txt")
        self.assertEqual(render_listing(entries, ListingOptions(comma_separated=True)), "Sub, a.txt")
        self.assertEqual(render_listing(entries, ListingOptions(quote_name=True)), '"Sub" "a.txt"')
        self.assertEqual(
            render_listing(entries, ListingOptions(comma_separated=True, all_entries=True)),
            "Sub, .b, a.txt",
        )

    def test_long_listing_is_one_row_per_visible_entry(self) -> None:
        entries = [_entry("Sub"), _entry(".b"), _entry("a.txt")]
        rows = render_listing(entries, ListingOptions(long_format=True)).split("\n")
        self.assertEqual(len(rows), 2)
        self.assertTrue(rows[0].startswith("-rw-r--r-- "))
        self.assertTrue(rows[0].startswith("-rw-r--r--  0 B user   group "))
        self.assertTrue(rows[0].endswith(" Sub"))
        self.assertTrue(rows[1].endswith(" a.txt"))


if __name__ == "__main__":
    unittest.main()
