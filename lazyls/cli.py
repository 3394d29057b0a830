"""Command-line front door for lazyls.

Parses CLI options into a ``ListingOptions`` bag, runs the listing pipeline,
and writes the rendered text to stdout. Fatal listing errors exit with a
message on stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import load_sort, load_time_style, save_sort, save_time_style
from .errors import ListingError
from .listing import list_path
from .options import ListingOptions, normalize_sort_value, sort_value_choices

PROG = "lazyls"


def _sort_value(value: str) -> str:
    """argparse type for ``--sort`` criterion names."""
    if normalize_sort_value(value) is None:
        choices = ", ".join(sort_value_choices())
        raise argparse.ArgumentTypeError(f"invalid sort criterion: {value!r} (choose from {choices})")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser; ``-h`` means human-readable, so help is long-only."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="List directory contents with selectable ordering and layout.",
        add_help=False,
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory or file to list. Defaults to current directory.")
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    parser.add_argument("-A", dest="almost_all", action="store_true", help="List all entries except . and ..")
    parser.add_argument("-a", dest="all_entries", action="store_true", help="Do not ignore entries starting with .")
    parser.add_argument("--author", action="store_true", help="Print the author of each file (always shown in long form).")
    parser.add_argument("-c", dest="sort_created", action="store_true", help="Sort by, and show, creation time.")
    parser.add_argument("-d", "--directory", dest="directories_only", action="store_true", help="List directories only.")
    parser.add_argument("-f", dest="no_sort_f", action="store_true", help="Do not sort.")
    parser.add_argument(
        "-h", "--human-readable", dest="human_readable", action="store_true", help="Human-readable sizes (default)."
    )
    parser.add_argument("-i", "--inode", action="store_true", help="Accepted for compatibility; has no effect.")
    parser.add_argument("-l", dest="long_format", action="store_true", help="Use long listing format.")
    parser.add_argument("-m", dest="comma_separated", action="store_true", help="Comma-separated list of entries.")
    parser.add_argument("-n", "--name", dest="sort_name", action="store_true", help="Sort by name, ignoring case.")
    parser.add_argument("-Q", "--quote-name", dest="quote_name", action="store_true", help="Enclose names in double quotes.")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse order while sorting.")
    parser.add_argument("-R", "--recursive", action="store_true", help="Accepted for compatibility; has no effect.")
    parser.add_argument("-s", "--size", dest="display_size", action="store_true", help="Print the size of each entry.")
    parser.add_argument("-S", dest="sort_size", action="store_true", help="Sort by file size, smallest first.")
    parser.add_argument("-t", dest="sort_modified", action="store_true", help="Sort by, and show, modification time.")
    parser.add_argument("-1", dest="one_per_line", action="store_true", help="List one entry per line.")
    parser.add_argument("-U", dest="no_sort", action="store_true", help="Do not sort; list in directory order.")
    parser.add_argument(
        "--time-style",
        default=None,
        metavar="TEMPLATE",
        help="strftime template for timestamps (default from config, else %%Y-%%m-%%d %%H:%%M:%%S).",
    )
    parser.add_argument("--atime", dest="sort_accessed", action="store_true", help="Sort by access time.")
    parser.add_argument(
        "--sort",
        type=_sort_value,
        default=None,
        metavar="CRITERION",
        help="Sort by name, create, time, access, size, or none (default from config, else create).",
    )
    parser.add_argument(
        "--group-directories-first",
        action="store_true",
        help="List directories before other entries.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given --time-style and --sort values as defaults.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def options_from_args(args: argparse.Namespace) -> ListingOptions:
    """Translate parsed arguments into a ``ListingOptions`` bag."""
    return ListingOptions(
        path=Path(args.path),
        almost_all=args.almost_all,
        all_entries=args.all_entries,
        author=args.author,
        sort_created=args.sort_created,
        directories_only=args.directories_only,
        no_sort_f=args.no_sort_f,
        human_readable=args.human_readable,
        inode=args.inode,
        long_format=args.long_format,
        comma_separated=args.comma_separated,
        sort_name=args.sort_name,
        quote_name=args.quote_name,
        reverse=args.reverse,
        recursive=args.recursive,
        display_size=args.display_size,
        sort_size=args.sort_size,
        sort_modified=args.sort_modified,
        one_per_line=args.one_per_line,
        no_sort=args.no_sort,
        time_style=args.time_style if args.time_style is not None else load_time_style(),
        sort_accessed=args.sort_accessed,
        sort=args.sort if args.sort is not None else load_sort(),
        group_directories_first=args.group_directories_first,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print the listing for the requested path.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if args.save_defaults:
        if args.time_style is not None:
            save_time_style(args.time_style)
        if args.sort is not None:
            save_sort(args.sort)

    options = options_from_args(args)
    try:
        text = list_path(options)
    except ListingError as exc:
        raise SystemExit(f"{PROG}: {exc}") from exc
    sys.stdout.write(text + "\n")


if __name__ == "__main__":
    main()
