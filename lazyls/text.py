"""Terminal text measurement and column padding.

Column alignment counts terminal cells, not code points: East Asian
wide/fullwidth characters take two cells and combining marks take none.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return terminal display width for plain text."""
    return sum(char_display_width(ch) for ch in text)


def pad_right(text: str, width: int) -> str:
    """Left-justify ``text`` to ``width`` display columns with trailing spaces."""
    return text + " " * max(0, width - display_width(text))


def pad_left(text: str, width: int) -> str:
    """Right-justify ``text`` to ``width`` display columns with leading spaces."""
    return " " * max(0, width - display_width(text)) + text


__all__ = [
    "char_display_width",
    "display_width",
    "pad_right",
    "pad_left",
]
