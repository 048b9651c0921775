"""Terminal text measurement and shaping helpers.

Pane cells are laid out by display columns, not characters: wide characters
take two columns and combining marks none. Labels are sanitised before they
are measured so control bytes in file names cannot move the cursor.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
REPLACEMENT_CHAR = "?"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def sanitize_text(text: str) -> str:
    """Replace control and unencodable characters with a visible placeholder."""
    out: list[str] = []
    for ch in text:
        if unicodedata.category(ch) in {"Cc", "Cs"}:
            out.append(REPLACEMENT_CHAR)
        else:
            out.append(ch)
    return "".join(out)


def display_width(text: str) -> int:
    """Display columns used by ``text`` once ANSI sequences are removed."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain text to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
    return "".join(out)


def pad_text(text: str, cols: int) -> str:
    """Clip then right-pad plain text to exactly ``cols`` display columns."""
    clipped = clip_text(text, cols)
    return clipped + " " * max(0, cols - display_width(clipped))


def wrap_text(text: str, cols: int) -> list[str]:
    """Hard-wrap plain text into rows of at most ``cols`` display columns.

    Embedded newlines start new rows. Wrapping is by column, not by word,
    which keeps long paths readable in narrow panes.
    """
    if cols <= 0:
        return []
    rows: list[str] = []
    for paragraph in text.split("\n"):
        current: list[str] = []
        col = 0
        for ch in paragraph:
            w = char_display_width(ch, col)
            if col + w > cols and current:
                rows.append("".join(current))
                current = []
                col = 0
                w = char_display_width(ch, col)
            current.append(" " * w if ch == "\t" else ch)
            col += w
        rows.append("".join(current))
    return rows


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "sanitize_text",
    "display_width",
    "clip_text",
    "pad_text",
    "wrap_text",
]
