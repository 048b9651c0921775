"""Frame composition for the header plus three-pane terminal view.

Builds fully composed ANSI rows from a presenter ``Frame`` and writes them
in one ``os.write``. Every row is exactly ``width`` display columns wide.
"""

from __future__ import annotations

import os
import sys

from .ansi import clip_text, display_width, pad_text, sanitize_text, wrap_text
from .presenter import Frame, ListPane, PaneView, TextPane
from .ui_theme import UITheme

HEADER_ROWS = 5
PANE_PERCENTS = (33, 34, 33)
EMPTY_DIRECTORY_TEXT = "Empty directory"

BOX_TOP_LEFT = "╭"
BOX_TOP_RIGHT = "╮"
BOX_BOTTOM_LEFT = "╰"
BOX_BOTTOM_RIGHT = "╯"
BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"


def pane_widths(width: int) -> tuple[int, int, int]:
    """Split ``width`` into left/center/right columns (33/34/33 percent).

    Outer panes are rounded down and the center pane absorbs the remainder so
    the three always sum to ``width``.
    """
    width = max(0, width)
    left = (width * PANE_PERCENTS[0]) // 100
    right = (width * PANE_PERCENTS[2]) // 100
    return left, width - left - right, right


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def list_scroll_start(selected: int | None, total: int, visible: int) -> int:
    """First visible row index keeping ``selected`` inside the viewport."""
    if selected is None or visible <= 0 or total <= visible:
        return 0
    return max(0, min(selected - visible + 1, total - visible))


def _list_body(pane: ListPane, cols: int, rows: int, theme: UITheme) -> list[str]:
    if not pane.rows:
        return _text_body(TextPane(pane.title, EMPTY_DIRECTORY_TEXT, is_placeholder=True), cols, rows, theme)
    start = list_scroll_start(pane.selected_index, len(pane.rows), rows)
    out: list[str] = []
    for row in pane.rows[start : start + rows]:
        label = pad_text(sanitize_text(row.label), cols)
        color = theme.directory if row.is_dir else theme.file
        if row.selected:
            out.append(f"{theme.reverse}{color}{label}{theme.reset}")
        else:
            out.append(_styled(label, color, theme))
    return out


def _text_body(pane: TextPane, cols: int, rows: int, theme: UITheme) -> list[str]:
    if pane.is_error:
        style = theme.error
    elif pane.is_placeholder:
        style = theme.placeholder
    else:
        style = theme.file
    return [_styled(pad_text(line, cols), style, theme) for line in wrap_text(sanitize_text(pane.text), cols)[:rows]]


def box_lines(title: str, body: list[str], width: int, height: int, theme: UITheme) -> list[str]:
    """Draw a rounded border of ``width`` x ``height`` around ``body`` rows.

    ``body`` rows must already be ``width - 2`` columns wide; missing rows are
    blank-filled. The title is centered in the top border.
    """
    if height <= 0:
        return []
    if width < 2 or height < 2:
        return [" " * max(0, width)] * height

    inner = width - 2
    title_text = clip_text(f" {sanitize_text(title)} ", inner) if title else ""
    title_cols = display_width(title_text)
    left_rule = (inner - title_cols) // 2
    right_rule = inner - title_cols - left_rule
    top = (
        _styled(BOX_TOP_LEFT + BOX_HORIZONTAL * left_rule, theme.border, theme)
        + _styled(title_text, theme.title, theme)
        + _styled(BOX_HORIZONTAL * right_rule + BOX_TOP_RIGHT, theme.border, theme)
    )
    side = _styled(BOX_VERTICAL, theme.border, theme)
    out = [top]
    blank = " " * inner
    for idx in range(height - 2):
        content = body[idx] if idx < len(body) else blank
        out.append(f"{side}{content}{side}")
    out.append(_styled(BOX_BOTTOM_LEFT + BOX_HORIZONTAL * inner + BOX_BOTTOM_RIGHT, theme.border, theme))
    return out


def pane_lines(pane: PaneView, width: int, height: int, theme: UITheme) -> list[str]:
    cols = max(0, width - 2)
    rows = max(0, height - 2)
    if isinstance(pane, ListPane):
        body = _list_body(pane, cols, rows, theme)
    else:
        body = _text_body(pane, cols, rows, theme)
    return box_lines(pane.title, body, width, height, theme)


def build_frame_lines(frame: Frame, width: int, height: int, theme: UITheme) -> list[str]:
    """Compose header and pane rows for a ``width`` x ``height`` terminal."""
    width = max(1, width)
    height = max(1, height)
    header_cols = max(0, width - 2)
    header_body = [_styled(pad_text(sanitize_text(frame.header), header_cols), theme.header, theme)]
    lines = box_lines("", header_body, width, min(HEADER_ROWS, height), theme)

    pane_height = height - len(lines)
    if pane_height <= 0:
        return lines
    left_w, center_w, right_w = pane_widths(width)
    columns = [
        pane_lines(frame.parent, left_w, pane_height, theme),
        pane_lines(frame.current, center_w, pane_height, theme),
        pane_lines(frame.child, right_w, pane_height, theme),
    ]
    for row in range(pane_height):
        lines.append("".join(column[row] for column in columns if row < len(column)))
    return lines


def render_frame(frame: Frame, width: int, height: int, theme: UITheme, stdout_fd: int | None = None) -> None:
    """Clear the screen and draw ``frame`` in a single write."""
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()
    out = "\033[H\033[J" + "\r\n".join(build_frame_lines(frame, width, height, theme))
    os.write(stdout_fd, out.encode("utf-8", errors="replace"))


__all__ = [
    "HEADER_ROWS",
    "EMPTY_DIRECTORY_TEXT",
    "pane_widths",
    "list_scroll_start",
    "box_lines",
    "pane_lines",
    "build_frame_lines",
    "render_frame",
]
