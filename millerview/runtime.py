"""Interactive browser bootstrap and main event loop.

The loop owns the only ``NavigatorState``: it reads one key, applies at most
one transition, and redraws. Directory reads happen synchronously inside the
transition. Input polling uses a short timeout so terminal resizes redraw
without waiting for the next key press.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from .input import read_key
from .keys import KeyEvent, command_for_event
from .listing import DirectoryReader, read_directory
from .navigator import Command, NavigatorState, initial_state, transition
from .presenter import present
from .render import build_frame_lines, render_frame
from .terminal import TerminalController
from .ui_theme import UITheme, resolve_theme

LOGGER = logging.getLogger(__name__)

RESIZE_POLL_MS = 200
FALLBACK_TERMINAL_SIZE = (80, 24)


@dataclass
class BrowserSession:
    state: NavigatorState
    theme: UITheme
    dirty: bool = True
    last_size: tuple[int, int] | None = None


def apply_key(
    state: NavigatorState,
    event: KeyEvent,
    read: DirectoryReader = read_directory,
) -> tuple[NavigatorState, bool]:
    """Map one key event through the navigator.

    Returns ``(next_state, should_quit)``. Ignored keys return ``state``
    itself so callers can detect that nothing was accepted.
    """
    command = command_for_event(event)
    if command is None:
        return state, False
    if command is Command.QUIT:
        return state, True
    LOGGER.debug("applying %s in %s", command.name, state.current.path)
    return transition(state, command, read), False


def run_main_loop(
    session: BrowserSession,
    terminal: TerminalController,
    stdin_fd: int,
    stdout_fd: int,
    read: DirectoryReader = read_directory,
) -> None:
    """Run the interactive loop until a quit key is pressed.

    Terminal I/O errors propagate to the caller after ``raw_mode`` has
    restored the terminal.
    """
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size(FALLBACK_TERMINAL_SIZE)
            size = (term.columns, term.lines)
            if size != session.last_size:
                session.last_size = size
                session.dirty = True
            if session.dirty:
                render_frame(present(session.state), term.columns, term.lines, session.theme, stdout_fd)
                session.dirty = False

            key = read_key(stdin_fd, timeout_ms=RESIZE_POLL_MS)
            if not key:
                continue
            event = KeyEvent(key)
            if command_for_event(event) is None:
                continue
            session.state, should_quit = apply_key(session.state, event, read)
            if should_quit:
                return
            session.dirty = True


def print_snapshot(state: NavigatorState, theme: UITheme) -> None:
    """Write one frame to stdout for non-interactive use."""
    term = shutil.get_terminal_size(FALLBACK_TERMINAL_SIZE)
    lines = build_frame_lines(present(state), term.columns, term.lines, theme)
    sys.stdout.write("\n".join(lines) + "\n")


def run_browser(start_path: Path, theme_name: str | None = None, no_color: bool = False) -> None:
    """Build the initial state for ``start_path`` and browse interactively.

    Without a TTY on both stdin and stdout a single frame is printed instead.
    """
    state = initial_state(start_path)
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()

    if not (os.isatty(stdin_fd) and os.isatty(stdout_fd)):
        plain = no_color or not os.isatty(stdout_fd)
        print_snapshot(state, resolve_theme(theme_name, no_color=plain))
        return

    LOGGER.debug("starting browser in %s", start_path)
    terminal = TerminalController(stdin_fd, stdout_fd)
    session = BrowserSession(state=state, theme=resolve_theme(theme_name, no_color=no_color))
    run_main_loop(session, terminal, stdin_fd, stdout_fd)


__all__ = [
    "BrowserSession",
    "apply_key",
    "run_main_loop",
    "print_snapshot",
    "run_browser",
]
