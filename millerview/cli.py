"""Command-line front door for millerview.

Parses display options, sets up optional file logging, and launches the
browser in the current working directory. Terminal failures become exit
status 1 with a one-line message on stderr.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import termios
from pathlib import Path

from .config import load_theme_name, save_theme_name
from .runtime import run_browser
from .ui_theme import available_theme_names

LOG_ENV_VAR = "MILLERVIEW_LOG"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging() -> None:
    """Send debug logs to the file named by ``MILLERVIEW_LOG``, if set.

    Logs never go to stderr because the browser owns the terminal.
    """
    log_path = os.environ.get(LOG_ENV_VAR)
    if not log_path:
        return
    logging.basicConfig(filename=log_path, level=logging.DEBUG, format=LOG_FORMAT)


def _theme_choice(value: str) -> str:
    """argparse type accepting only known theme names."""
    candidate = value.strip().lower()
    if candidate not in available_theme_names():
        raise argparse.ArgumentTypeError(
            f"unknown theme {value!r} (choose from {', '.join(available_theme_names())})"
        )
    return candidate


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and browse from the current directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Browse directories in three panes: parent, current, and selected child."
    )
    parser.add_argument(
        "--theme",
        type=_theme_choice,
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    args = parser.parse_args()

    configure_logging()
    if args.theme is not None:
        save_theme_name(args.theme)
    theme_name = args.theme or load_theme_name()

    start_path = default_path if default_path is not None else Path.cwd()
    try:
        run_browser(start_path, theme_name, args.no_color)
    except (OSError, EOFError, termios.error) as exc:
        logging.getLogger(__name__).debug("terminal failure", exc_info=True)
        sys.stderr.write(f"millerview: terminal error: {exc}\n")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
