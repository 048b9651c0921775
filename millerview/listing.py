"""Filesystem read adapter producing sorted directory listings.

Only immediate children are listed. Symlinks are reported as the OS lists
them (a link to a directory is not itself a directory). Any ``OSError`` is
returned as a ``ReadError`` value instead of being raised.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .model import DirectoryEntry, DirectoryListing, ReadError

LOGGER = logging.getLogger(__name__)

DirectoryReader = Callable[[Path], DirectoryListing | ReadError]


def listing_sort_key(entry: DirectoryEntry) -> tuple[bool, str]:
    """Directories first, then case-sensitive name order."""
    return (not entry.is_dir, entry.name)


def sort_entries(entries) -> tuple[DirectoryEntry, ...]:
    return tuple(sorted(entries, key=listing_sort_key))


def _error_message(exc: OSError) -> str:
    if exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


def read_directory(path: Path) -> DirectoryListing | ReadError:
    """List ``path`` with selection unset, or describe why it could not be read."""
    path = Path(path)
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(path) as children:
            for child in children:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append(DirectoryEntry(name=child.name, is_dir=is_dir))
    except OSError as exc:
        LOGGER.debug("failed to read directory %s", path, exc_info=True)
        return ReadError(path=path, message=_error_message(exc))
    return DirectoryListing(path=path, entries=sort_entries(entries))


def filesystem_parent(path: Path) -> Path | None:
    """Return the parent directory of ``path``, or ``None`` at the root."""
    parent = path.parent
    if parent == path:
        return None
    return parent


__all__ = [
    "DirectoryReader",
    "listing_sort_key",
    "sort_entries",
    "read_directory",
    "filesystem_parent",
]
