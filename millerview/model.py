"""Domain datatypes for the three navigation slots.

Listings are frozen and carry their entries as tuples, so moving a listing
between slots never shares mutable state. Slot unions mirror what each pane
may legally hold.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child of a directory as reported by the OS listing."""

    name: str
    is_dir: bool


@dataclass(frozen=True)
class DirectoryListing:
    """Sorted directory children plus an optional selected row.

    ``selected_index`` is either ``None`` or a valid index into ``entries``.
    Use ``with_selection`` to move the selection; it clamps instead of raising.
    """

    path: Path
    entries: tuple[DirectoryEntry, ...] = ()
    selected_index: int | None = None

    def __post_init__(self) -> None:
        if self.selected_index is None:
            return
        if not 0 <= self.selected_index < len(self.entries):
            raise ValueError(
                f"selected_index {self.selected_index} out of range for {len(self.entries)} entries"
            )

    @property
    def selected_entry(self) -> DirectoryEntry | None:
        if self.selected_index is None:
            return None
        return self.entries[self.selected_index]

    def with_selection(self, index: int | None) -> DirectoryListing:
        """Return a copy selecting ``index`` clamped to the valid range."""
        if index is None or not self.entries:
            clamped = None
        else:
            clamped = max(0, min(index, len(self.entries) - 1))
        if clamped == self.selected_index:
            return self
        return replace(self, selected_index=clamped)

    def with_default_selection(self) -> DirectoryListing:
        """Select the first entry when there is one, otherwise clear selection."""
        return self.with_selection(0 if self.entries else None)

    def index_of(self, name: str) -> int | None:
        for idx, entry in enumerate(self.entries):
            if entry.name == name:
                return idx
        return None

    def child_path(self, entry: DirectoryEntry) -> Path:
        return self.path / entry.name


@dataclass(frozen=True)
class FileReference:
    """A selected non-directory entry. Nothing can be navigated through it."""

    path: Path


@dataclass(frozen=True)
class ReadError:
    """A directory read that failed, kept in the slot in place of a listing."""

    path: Path
    message: str


@dataclass(frozen=True)
class EmptySlot:
    """Marker for a slot with nothing to show (no parent, no selection)."""


EMPTY = EmptySlot()

PaneSlot = EmptySlot | DirectoryListing | FileReference | ReadError
ParentSlot = EmptySlot | DirectoryListing | ReadError
CurrentSlot = DirectoryListing | ReadError
ChildSlot = PaneSlot


__all__ = [
    "DirectoryEntry",
    "DirectoryListing",
    "FileReference",
    "ReadError",
    "EmptySlot",
    "EMPTY",
    "PaneSlot",
    "ParentSlot",
    "CurrentSlot",
    "ChildSlot",
]
