"""Navigation state machine over the parent/current/child slots.

``transition`` is the only way state changes: it takes the current
``NavigatorState`` and one ``Command`` and returns the complete next state.
The three slots are always computed together, so a caller never observes a
new current directory next to a stale child.

Directory reads go through an injectable ``read`` callable (defaulting to
``read_directory``) so transitions can be exercised without a filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .listing import DirectoryReader, filesystem_parent, read_directory
from .model import (
    EMPTY,
    ChildSlot,
    CurrentSlot,
    DirectoryListing,
    EmptySlot,
    FileReference,
    ParentSlot,
)


class Command(Enum):
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    ASCEND = "ascend"
    DESCEND = "descend"
    QUIT = "quit"


@dataclass(frozen=True)
class NavigatorState:
    current: CurrentSlot
    parent: ParentSlot
    child: ChildSlot


def derive_child(current: CurrentSlot, read: DirectoryReader = read_directory) -> ChildSlot:
    """Compute the child slot from the current listing's selection.

    A selected directory is read (selection left unset); a selected file
    becomes a ``FileReference``. No selection yields ``EMPTY``.
    """
    if not isinstance(current, DirectoryListing):
        return EMPTY
    entry = current.selected_entry
    if entry is None:
        return EMPTY
    path = current.child_path(entry)
    if entry.is_dir:
        return read(path)
    return FileReference(path=path)


def _read_current(path: Path, read: DirectoryReader) -> CurrentSlot:
    result = read(path)
    if isinstance(result, DirectoryListing):
        return result.with_default_selection()
    return result


def _read_parent_of(path: Path, read: DirectoryReader) -> ParentSlot:
    """Read the filesystem parent of ``path`` with ``path`` itself selected."""
    parent_path = filesystem_parent(path)
    if parent_path is None:
        return EMPTY
    result = read(parent_path)
    if isinstance(result, DirectoryListing):
        return result.with_selection(result.index_of(path.name))
    return result


def _assemble(parent: ParentSlot, current: CurrentSlot, read: DirectoryReader) -> NavigatorState:
    return NavigatorState(current=current, parent=parent, child=derive_child(current, read))


def initial_state(start_path: Path, read: DirectoryReader = read_directory) -> NavigatorState:
    """Build the startup state for ``start_path``.

    Relative paths are made absolute (not resolved) so ascending walks up to
    the real root while symlinked start directories keep their spelling.
    """
    start_path = Path(start_path).absolute()
    current = _read_current(start_path, read)
    return _assemble(_read_parent_of(start_path, read), current, read)


def _move_selection(state: NavigatorState, delta: int, read: DirectoryReader) -> NavigatorState:
    current = state.current
    if not isinstance(current, DirectoryListing) or not current.entries:
        return state
    if current.selected_index is None:
        target = 0
    else:
        target = current.selected_index + delta
    moved = current.with_selection(target)
    if moved is current:
        return state
    return _assemble(state.parent, moved, read)


def _ascend(state: NavigatorState, read: DirectoryReader) -> NavigatorState:
    parent = state.parent
    if isinstance(parent, EmptySlot):
        return state
    if isinstance(parent, DirectoryListing):
        current: CurrentSlot = parent.with_default_selection()
    else:
        current = parent
    return _assemble(_read_parent_of(current.path, read), current, read)


def _descend(state: NavigatorState, read: DirectoryReader) -> NavigatorState:
    current = state.current
    if not isinstance(current, DirectoryListing):
        return state
    entry = current.selected_entry
    if entry is None or not entry.is_dir:
        return _assemble(state.parent, current, read)
    new_current = _read_current(current.child_path(entry), read)
    return _assemble(current, new_current, read)


def transition(
    state: NavigatorState,
    command: Command,
    read: DirectoryReader = read_directory,
) -> NavigatorState:
    """Apply one command and return the next state.

    ``QUIT`` leaves the state untouched; stopping is the host loop's job.
    """
    if command is Command.MOVE_DOWN:
        return _move_selection(state, 1, read)
    if command is Command.MOVE_UP:
        return _move_selection(state, -1, read)
    if command is Command.ASCEND:
        return _ascend(state, read)
    if command is Command.DESCEND:
        return _descend(state, read)
    return state


__all__ = [
    "Command",
    "NavigatorState",
    "derive_child",
    "initial_state",
    "transition",
]
