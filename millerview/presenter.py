"""Pure mapping from navigator state to renderable pane descriptions.

Directory slots become ``ListPane`` rows; empty, file, and error slots
become ``TextPane`` blocks. Nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from .model import DirectoryListing, EmptySlot, FileReference, PaneSlot, ReadError
from .navigator import NavigatorState

DIR_SUFFIX = "/"
PARENT_TITLE = "parent"
CURRENT_TITLE = "current"
CHILD_TITLE = "child"
NO_PARENT_TEXT = "No parent directory"
NOTHING_SELECTED_TEXT = "Nothing selected"


@dataclass(frozen=True)
class ListRow:
    label: str
    is_dir: bool
    selected: bool = False


@dataclass(frozen=True)
class ListPane:
    title: str
    rows: tuple[ListRow, ...]
    selected_index: int | None = None


@dataclass(frozen=True)
class TextPane:
    title: str
    text: str
    is_error: bool = False
    is_placeholder: bool = False


PaneView = ListPane | TextPane


@dataclass(frozen=True)
class Frame:
    header: str
    parent: PaneView
    current: PaneView
    child: PaneView


def entry_label(name: str, is_dir: bool) -> str:
    return f"{name}{DIR_SUFFIX}" if is_dir else name


def listing_pane(title: str, listing: DirectoryListing) -> ListPane:
    rows = tuple(
        ListRow(
            label=entry_label(entry.name, entry.is_dir),
            is_dir=entry.is_dir,
            selected=idx == listing.selected_index,
        )
        for idx, entry in enumerate(listing.entries)
    )
    return ListPane(title=title, rows=rows, selected_index=listing.selected_index)


def slot_pane(title: str, slot: PaneSlot, empty_text: str = NOTHING_SELECTED_TEXT) -> PaneView:
    """Describe one slot as a list or text pane."""
    if isinstance(slot, DirectoryListing):
        return listing_pane(title, slot)
    if isinstance(slot, FileReference):
        return TextPane(title=title, text=str(slot.path))
    if isinstance(slot, ReadError):
        return TextPane(title=title, text=slot.message, is_error=True)
    if isinstance(slot, EmptySlot):
        return TextPane(title=title, text=empty_text, is_placeholder=True)
    raise TypeError(f"unsupported pane slot: {slot!r}")


def present(state: NavigatorState) -> Frame:
    return Frame(
        header=str(state.current.path),
        parent=slot_pane(PARENT_TITLE, state.parent, NO_PARENT_TEXT),
        current=slot_pane(CURRENT_TITLE, state.current),
        child=slot_pane(CHILD_TITLE, state.child),
    )


__all__ = [
    "DIR_SUFFIX",
    "NO_PARENT_TEXT",
    "NOTHING_SELECTED_TEXT",
    "ListRow",
    "ListPane",
    "TextPane",
    "PaneView",
    "Frame",
    "entry_label",
    "listing_pane",
    "slot_pane",
    "present",
]
