"""Keyboard events and their navigation commands.

Only press events map to commands. Terminals in raw mode report presses
only, but release/repeat kinds exist so other input sources can feed the
same mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .navigator import Command


class KeyKind(Enum):
    PRESS = "press"
    RELEASE = "release"
    REPEAT = "repeat"


@dataclass(frozen=True)
class KeyEvent:
    key: str
    kind: KeyKind = KeyKind.PRESS


KEY_COMMANDS: dict[str, Command] = {
    "q": Command.QUIT,
    "DOWN": Command.MOVE_DOWN,
    "UP": Command.MOVE_UP,
    "LEFT": Command.ASCEND,
    "RIGHT": Command.DESCEND,
}


def command_for_event(event: KeyEvent) -> Command | None:
    """Return the command bound to ``event`` or ``None`` when it is ignored."""
    if event.kind is not KeyKind.PRESS:
        return None
    return KEY_COMMANDS.get(event.key)


__all__ = ["KeyKind", "KeyEvent", "KEY_COMMANDS", "command_for_event"]
