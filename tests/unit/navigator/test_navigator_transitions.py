"""Navigator state-machine tests against an in-memory filesystem.

Walks the parent/current/child slots through selection moves, ascends,
descends, root handling, and read failures.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from fake_fs import PROJECT_TREE, FakeFilesystem
from millerview.model import EMPTY, DirectoryEntry, DirectoryListing, FileReference, ReadError
from millerview.navigator import Command, NavigatorState, derive_child, initial_state, transition

PROJECT = Path("/home/user/project")


class InitialStateTests(unittest.TestCase):
    def test_initial_selection_is_first_entry_with_directory_child(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)

        state = initial_state(PROJECT, fs.read)

        self.assertEqual(state.current.path, PROJECT)
        self.assertEqual(
            state.current.entries,
            (DirectoryEntry("src", True), DirectoryEntry("README.md", False)),
        )
        self.assertEqual(state.current.selected_index, 0)
        self.assertIsInstance(state.child, DirectoryListing)
        self.assertEqual(state.child.path, PROJECT / "src")
        self.assertIsNone(state.child.selected_index)

    def test_initial_parent_highlights_the_start_directory(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)

        state = initial_state(PROJECT, fs.read)

        self.assertEqual(state.parent.path, Path("/home/user"))
        self.assertEqual(state.parent.selected_entry, DirectoryEntry("project", True))

    def test_start_at_root_has_empty_parent(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)

        state = initial_state(Path("/"), fs.read)

        self.assertIs(state.parent, EMPTY)
        self.assertEqual(state.child.path, Path("/home"))

    def test_empty_start_directory_has_no_selection_and_empty_child(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)

        state = initial_state(PROJECT / "src" / "lib", fs.read)

        self.assertIsNone(state.current.selected_index)
        self.assertIs(state.child, EMPTY)

    def test_relative_start_path_ascends_past_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a" / "b").mkdir(parents=True)
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                state = initial_state(Path("a/b"))
                start = state
                for _ in range(2):
                    state = transition(state, Command.ASCEND)
            finally:
                os.chdir(previous_cwd)

        self.assertEqual(start.current.path, root / "a" / "b")
        self.assertEqual(start.parent.path, root / "a")
        self.assertEqual(start.parent.selected_entry, DirectoryEntry("b", True))
        self.assertEqual(state.current.path, root)
        self.assertIsInstance(state.parent, DirectoryListing)
        self.assertEqual(state.parent.path, root.parent)
        self.assertEqual(state.parent.selected_entry, DirectoryEntry(root.name, True))


class SelectionMoveTests(unittest.TestCase):
    def test_down_selects_file_and_child_becomes_file_reference(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT, fs.read)

        state = transition(state, Command.MOVE_DOWN, fs.read)

        self.assertEqual(state.current.selected_index, 1)
        self.assertEqual(state.child, FileReference(path=PROJECT / "README.md"))

    def test_down_clamps_at_last_entry_without_wrapping(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = transition(initial_state(PROJECT, fs.read), Command.MOVE_DOWN, fs.read)

        again = transition(state, Command.MOVE_DOWN, fs.read)

        self.assertIs(again, state)
        self.assertEqual(again.current.selected_index, 1)

    def test_up_floors_at_first_entry_without_wrapping(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT, fs.read)

        again = transition(state, Command.MOVE_UP, fs.read)

        self.assertIs(again, state)
        self.assertEqual(again.current.selected_index, 0)

    def test_up_after_down_restores_directory_child(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT, fs.read)

        state = transition(state, Command.MOVE_DOWN, fs.read)
        state = transition(state, Command.MOVE_UP, fs.read)

        self.assertEqual(state.current.selected_index, 0)
        self.assertEqual(state.child.path, PROJECT / "src")

    def test_moves_in_empty_directory_keep_selection_unset(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT / "src" / "lib", fs.read)

        for command in (Command.MOVE_DOWN, Command.MOVE_UP, Command.MOVE_DOWN):
            state = transition(state, command, fs.read)

        self.assertIsNone(state.current.selected_index)
        self.assertIs(state.child, EMPTY)

    def test_move_without_selection_selects_first_entry(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        listing = fs.read(PROJECT)
        state = NavigatorState(current=listing, parent=EMPTY, child=EMPTY)

        moved = transition(state, Command.MOVE_UP, fs.read)

        self.assertEqual(moved.current.selected_index, 0)
        self.assertEqual(moved.child.path, PROJECT / "src")

    def test_parent_slot_is_carried_over_unchanged_on_moves(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT, fs.read)

        moved = transition(state, Command.MOVE_DOWN, fs.read)

        self.assertIs(moved.parent, state.parent)


class AscendTests(unittest.TestCase):
    def test_left_moves_to_parent_and_rereads_grandparent(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT, fs.read)
        fs.reads.clear()

        state = transition(state, Command.ASCEND, fs.read)

        self.assertEqual(state.current.path, Path("/home/user"))
        self.assertEqual(state.current.selected_index, 0)
        self.assertEqual(state.parent.path, Path("/home"))
        self.assertEqual(state.parent.selected_entry, DirectoryEntry("user", True))
        self.assertEqual(state.child.path, PROJECT)
        self.assertIn(Path("/home"), fs.reads)

    def test_ascend_resets_selection_of_promoted_parent(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        parent = fs.read(Path("/home/user")).with_selection(1)
        current = fs.read(PROJECT).with_default_selection()
        state = NavigatorState(current=current, parent=parent, child=derive_child(current, fs.read))

        state = transition(state, Command.ASCEND, fs.read)

        self.assertEqual(state.current.selected_index, 0)
        self.assertEqual(state.current.entries, parent.entries)

    def test_ascend_to_root_empties_parent(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(Path("/home"), fs.read)

        state = transition(state, Command.ASCEND, fs.read)

        self.assertEqual(state.current.path, Path("/"))
        self.assertIs(state.parent, EMPTY)
        self.assertEqual(state.child.path, Path("/home"))

    def test_repeated_ascend_at_root_is_a_no_op(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT, fs.read)
        for _ in range(3):
            state = transition(state, Command.ASCEND, fs.read)
        at_root = state

        for _ in range(5):
            state = transition(state, Command.ASCEND, fs.read)

        self.assertEqual(at_root.current.path, Path("/"))
        self.assertIs(state, at_root)

    def test_ascend_into_unreadable_parent_keeps_walking_up(self) -> None:
        tree = dict(PROJECT_TREE)
        tree["/home/user"] = "Permission denied"
        fs = FakeFilesystem(tree)
        state = initial_state(PROJECT, fs.read)
        self.assertEqual(state.parent, ReadError(Path("/home/user"), "Permission denied"))

        state = transition(state, Command.ASCEND, fs.read)

        self.assertEqual(state.current, ReadError(Path("/home/user"), "Permission denied"))
        self.assertEqual(state.parent.path, Path("/home"))
        self.assertIs(state.child, EMPTY)


class DescendTests(unittest.TestCase):
    def test_right_into_directory_promotes_current_to_parent(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT, fs.read)
        before = state.current

        state = transition(state, Command.DESCEND, fs.read)

        self.assertIs(state.parent, before)
        self.assertEqual(state.parent.selected_index, 0)
        self.assertEqual(state.current.path, PROJECT / "src")
        self.assertEqual(
            state.current.entries,
            (DirectoryEntry("lib", True), DirectoryEntry("main.py", False)),
        )
        self.assertEqual(state.current.selected_index, 0)
        self.assertEqual(state.child.path, PROJECT / "src" / "lib")

    def test_right_on_file_only_rederives_child(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = transition(initial_state(PROJECT, fs.read), Command.MOVE_DOWN, fs.read)

        after = transition(state, Command.DESCEND, fs.read)

        self.assertIs(after.current, state.current)
        self.assertIs(after.parent, state.parent)
        self.assertEqual(after.child, FileReference(path=PROJECT / "README.md"))

    def test_right_without_selection_changes_nothing(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT / "src" / "lib", fs.read)

        after = transition(state, Command.DESCEND, fs.read)

        self.assertEqual(after, state)

    def test_descend_into_unreadable_directory_isolates_the_error(self) -> None:
        tree = dict(PROJECT_TREE)
        tree["/home/user/project/src"] = "Permission denied"
        fs = FakeFilesystem(tree)
        state = initial_state(PROJECT, fs.read)
        self.assertEqual(state.child, ReadError(PROJECT / "src", "Permission denied"))
        self.assertEqual(state.current.path, PROJECT)
        self.assertEqual(state.parent.path, Path("/home/user"))

        state = transition(state, Command.DESCEND, fs.read)

        self.assertEqual(state.current, ReadError(PROJECT / "src", "Permission denied"))
        self.assertEqual(state.parent.path, PROJECT)
        self.assertIs(state.child, EMPTY)

    def test_commands_on_error_current_are_no_ops_except_ascend(self) -> None:
        tree = dict(PROJECT_TREE)
        tree["/home/user/project/src"] = "Permission denied"
        fs = FakeFilesystem(tree)
        state = transition(initial_state(PROJECT, fs.read), Command.DESCEND, fs.read)

        for command in (Command.MOVE_DOWN, Command.MOVE_UP, Command.DESCEND):
            self.assertIs(transition(state, command, fs.read), state)

        back = transition(state, Command.ASCEND, fs.read)
        self.assertEqual(back.current.path, PROJECT)
        self.assertEqual(back.parent.path, Path("/home/user"))


class QuitTests(unittest.TestCase):
    def test_quit_returns_state_untouched_without_reads(self) -> None:
        fs = FakeFilesystem(PROJECT_TREE)
        state = initial_state(PROJECT, fs.read)
        fs.reads.clear()

        self.assertIs(transition(state, Command.QUIT, fs.read), state)
        self.assertEqual(fs.reads, [])


if __name__ == "__main__":
    unittest.main()
