import os
import tempfile
import unittest
from unittest.mock import patch

from filesystem import LocalFilesystem
from runner import SubprocessRunner
from shell_state import ShellState


class TestShellState(unittest.TestCase):
    def setUp(self):
        self.root = os.path.abspath(os.sep + "work")
        self.state = ShellState(self.root)

    def test_initial_state(self):
        self.assertEqual(self.root, self.state.location)
        self.assertEqual([self.root], self.state.history)
        self.assertEqual(0, self.state.cursor)
        self.assertEqual(0, len(self.state.registry))
        self.assertEqual({}, self.state.env_vars)

    def test_defaults_to_cwd_and_local_collaborators(self):
        with tempfile.TemporaryDirectory() as tmp:
            old = os.getcwd()
            os.chdir(tmp)
            try:
                state = ShellState()
            finally:
                os.chdir(old)
        self.assertEqual(os.path.abspath(os.path.realpath(tmp)),
                         os.path.realpath(state.location))
        self.assertIsInstance(state.fs, LocalFilesystem)
        self.assertIsInstance(state.runner, SubprocessRunner)

    def test_resolve_joins_on_location(self):
        self.assertEqual(os.path.join(self.root, "a.txt"), self.state.resolve("a.txt"))

    # -------------------------
    # history
    # -------------------------
    def test_visit_appends_and_moves_cursor(self):
        self.state.visit("a")
        self.state.visit("b")
        self.assertEqual(2, self.state.cursor)
        self.assertEqual(os.path.join(self.root, "a", "b"), self.state.location)
        self.assertEqual(self.state.history[self.state.cursor], self.state.location)

    def test_backward_at_start_is_noop(self):
        self.assertFalse(self.state.go_backward())
        self.assertEqual(self.root, self.state.location)
        self.assertEqual(0, self.state.cursor)

    def test_forward_at_end_is_noop(self):
        self.assertFalse(self.state.go_forward())
        self.assertEqual(self.root, self.state.location)

    def test_backward_stabilizes_at_first_entry(self):
        self.state.visit("a")
        self.state.visit("b")
        for _ in range(10):
            self.state.go_backward()
            self.assertEqual(self.state.history[self.state.cursor], self.state.location)
        self.assertEqual(self.root, self.state.location)
        self.assertEqual(0, self.state.cursor)

    def test_forward_stabilizes_at_last_entry(self):
        self.state.visit("a")
        self.state.visit("b")
        last = self.state.location
        while self.state.go_backward():
            pass
        for _ in range(10):
            self.state.go_forward()
            self.assertEqual(self.state.history[self.state.cursor], self.state.location)
        self.assertEqual(last, self.state.location)

    def test_navigation_does_not_truncate(self):
        self.state.visit("a")
        self.state.go_backward()
        self.state.visit("c")
        self.assertEqual(3, len(self.state.history))
        self.assertEqual(2, self.state.cursor)

    # -------------------------
    # environment overlay
    # -------------------------
    def test_set_var_last_write_wins(self):
        self.state.set_var("X", "1")
        self.state.set_var("X", "2")
        self.assertEqual("2", self.state.get_var("X"))

    def test_overlay_not_inherited_from_environment(self):
        with patch.dict(os.environ, {"ONLY_IN_OS": "yes"}):
            self.assertIsNone(self.state.get_var("ONLY_IN_OS"))

    def test_set_var_does_not_touch_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            self.state.set_var("X", "999")
            self.assertNotIn("X", os.environ)

    def test_load_env_skips_lines_without_separator(self):
        applied = self.state.load_env("A=1\nBADLINE\nB = 2")
        self.assertEqual(2, applied)
        self.assertEqual({"A": "1", "B": "2"}, self.state.env_vars)

    def test_load_env_splits_on_first_equals(self):
        self.state.load_env("URL = http://x?a=b\n")
        self.assertEqual("http://x?a=b", self.state.get_var("URL"))

    def test_load_env_only_splits_on_line_feed(self):
        applied = self.state.load_env("A=x\x0cy\r\nB=1\x1e2\u2028z\r\n")
        self.assertEqual(2, applied)
        self.assertEqual({"A": "x\x0cy", "B": "1\x1e2\u2028z"}, self.state.env_vars)

    def test_load_env_overwrites(self):
        self.state.set_var("A", "old")
        self.state.load_env("A=new")
        self.assertEqual("new", self.state.get_var("A"))


if __name__ == "__main__":
    unittest.main()
