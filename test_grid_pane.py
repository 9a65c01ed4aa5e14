import unittest

from grid_pane import GridPane, clip_cell
from screen_layout import Rect


class DummyWin:
    def __init__(self, h=24, w=80):
        self._h = h
        self._w = w
        self.calls = []

    def getmaxyx(self):
        return self._h, self._w

    def addnstr(self, y, x, text, n, attr=0):
        self.calls.append((y, x, text[:n], attr))


class ClipCellTests(unittest.TestCase):
    def test_pads_and_truncates_to_width(self):
        self.assertEqual(clip_cell("abc", 0, 5, 40), (0, "abc  "))
        self.assertEqual(clip_cell("abcdefgh", 2, 4, 40), (2, "abcd"))

    def test_clips_left_edge(self):
        self.assertEqual(clip_cell("abcdef", -2, 6, 40), (0, "cdef"))

    def test_clips_right_edge(self):
        self.assertEqual(clip_cell("abcdef", 36, 6, 40), (36, "abcd"))

    def test_fully_hidden(self):
        self.assertIsNone(clip_cell("abc", 40, 3, 40))
        self.assertIsNone(clip_cell("abc", -3, 3, 40))


class StatusLineTests(unittest.TestCase):
    def test_status_fills_row(self):
        win = DummyWin()
        GridPane().draw_status(win, Rect(23, 0, 1, 20), " TABLE")
        y, x, text, _ = win.calls[0]
        self.assertEqual((y, x), (23, 0))
        self.assertEqual(text, " TABLE".ljust(20))


if __name__ == "__main__":
    unittest.main()
