"""Immediate-mode drawing helper on top of a curses window."""

import curses
from enum import Enum
from typing import Dict, Optional


class Style(Enum):
    REGULAR = "regular"
    HIGHLIGHT = "highlight"


DEFAULT_ATTRS = {
    Style.REGULAR: curses.A_NORMAL,
    Style.HIGHLIGHT: curses.A_REVERSE,
}


class Ui:
    """Draws labels and list rows top to bottom, once per frame.

    Call begin() first, then any mix of label() and begin_list() /
    list_element() / end_list(), then end(). Only one list can be open at a
    time, and list_element() is only valid inside one.
    """

    def __init__(self, stdscr, attrs: Optional[Dict[Style, int]] = None):
        self.stdscr = stdscr
        self.attrs = dict(DEFAULT_ATTRS if attrs is None else attrs)
        self.list_curr: Optional[int] = None
        self.row = 0
        self.col = 0

    def begin(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def label(self, text: str, style: Style = Style.REGULAR) -> None:
        height, width = self.stdscr.getmaxyx()
        avail = width - 1 - self.col
        if self.row < height and avail > 0:
            self.stdscr.addnstr(self.row, self.col, text, avail, self.attrs[style])
        self.row += 1

    def begin_list(self, active_id: int) -> None:
        assert self.list_curr is None, "Nested lists are not supported"
        self.list_curr = active_id

    def list_element(self, text: str, id: int) -> None:
        assert self.list_curr is not None, "List not started"
        style = Style.HIGHLIGHT if id == self.list_curr else Style.REGULAR
        self.label(text, style)

    def end_list(self) -> None:
        self.list_curr = None

    def end(self) -> None:
        pass
