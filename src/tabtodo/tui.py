"""tabtodo curses-based terminal user interface."""

import curses
from typing import Dict

from .core import list_down, list_transfer, list_up
from .models import SEPARATOR, AppState, Tab
from .ui import Style, Ui

REGULAR_PAIR = 1
HIGHLIGHT_PAIR = 2

KEYS_QUIT = (ord("q"),)
KEYS_UP = (curses.KEY_UP, ord("w"))
KEYS_DOWN = (curses.KEY_DOWN, ord("s"))
KEYS_TAB = (ord("\t"),)
KEYS_CONFIRM = (10, 13, curses.KEY_ENTER)


def init_colors() -> Dict[Style, int]:
    """Set up the regular and highlight pairs; reverse video without colors."""
    if not curses.has_colors():
        return {Style.REGULAR: curses.A_NORMAL, Style.HIGHLIGHT: curses.A_REVERSE}
    curses.start_color()
    curses.init_pair(REGULAR_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)
    curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)
    return {
        Style.REGULAR: curses.color_pair(REGULAR_PAIR),
        Style.HIGHLIGHT: curses.color_pair(HIGHLIGHT_PAIR),
    }


class TodoApp:
    """Two-tab todo/done browser over an AppState."""

    def __init__(self, stdscr, state: AppState, ui: Ui):
        self.stdscr = stdscr
        self.state = state
        self.ui = ui

    def row_text(self, index: int, item: str) -> str:
        if self.state.tab is Tab.DONE:
            return f" [x] {item}"
        mark = "-" if index == self.state.todo_curr else " "
        return f" [{mark}] {item}"

    def draw(self):
        """Render tab header, separator and the active list."""
        self.stdscr.erase()
        ui = self.ui
        ui.begin(0, 0)
        ui.label(self.state.tab.header, Style.REGULAR)
        ui.label(SEPARATOR, Style.REGULAR)
        ui.begin_list(self.state.cursor)
        for index, item in enumerate(self.state.active_list()):
            ui.list_element(self.row_text(index, item), index)
        ui.end_list()
        ui.end()
        self.stdscr.refresh()

    def handle_key(self, ch: int) -> None:
        state = self.state
        if ch in KEYS_QUIT:
            state.running = False
        elif ch in KEYS_UP:
            state.cursor = list_up(state.active_list(), state.cursor)
        elif ch in KEYS_DOWN:
            state.cursor = list_down(state.active_list(), state.cursor)
        elif ch in KEYS_TAB:
            state.tab = state.tab.toggle()
        elif ch in KEYS_CONFIRM:
            state.cursor = list_transfer(state.other_list(), state.active_list(), state.cursor)

    def run(self) -> AppState:
        """Main event loop; returns the state once the user quits."""
        while self.state.running:
            self.draw()
            self.handle_key(self.stdscr.getch())
        return self.state


def start_curses(state: AppState) -> AppState:
    """Initialize curses, run the TUI and restore the terminal."""

    def _main(stdscr):
        curses.curs_set(0)
        stdscr.keypad(True)
        app = TodoApp(stdscr, state, Ui(stdscr, init_colors()))
        return app.run()

    return curses.wrapper(_main)
