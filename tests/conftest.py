"""Pytest configuration and fixtures for tabtodo tests."""
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class FakeScreen:
    """Stand-in for a curses window that records what gets drawn."""

    def __init__(self, keys: Optional[List[int]] = None, height: int = 24, width: int = 80):
        self.keys = list(keys or [])
        self.height = height
        self.width = width
        self.cells: Dict[int, Tuple[int, str, int]] = {}
        self.erased = 0
        self.refreshed = 0
        self.keypad_on = False

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.cells.clear()
        self.erased += 1

    def addnstr(self, y, x, text, n, attr=0):
        self.cells[y] = (x, text[:n], attr)

    def refresh(self):
        self.refreshed += 1

    def keypad(self, flag):
        self.keypad_on = flag

    def getch(self):
        # Quit once the scripted keys run out
        if not self.keys:
            return ord("q")
        return self.keys.pop(0)

    def text(self, y: int) -> str:
        return self.cells[y][1] if y in self.cells else ""

    def attr(self, y: int) -> int:
        return self.cells[y][2]

    def lines(self) -> List[str]:
        return [self.cells[y][1] for y in sorted(self.cells)]


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to a previous test's captured stderr."""
    logger = logging.getLogger("tabtodo")
    yield
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def screen() -> FakeScreen:
    return FakeScreen()


@pytest.fixture
def state_file(tmp_path: Path):
    """Factory writing a state file with the given content."""

    def _make(content: str) -> Path:
        path = tmp_path / "todo.txt"
        path.write_text(content, encoding="utf-8")
        return path

    return _make
