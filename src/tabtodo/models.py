"""Data models and constants for tabtodo."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

TODO_PREFIX = "TODO: "
DONE_PREFIX = "DONE: "

SEPARATOR = "------------"


class Tab(Enum):
    """Which list is currently shown and receives commands."""

    TODO = "todo"
    DONE = "done"

    def toggle(self) -> "Tab":
        return Tab.DONE if self is Tab.TODO else Tab.TODO

    @property
    def header(self) -> str:
        if self is Tab.TODO:
            return "[TODO] DONE "
        return " TODO [DONE]"


@dataclass
class AppState:
    """Both lists, their cursors, and the active tab."""

    todos: List[str] = field(default_factory=list)
    done: List[str] = field(default_factory=list)
    todo_curr: int = 0
    done_curr: int = 0
    tab: Tab = Tab.TODO
    running: bool = True

    def active_list(self) -> List[str]:
        return self.todos if self.tab is Tab.TODO else self.done

    def other_list(self) -> List[str]:
        return self.done if self.tab is Tab.TODO else self.todos

    @property
    def cursor(self) -> int:
        """Cursor of the active tab's list."""
        return self.todo_curr if self.tab is Tab.TODO else self.done_curr

    @cursor.setter
    def cursor(self, value: int) -> None:
        if self.tab is Tab.TODO:
            self.todo_curr = value
        else:
            self.done_curr = value
