"""tabtodo - two-list TODO/DONE tracker for the terminal."""

__version__ = "1.0.0"

from .models import AppState, Tab, TODO_PREFIX, DONE_PREFIX
from .storage import read_file, write_file
from .core import list_up, list_down, list_transfer
from .exceptions import TabTodoError, StateFileError, ParseError

__all__ = [
    "AppState",
    "Tab",
    "TODO_PREFIX",
    "DONE_PREFIX",
    "read_file",
    "write_file",
    "list_up",
    "list_down",
    "list_transfer",
    "TabTodoError",
    "StateFileError",
    "ParseError",
]
