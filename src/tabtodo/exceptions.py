"""Custom exceptions for tabtodo.

Everything here is fatal: cli_error_handler reports it and exits.
"""


class TabTodoError(Exception):
    """Base exception for tabtodo.

    All user-facing errors inherit from this class.
    """
    pass


class StateFileError(TabTodoError):
    """The state file could not be opened, read or written."""
    pass


class ParseError(TabTodoError):
    """A line of the state file has neither the TODO nor the DONE prefix."""

    def __init__(self, path: str, lineno: int):
        self.path = path
        self.lineno = lineno
        super().__init__(f"{path}:{lineno} - ERROR: Illegal line format")
