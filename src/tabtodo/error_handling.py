"""Error handling utilities for tabtodo."""

import sys
from contextlib import contextmanager
from typing import Generator

from .exceptions import TabTodoError
from .logger import get_logger

logger = get_logger(__name__)


@contextmanager
def cli_error_handler() -> Generator[None, None, None]:
    """Context manager for CLI error handling.

    Logs TabTodoError messages and converts them to exit status 1.
    KeyboardInterrupt exits with 130.

    Usage:
        with cli_error_handler():
            todos, done = read_file(path)
    """
    try:
        yield
    except TabTodoError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)
