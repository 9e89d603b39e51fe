"""File I/O for the todo/done state file."""

from typing import Iterable, List, Tuple

from .exceptions import ParseError, StateFileError
from .logger import get_logger
from .models import DONE_PREFIX, TODO_PREFIX

logger = get_logger(__name__)


def parse_lines(lines: Iterable[str], path: str) -> Tuple[List[str], List[str]]:
    """Bucket tagged lines into (todos, done), keeping file order.

    Raises ParseError on the first line that carries neither prefix;
    path is only used for the diagnostic.
    """
    todos: List[str] = []
    done: List[str] = []

    for lineno, line in enumerate(lines, start=1):
        if line.startswith(TODO_PREFIX):
            todos.append(line[len(TODO_PREFIX):].strip())
        elif line.startswith(DONE_PREFIX):
            done.append(line[len(DONE_PREFIX):].strip())
        else:
            raise ParseError(path, lineno)

    return todos, done


def format_lines(todos: List[str], done: List[str]) -> List[str]:
    """Serialize both lists, all todos first, one newline-terminated line per item."""
    return [f"{TODO_PREFIX}{t}\n" for t in todos] + [f"{DONE_PREFIX}{d}\n" for d in done]


def read_file(path: str) -> Tuple[List[str], List[str]]:
    """Load the state file.

    Returns a tuple of:
      - todos: items tagged "TODO: "
      - done: items tagged "DONE: "

    The file is not created when missing; that is a StateFileError.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise StateFileError(f"Could not read {path}: {e}") from e

    todos, done = parse_lines(lines, path)
    logger.debug("Loaded %d todo and %d done items from %s", len(todos), len(done), path)
    return todos, done


def write_file(path: str, todos: List[str], done: List[str]) -> None:
    """Rewrite the file from in-memory state (todos, then done)."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(format_lines(todos, done))
    except OSError as e:
        raise StateFileError(f"Could not write {path}: {e}") from e

    logger.debug("Saved %d todo and %d done items to %s", len(todos), len(done), path)
