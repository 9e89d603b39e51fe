"""tabtodo command-line interface."""

import argparse
from typing import List, Optional

from .error_handling import cli_error_handler
from .logger import setup_logger
from .models import AppState
from .storage import read_file, write_file


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="tabtodo", description="Two-tab TODO/DONE tracker in the terminal."
    )
    p.add_argument("file", help="Path to the state file (TODO: / DONE: lines)")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: load FILE, run the TUI, save FILE on quit."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger()

    with cli_error_handler():
        todos, done = read_file(args.file)
        from .tui import start_curses

        state = start_curses(AppState(todos=todos, done=done))
        write_file(args.file, state.todos, state.done)


if __name__ == "__main__":
    main()
