from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence, TextIO

from .errors import TodoInputError
from .processor import parse_input, render
from .settings import Settings, get_settings
from .utils import setup_logger


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """
    Build the argument parser for the todo-app command.
    """
    parser = argparse.ArgumentParser(
        prog=settings.program_name,
        description="Echo back a todo item passed as JSON.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-add",
        "--add",
        dest="add",
        default=settings.default_item,
        metavar="JSON",
        help='Item to add to todo list.\n\t{"todo": task to do, "due": date due (YYYY-MM-DD)}',
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def _discard_stdout() -> None:
    """
    Point stdout at devnull so the interpreter's exit-time flush of the
    unwritten output does not hit the closed pipe again.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


# PUBLIC_INTERFACE
def main(argv: Optional[Sequence[str]] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Parse the -add value, print the confirmation and return the exit status.

    Returns:
        0 on success, 1 when the input is rejected or the output cannot be
        written.
    """
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    logger = setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        item = parse_input(args.add, settings.due_date_format)
    except TodoInputError as e:
        logger.error(str(e))
        return 1

    _, err = render(item, stdout)
    if err is not None:
        logger.error("Failed to write output: %s", err)
        if stdout is None and isinstance(err, BrokenPipeError):
            _discard_stdout()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
