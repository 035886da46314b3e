# src/todo_cras/cli/main.py

"""
CLI entrypoint.

    todo-cras        show every category that has tasks
    todo-cras -p     show categories picked by their probability (shell greeting)
    todo-cras -e     edit categories and tasks, then save
    anything else    print usage
"""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Sequence
from datetime import datetime

from rich.console import Console
from rich.text import Text

from ..config import Settings, get_settings
from ..core.display import render_lines
from ..core.ports import Prompter, RandomSource
from ..errors import TodoError
from ..logging_setup import level_from_name, setup_logging
from ..store.todo_file import TodoFile
from .prompts import RichPrompter
from .session import run_edit_mode

logger = logging.getLogger(__name__)

USAGE = """Usage:
    todo-cras <no arguments>: Display tasks
              -p:             Display tasks, picking categories at random by probability
              -e:             Edit tasks and categories
              -h:             Display this help"""


def show(
    todo_file: TodoFile,
    console: Console,
    *,
    use_probability: bool,
    random_source: RandomSource = random.random,
    backlog_marker: bool = True,
) -> None:
    todo = todo_file.load()
    lines = render_lines(
        todo.categories,
        todo.tasks,
        use_probability=use_probability,
        random_source=random_source,
        clock=datetime.now if backlog_marker else None,
    )
    for line in lines:
        console.print(Text(line.text, style=line.color.style))


def print_help(console: Console) -> None:
    console.print(Text(USAGE))


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    console: Console | None = None,
    prompter: Prompter | None = None,
    random_source: RandomSource = random.random,
) -> int:
    """Run one command and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    setup_logging(log_dir=settings.log_dir, console_level=level_from_name(settings.log_level))

    console = console or Console()
    todo_file = TodoFile(settings.todo_file)
    command = argv[0] if argv else None
    logger.debug("command=%s file=%s", command, todo_file.path)

    try:
        if command is None:
            show(todo_file, console, use_probability=False, backlog_marker=settings.backlog_marker)
        elif command == "-p":
            show(
                todo_file,
                console,
                use_probability=True,
                random_source=random_source,
                backlog_marker=settings.backlog_marker,
            )
        elif command == "-e":
            run_edit_mode(
                todo_file,
                prompter or RichPrompter(console),
                console,
                alt_screen=settings.alt_screen,
            )
        else:
            print_help(console)
    except TodoError as e:
        logger.debug("Command %s failed", command, exc_info=True)
        console.print(Text(str(e), style="red"))
        return 1
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, edit aborted.")
        console.print(Text("\nEditing aborted, nothing was saved.", style="red"))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
