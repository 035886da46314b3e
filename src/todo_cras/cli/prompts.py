# src/todo_cras/cli/prompts.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.text import Text

from ..errors import TodoError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RichPrompter:
    """Prompter backed by rich.prompt. Blocks on stdin; EOFError/KeyboardInterrupt propagate."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def choose(self, title: str, options: Sequence[str]) -> int:
        if not options:
            raise ValueError("choose() needs at least one option")
        if title:
            self.console.print(Text(title, style="bold"))
        for i, option in enumerate(options, start=1):
            # Text(): option labels are user data, not markup.
            self.console.print(Text(f"{i}: {option}"))
        return IntPrompt.ask(
            "Choice",
            console=self.console,
            choices=[str(i) for i in range(1, len(options) + 1)],
            show_choices=False,
        )

    def text(self, message: str) -> str:
        return Prompt.ask(Text(message), console=self.console)

    def typed(self, message: str, convert: Callable[[str], T]) -> T:
        while True:
            raw = Prompt.ask(Text(message), console=self.console, default="", show_default=False)
            try:
                return convert(raw)
            except (TodoError, ValueError) as e:
                logger.debug("Rejected input %r for %r: %s", raw, message, e)
                self.console.print(Text(str(e), style="red"))

    def confirm(self, message: str) -> bool:
        return Confirm.ask(Text(message), console=self.console)
