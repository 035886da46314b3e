# src/todo_cras/cli/session.py

"""
Interactive edit session.

Menus mirror the data model: pick Category or Task, then Add/Edit/Delete,
then the field to change. Values come from a Prompter, mutations go through
core.editing. A rejected operation is reported and the loop goes on.
"""

from __future__ import annotations

import contextlib
import logging
from datetime import datetime

from rich.console import Console
from rich.text import Text

from ..core import editing
from ..core.editing import CategoryField, TaskField
from ..core.ports import Prompter
from ..errors import TodoError
from ..store.models import Color, TodoList, parse_deadline_input, parse_probability
from ..store.todo_file import TodoFile

logger = logging.getLogger(__name__)

COLOR_NAMES = [c.value for c in Color]


class EditSession:
    def __init__(self, todo: TodoList, prompter: Prompter, console: Console) -> None:
        self.todo = todo
        self.prompter = prompter
        self.console = console

    def run(self) -> None:
        """Edit until the user declines to continue."""
        while True:
            self.edit_once()
            if not self.prompter.confirm("Continue editing?"):
                break

    def edit_once(self) -> None:
        choice = self.prompter.choose("Edit:", ["Category", "Task"])
        try:
            if choice == 1:
                self._edit_categories()
            else:
                self._edit_tasks()
        except TodoError as e:
            logger.info("Edit rejected: %s", e)
            self.console.print(Text(str(e), style="red"))

    # ---- helpers ----

    def _pick_color(self, title: str) -> Color:
        return Color(COLOR_NAMES[self.prompter.choose(title, COLOR_NAMES) - 1])

    def _pick_category_name(self, title: str) -> str:
        names = self.todo.category_names()
        return names[self.prompter.choose(title, names) - 1]

    def _ask_probability(self, message: str) -> float:
        return self.prompter.typed(message, parse_probability)

    def _ask_deadline(self, message: str) -> datetime | None:
        return self.prompter.typed(message, parse_deadline_input)

    # ---- categories ----

    def _edit_categories(self) -> None:
        action = self.prompter.choose("Categories:", ["Add category", "Edit category", "Delete category"])

        if action == 1:
            name = self.prompter.text("Name: ")
            probability = self._ask_probability("Probability: ")
            color = self._pick_color("Color:")
            editing.add_category(self.todo, name, probability, color)
            return

        index = self.prompter.choose("Which category?", self.todo.category_names()) - 1

        if action == 2:
            what = self.prompter.choose("Change:", ["Change name", "Change probability", "Change color"])
            if what == 1:
                editing.edit_category(self.todo, index, CategoryField.NAME, self.prompter.text("New name: "))
            elif what == 2:
                editing.edit_category(
                    self.todo, index, CategoryField.PROBABILITY, self._ask_probability("New probability: ")
                )
            else:
                editing.edit_category(self.todo, index, CategoryField.COLOR, self._pick_color("New color:"))
            return

        editing.delete_category(self.todo, index)

    # ---- tasks ----

    def _edit_tasks(self) -> None:
        action = self.prompter.choose("Tasks:", ["Add task", "Edit task", "Delete task"])

        if action == 1:
            category = self._pick_category_name("Category:")
            name = self.prompter.text("Task name: ")
            deadline = self._ask_deadline("Deadline (YYYY-MM-DD HH:MM, empty for none): ")
            editing.add_task(self.todo, name, deadline, category)
            return

        if not self.todo.tasks:
            self.console.print(Text("There are no tasks yet.", style="yellow"))
            return

        index = self.prompter.choose("Which task?", self.todo.task_names()) - 1

        if action == 2:
            what = self.prompter.choose("Change:", ["Change task name", "Change deadline", "Change category"])
            if what == 1:
                editing.edit_task(self.todo, index, TaskField.NAME, self.prompter.text("New task name: "))
            elif what == 2:
                editing.edit_task(
                    self.todo, index, TaskField.DEADLINE, self._ask_deadline("New deadline (empty for none): ")
                )
            else:
                editing.edit_task(self.todo, index, TaskField.CATEGORY, self._pick_category_name("New category:"))
            return

        editing.delete_task(self.todo, index)


def run_edit_mode(
    todo_file: TodoFile,
    prompter: Prompter,
    console: Console,
    *,
    alt_screen: bool = True,
) -> TodoList:
    """Load, edit interactively, then rewrite the whole file once."""
    todo = todo_file.load()

    screen = console.screen() if alt_screen and console.is_terminal else contextlib.nullcontext()
    with screen:
        EditSession(todo, prompter, console).run()

    todo_file.save(todo)
    return todo
