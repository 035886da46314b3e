# src/todo_cras/store/codec.py

"""
Text codec for the todo store.

Layout (one record per line):

    Category name: Work\tcolor: Red\tprobability: 0.50
        Task name: Report\tdeadline: "2024-01-01 10:00"
        Task name: Slides\tdeadline: "none"

A task line belongs to the closest category line above it.
"""

from __future__ import annotations

import logging
import re

from ..errors import DuplicateCategory, ParseError
from .models import (
    UNCLASSIFIED,
    Category,
    Color,
    Task,
    TodoList,
    format_deadline,
    parse_probability,
    parse_stored_deadline,
    unclassified_category,
)

logger = logging.getLogger(__name__)

CATEGORY_LINE = re.compile(
    r"^Category name: (?P<name>[^\t]+)\tcolor: (?P<color>[^\t]+)\tprobability: (?P<probability>[^\t]+)$"
)
TASK_LINE = re.compile(r"^    Task name: (?P<name>[^\t]+)\tdeadline: (?P<deadline>.*)$")


def _parse_category(match: re.Match[str]) -> Category:
    return Category(
        name=match["name"],
        color=Color.from_name(match["color"]),
        probability=parse_probability(match["probability"]),
    )


def _parse_task(match: re.Match[str], category: str) -> Task:
    return Task(
        task=match["name"],
        deadline=parse_stored_deadline(match["deadline"]),
        category=category,
    )


def parse(text: str) -> tuple[list[Task], list[Category]]:
    """
    Parse store text into (tasks, categories).

    Unrecognized lines are logged and skipped. An invalid color, probability or
    deadline, or a repeated category name, aborts the whole parse with the
    matching ParseError subclass. The Unclassified category is appended when
    the text does not define it, and always has probability 1.0.
    """
    tasks: list[Task] = []
    categories: list[Category] = []
    seen: set[str] = set()
    current: Category | None = None

    # Records end at "\n" only; str.splitlines() also breaks on form feed, NEL and U+2028.
    for line_no, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        try:
            if m := CATEGORY_LINE.match(line):
                current = _parse_category(m)
                if current.name in seen:
                    raise DuplicateCategory(f"Category {current.name!r} is defined more than once")
                seen.add(current.name)
                if current.name == UNCLASSIFIED and current.probability != 1.0:
                    logger.warning(
                        "line %d: %s probability %.2f reset to 1.00", line_no, UNCLASSIFIED, current.probability
                    )
                    current.probability = 1.0
                categories.append(current)
            elif m := TASK_LINE.match(line):
                if current is None:
                    logger.warning("line %d: task before any category, skipped: %r", line_no, line)
                    continue
                tasks.append(_parse_task(m, current.name))
            else:
                logger.warning("line %d: unrecognized, skipped: %r", line_no, line)
        except ParseError as e:
            e.line_no = line_no
            raise

    if not any(c.name == UNCLASSIFIED for c in categories):
        categories.append(unclassified_category())

    logger.debug("Parsed %d categories, %d tasks", len(categories), len(tasks))
    return tasks, categories


def serialize(categories: list[Category], tasks: list[Task]) -> str:
    """
    Render categories and their tasks back to store text.

    Tasks are grouped under their category in task-list order; a task whose
    category is not in `categories` is not written.
    """
    lines: list[str] = []
    for category in categories:
        lines.append(
            f"Category name: {category.name}\tcolor: {category.color.value}"
            f"\tprobability: {category.probability:.2f}"
        )
        for task in tasks:
            if task.category == category.name:
                lines.append(f'    Task name: {task.task}\tdeadline: "{format_deadline(task.deadline)}"')
    return "".join(f"{line}\n" for line in lines)


def parse_todo(text: str) -> TodoList:
    tasks, categories = parse(text)
    return TodoList(categories=categories, tasks=tasks)


def serialize_todo(todo: TodoList) -> str:
    return serialize(todo.categories, todo.tasks)
