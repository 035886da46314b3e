# src/todo_cras/core/editing.py

"""
Edit operations over a TodoList.

All functions mutate the list in place and take 0-based indices. They validate
their input and raise a TodoError subclass before touching anything, so a
rejected operation leaves both collections unchanged.

Category identity is its name. Renaming a category renames it on every task
that referenced it, in the same call.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import StrEnum
from typing import Any

from ..errors import InvalidIndex, InvalidName, ProtectedCategory, UnknownCategory
from ..store.models import (
    UNCLASSIFIED,
    Category,
    Color,
    Task,
    TodoList,
    parse_probability,
)

logger = logging.getLogger(__name__)


class CategoryField(StrEnum):
    NAME = "name"
    PROBABILITY = "probability"
    COLOR = "color"


class TaskField(StrEnum):
    NAME = "name"
    DEADLINE = "deadline"
    CATEGORY = "category"


def validate_name(name: str, *, what: str = "name") -> str:
    if not name or not name.strip():
        raise InvalidName(f"{what.capitalize()} must not be empty")
    # Any character str.splitlines() breaks on counts as a line break.
    if "\t" in name or name.splitlines() != [name]:
        raise InvalidName(f"{what.capitalize()} must not contain tabs or line breaks: {name!r}")
    return name


def _check_index(items: list[Any], index: int, what: str) -> None:
    if not 0 <= index < len(items):
        raise InvalidIndex(f"No {what} #{index + 1} (have {len(items)})")


def _require_category(todo: TodoList, name: str) -> None:
    if todo.find_category(name) is None:
        raise UnknownCategory(f"Unknown category {name!r}")


# ---- categories ----


def add_category(todo: TodoList, name: str, probability: float, color: Color) -> Category:
    validate_name(name, what="category name")
    if todo.find_category(name) is not None:
        raise InvalidName(f"Category {name!r} already exists")
    probability = parse_probability(probability)
    if name == UNCLASSIFIED and probability != 1.0:
        raise ProtectedCategory(f"Probability of special category {UNCLASSIFIED} is fixed at 1.00")
    category = Category(name=name, probability=probability, color=color)
    todo.categories.append(category)
    logger.info("Added category %r", name)
    return category


def edit_category(todo: TodoList, index: int, field: CategoryField, value: Any) -> Category:
    _check_index(todo.categories, index, "category")
    category = todo.categories[index]

    if field == CategoryField.NAME:
        new_name = validate_name(value, what="category name")
        if new_name == category.name:
            return category
        if category.name == UNCLASSIFIED:
            raise ProtectedCategory(f"Cannot rename special category {UNCLASSIFIED}")
        if todo.find_category(new_name) is not None:
            raise InvalidName(f"Category {new_name!r} already exists")

        old_name = category.name
        moved = 0
        for task in todo.tasks:
            if task.category == old_name:
                task.category = new_name
                moved += 1
        category.name = new_name
        logger.info("Renamed category %r -> %r (%d tasks)", old_name, new_name, moved)

    elif field == CategoryField.PROBABILITY:
        probability = parse_probability(value)
        if category.name == UNCLASSIFIED and probability != 1.0:
            raise ProtectedCategory(f"Probability of special category {UNCLASSIFIED} is fixed at 1.00")
        category.probability = probability
    elif field == CategoryField.COLOR:
        category.color = value if isinstance(value, Color) else Color.from_name(str(value))
    else:
        raise ValueError(f"Unknown category field: {field!r}")

    return category


def delete_category(todo: TodoList, index: int) -> Category:
    """Remove a category; its tasks move to Unclassified."""
    _check_index(todo.categories, index, "category")
    category = todo.categories[index]
    if category.name == UNCLASSIFIED:
        raise ProtectedCategory(f"Cannot delete special category {UNCLASSIFIED}")

    moved = 0
    for task in todo.tasks:
        if task.category == category.name:
            task.category = UNCLASSIFIED
            moved += 1

    # Appending keeps `index` valid.
    todo.ensure_unclassified()
    del todo.categories[index]

    logger.info("Deleted category %r (%d tasks moved to %s)", category.name, moved, UNCLASSIFIED)
    return category


# ---- tasks ----


def add_task(todo: TodoList, name: str, deadline: datetime | None, category: str) -> Task:
    validate_name(name, what="task name")
    _require_category(todo, category)
    task = Task(task=name, deadline=deadline, category=category)
    todo.tasks.append(task)
    logger.info("Added task %r to %r", name, category)
    return task


def edit_task(todo: TodoList, index: int, field: TaskField, value: Any) -> Task:
    _check_index(todo.tasks, index, "task")
    task = todo.tasks[index]

    if field == TaskField.NAME:
        task.task = validate_name(value, what="task name")
    elif field == TaskField.DEADLINE:
        if value is not None and not isinstance(value, datetime):
            raise TypeError(f"deadline must be a datetime or None, got {type(value).__name__}")
        task.deadline = value
    elif field == TaskField.CATEGORY:
        _require_category(todo, value)
        task.category = value
    else:
        raise ValueError(f"Unknown task field: {field!r}")

    return task


def delete_task(todo: TodoList, index: int) -> Task:
    _check_index(todo.tasks, index, "task")
    task = todo.tasks.pop(index)
    logger.info("Deleted task %r", task.task)
    return task
