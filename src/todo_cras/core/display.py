# src/todo_cras/core/display.py

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime

from ..store.models import Category, Color, Task, format_deadline
from .ports import Clock, RandomSource

logger = logging.getLogger(__name__)

BACKLOG_MARKER = "[BACKLOG]"


@dataclass(frozen=True, slots=True)
class DisplayLine:
    text: str
    color: Color


def sort_tasks(tasks: list[Task]) -> list[Task]:
    """Earliest deadline first; tasks without a deadline last, in their original order."""
    return sorted(tasks, key=lambda t: (t.deadline is None, t.deadline or datetime.min))


def draw_threshold(use_probability: bool, random_source: RandomSource = random.random) -> float:
    """One draw per invocation; 0.0 lets every category through."""
    if not use_probability:
        return 0.0
    return random_source()


def visible_categories(categories: list[Category], tasks: list[Task], threshold: float) -> list[Category]:
    """Categories that have at least one task and a probability >= threshold."""
    used = {t.category for t in tasks}
    return [c for c in categories if c.name in used and c.probability >= threshold]


def _task_line(task: Task, now: datetime | None) -> str:
    when = "No deadline" if task.deadline is None else format_deadline(task.deadline)
    line = f"    {when}: {task.task}"
    if now is not None and task.deadline is not None and task.deadline < now:
        line = f"{line} {BACKLOG_MARKER}"
    return line


def render_lines(
    categories: list[Category],
    tasks: list[Task],
    *,
    use_probability: bool,
    random_source: RandomSource = random.random,
    clock: Clock | None = datetime.now,
) -> list[DisplayLine]:
    """
    Lines to print for a display run.

    Each shown category contributes its name followed by its tasks in deadline
    order, all in the category color. Passing clock=None disables the backlog
    marker for overdue tasks.
    """
    threshold = draw_threshold(use_probability, random_source)
    shown = visible_categories(categories, tasks, threshold)
    logger.debug("Display threshold=%.3f, showing %d/%d categories", threshold, len(shown), len(categories))

    now = clock() if clock is not None else None
    ordered = sort_tasks(tasks)

    out: list[DisplayLine] = []
    for category in shown:
        out.append(DisplayLine(category.name, category.color))
        for task in ordered:
            if task.category == category.name:
                out.append(DisplayLine(_task_line(task, now), category.color))
    return out
