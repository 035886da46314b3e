# src/todo_cras/store/models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from ..errors import InvalidColor, InvalidDeadline, InvalidProbability

UNCLASSIFIED = "Unclassified"

DEADLINE_FORMAT = "%Y-%m-%d %H:%M"
NO_DEADLINE = "none"

_DEADLINE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")


class Color(StrEnum):
    """The eight terminal colors a category can be shown in."""

    BLACK = "Black"
    BLUE = "Blue"
    GREEN = "Green"
    RED = "Red"
    CYAN = "Cyan"
    MAGENTA = "Magenta"
    YELLOW = "Yellow"
    WHITE = "White"

    @classmethod
    def from_name(cls, raw: str) -> Color:
        key = raw.strip().lower()
        for color in cls:
            if color.value.lower() == key:
                return color
        raise InvalidColor(f"Invalid color {raw!r} (expected one of: {', '.join(cls)})")

    @property
    def style(self) -> str:
        """rich style name for this color."""
        return self.value.lower()


@dataclass(slots=True)
class Category:
    name: str
    probability: float
    color: Color


@dataclass(slots=True)
class Task:
    task: str
    deadline: datetime | None
    category: str


def unclassified_category() -> Category:
    return Category(name=UNCLASSIFIED, probability=1.0, color=Color.WHITE)


@dataclass(slots=True)
class TodoList:
    """
    Categories and tasks loaded from one store file.

    Tasks point at categories by name only; the edit operations in
    core.editing keep the two lists consistent.
    """

    categories: list[Category] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)

    def category_names(self) -> list[str]:
        return [c.name for c in self.categories]

    def task_names(self) -> list[str]:
        return [t.task for t in self.tasks]

    def find_category(self, name: str) -> Category | None:
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def tasks_in(self, name: str) -> list[Task]:
        return [t for t in self.tasks if t.category == name]

    def ensure_unclassified(self) -> bool:
        """Append the Unclassified category if missing. Returns True if it was added."""
        if self.find_category(UNCLASSIFIED) is not None:
            return False
        self.categories.append(unclassified_category())
        return True


# ---- value parsing shared by the codec, edit operations and prompts ----


def parse_probability(raw: str | float) -> float:
    if isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            raise InvalidProbability(f"Invalid probability {raw!r}") from None
    else:
        value = float(raw)

    # NaN fails both comparisons.
    if not 0.0 <= value <= 1.0:
        raise InvalidProbability(f"Probability {raw} outside 0..1")
    return value


def parse_deadline(raw: str) -> datetime | None:
    """Parse a stored deadline: the literal "none" or "YYYY-MM-DD HH:MM"."""
    value = raw.strip()
    if value == NO_DEADLINE:
        return None
    if not _DEADLINE_SHAPE.fullmatch(value):
        raise InvalidDeadline(f"Invalid deadline {raw!r} (expected YYYY-MM-DD HH:MM or none)")
    try:
        return datetime.strptime(value, DEADLINE_FORMAT)
    except ValueError as e:
        raise InvalidDeadline(f"Invalid deadline {raw!r}: {e}") from None


def parse_stored_deadline(raw: str) -> datetime | None:
    """Deadline field of a task line: optionally wrapped in one pair of double quotes."""
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    if '"' in value:
        raise InvalidDeadline(f"Invalid deadline {raw!r} (unbalanced quotes)")
    return parse_deadline(value)


def parse_deadline_input(raw: str) -> datetime | None:
    """Interactive variant: an empty answer means no deadline."""
    if not raw.strip():
        return None
    return parse_deadline(raw)


def format_deadline(deadline: datetime | None) -> str:
    if deadline is None:
        return NO_DEADLINE
    return deadline.strftime(DEADLINE_FORMAT)
