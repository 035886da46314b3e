# src/todo_cras/core/ports.py

"""
Ports (interfaces) used by the core.

The edit session depends on a Prompter Protocol instead of the terminal, and
display takes its random draw and clock as plain callables, so tests can fix both.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Protocol, TypeVar

T = TypeVar("T")

RandomSource = Callable[[], float]
# Returns a float in [0.0, 1.0), like random.random.

Clock = Callable[[], datetime]


class Prompter(Protocol):
    """Blocking interactive input. Every method returns an already validated value."""

    def choose(self, title: str, options: Sequence[str]) -> int:
        """Numbered single choice; returns a 1-based index into options."""
        ...

    def text(self, message: str) -> str: ...

    def typed(self, message: str, convert: Callable[[str], T]) -> T:
        """Ask until convert() accepts the answer."""
        ...

    def confirm(self, message: str) -> bool: ...
