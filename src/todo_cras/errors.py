# src/todo_cras/errors.py

"""
Exception hierarchy.

Library code raises these and never exits the process; only the CLI entry point
turns a TodoError into a message and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for every error the tracker reports to the user."""


# ---- parsing / validation ----


class ParseError(TodoError):
    """A store record (or a user-supplied value) failed validation."""

    def __init__(self, message: str, *, line_no: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_no = line_no

    def __str__(self) -> str:
        if self.line_no is None:
            return self.message
        return f"line {self.line_no}: {self.message}"


class InvalidColor(ParseError):
    pass


class InvalidProbability(ParseError):
    pass


class InvalidDeadline(ParseError):
    pass


class DuplicateCategory(ParseError):
    pass


# ---- edit operations ----


class ProtectedCategory(TodoError):
    pass


class InvalidName(TodoError):
    pass


class UnknownCategory(TodoError):
    pass


class InvalidIndex(TodoError, IndexError):
    pass


# ---- file access ----


class StoreError(TodoError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self._verb} {self.path}: {reason}")

    _verb = "Store error for"


class FileUnreadable(StoreError):
    _verb = "Could not read"


class FileUnwritable(StoreError):
    _verb = "Could not write"
