# src/todo_cras/store/todo_file.py

from __future__ import annotations

import contextlib
import logging
import os
import shutil
from pathlib import Path

from ..errors import FileUnreadable, FileUnwritable
from .codec import parse_todo, serialize_todo
from .models import TodoList

logger = logging.getLogger(__name__)


class TodoFile:
    """
    Plain text store file.

    Each call reads or writes the whole file and releases it right away;
    nothing is kept open between load() and save().
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TodoList:
        try:
            text = self._path.read_text("utf-8")
        except FileNotFoundError:
            raise FileUnreadable(self._path, "file does not exist (set TODO_FILE to use another path)") from None
        except (OSError, UnicodeDecodeError) as e:
            raise FileUnreadable(self._path, str(e)) from e

        todo = parse_todo(text)
        logger.info(
            "Loaded %d categories, %d tasks from %s", len(todo.categories), len(todo.tasks), self._path
        )
        return todo

    def save(self, todo: TodoList) -> None:
        """
        Rewrite the whole file (temp file + atomic replace).

        A symlinked path is written through to its target, and an existing
        file keeps its permission bits.
        """
        text = serialize_todo(todo)
        target = self._path.resolve()
        tmp = target.with_name(target.name + ".tmp")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            with contextlib.suppress(FileNotFoundError):
                shutil.copymode(target, tmp)
            os.replace(tmp, target)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise FileUnwritable(self._path, str(e)) from e

        logger.info(
            "Saved %d categories, %d tasks to %s", len(todo.categories), len(todo.tasks), self._path
        )
