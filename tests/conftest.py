# tests/conftest.py

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from todo_cras.config import Settings
from todo_cras.store.codec import parse_todo
from todo_cras.store.models import TodoList
from todo_cras.store.todo_file import TodoFile

SAMPLE_TEXT = (
    "Category name: Work\tcolor: Red\tprobability: 1.00\n"
    '    Task name: Report\tdeadline: "2024-01-01 10:00"\n'
    '    Task name: Slides\tdeadline: "none"\n'
    "Category name: Someday\tcolor: Blue\tprobability: 0.30\n"
    '    Task name: Learn Rust\tdeadline: "none"\n'
    "Category name: Unclassified\tcolor: White\tprobability: 1.00\n"
)


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture()
def todo() -> TodoList:
    return parse_todo(SAMPLE_TEXT)


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    path = tmp_path / "todo.txt"
    path.write_text(SAMPLE_TEXT, "utf-8")
    return path


@pytest.fixture()
def todo_file(store_path: Path) -> TodoFile:
    return TodoFile(store_path)


@pytest.fixture()
def settings(store_path: Path) -> Settings:
    """
    Settings pointing at the tmp store file.

    Built directly rather than from the environment to keep tests deterministic.
    """
    return Settings(
        todo_file=store_path,
        log_level="WARNING",
        log_dir=None,
        alt_screen=False,
        backlog_marker=False,
    )


@pytest.fixture()
def console() -> Console:
    """Plain, wide console writing into a buffer (read it via console.file.getvalue())."""
    return Console(file=io.StringIO(), color_system=None, width=200)
